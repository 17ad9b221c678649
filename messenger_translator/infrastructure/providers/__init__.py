"""Provider implementations for external services (Strategy Pattern)."""

from messenger_translator.infrastructure.providers.messenger_provider import (
    MessengerProvider,
    get_appsecret_proof,
)
from messenger_translator.infrastructure.providers.google_translate_provider import GoogleTranslateProvider

__all__ = [
    "MessengerProvider",
    "GoogleTranslateProvider",
    "get_appsecret_proof",
]
