"""Domain interfaces following Dependency Inversion Principle."""

from messenger_translator.domain.interfaces.message_provider import IMessageProvider
from messenger_translator.domain.interfaces.user_repository import IUserRepository
from messenger_translator.domain.interfaces.translation_provider import (
    ITranslationProvider,
    Language,
    TranslationResult,
)

__all__ = [
    "IMessageProvider",
    "IUserRepository",
    "ITranslationProvider",
    "Language",
    "TranslationResult",
]
