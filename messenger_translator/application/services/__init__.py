"""Application services - business logic layer."""

from messenger_translator.application.services.user_service import UserService
from messenger_translator.application.services.language_service import LanguageService

__all__ = [
    "UserService",
    "LanguageService",
]
