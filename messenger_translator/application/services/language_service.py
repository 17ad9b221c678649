"""Translation and language-preference service (Service Layer Pattern).

Wraps the translation backend for the two operations the event handlers
need: translating a user's text and switching the user's target language.
"""
import json
import logging
from typing import List, Optional

import redis

from messenger_translator.application.services.user_service import UserService
from messenger_translator.domain.entities.user import UserPreference
from messenger_translator.domain.exceptions import TranslationError, UserStoreError
from messenger_translator.domain.interfaces.translation_provider import ITranslationProvider, Language
from messenger_translator.locale import get_string, normalize_locale
from messenger_translator.middleware.monitoring import track_translation


logger = logging.getLogger(__name__)


class LanguageService:
    """Translates text and changes a user's translation target."""

    def __init__(
        self,
        translation_provider: ITranslationProvider,
        user_service: UserService,
        cache: Optional[redis.Redis] = None,
        cache_ttl: int = 86400
    ):
        """
        Initialize language service.

        Args:
            translation_provider: Translation backend
            user_service: Used to persist language changes
            cache: Optional Redis client for supported-language lists
            cache_ttl: Cache TTL in seconds
        """
        self.translation_provider = translation_provider
        self.user_service = user_service
        self.cache = cache
        self.cache_ttl = cache_ttl
        self._cache_prefix = "languages:"

    def translate(self, text: str, target_language: str, locale: str) -> str:
        """
        Translate text into target_language.

        Args:
            text: User's message
            target_language: Language code to translate into
            locale: User's locale (for log context)

        Returns:
            Translated text

        Raises:
            TranslationError: If the backend fails
        """
        try:
            result = self.translation_provider.translate(text, target_language)
        except TranslationError:
            track_translation(False)
            raise

        track_translation(True)
        logger.debug(
            f"Translated {len(text)} chars {result.detected_source_language or '?'} -> "
            f"{target_language} (locale={locale})"
        )
        return result.text

    def change_language(self, user: UserPreference, language: Optional[str], locale: str) -> str:
        """
        Switch the user's translation target.

        Never raises: every outcome is a localized message for the user.

        Args:
            user: Record to update
            language: Requested language, as typed by the user (code or name)
            locale: Locale for the reply

        Returns:
            Localized confirmation or error message
        """
        if not language:
            return get_string(locale, "language_unsupported", language=language or "")

        try:
            supported = self.get_supported_languages(locale)
        except TranslationError as e:
            logger.error(f"Could not load supported languages for {user.id}: {e}")
            return get_string(locale, "language_error")

        match = self._match_language(language, supported)
        if match is None:
            logger.info(f"User {user.id} requested unsupported language {language!r}")
            return get_string(locale, "language_unsupported", language=language)

        try:
            self.user_service.update_language(user, match.code)
        except UserStoreError as e:
            logger.error(f"Could not store language {match.code} for {user.id}: {e}")
            return get_string(locale, "language_error")

        logger.info(f"User {user.id} now translates into {match.code}")
        return get_string(locale, "language_changed", language=match.name)

    def get_supported_languages(self, locale: str) -> List[Language]:
        """
        Supported languages with names in the given locale.

        Raises:
            TranslationError: If the backend fails
        """
        display_locale = normalize_locale(locale)
        cached = self._read_cache(display_locale)
        if cached is not None:
            return cached

        languages = self.translation_provider.get_languages(display_locale)
        self._write_cache(display_locale, languages)
        return languages

    @staticmethod
    def _match_language(requested: str, languages: List[Language]) -> Optional[Language]:
        wanted = requested.lower()
        for language in languages:
            if language.code.lower() == wanted:
                return language
        for language in languages:
            if language.name.lower() == wanted:
                return language
        return None

    def _read_cache(self, locale: str) -> Optional[List[Language]]:
        if not self.cache:
            return None
        try:
            data = self.cache.get(f"{self._cache_prefix}{locale}")
        except redis.RedisError as e:
            logger.warning(f"Language cache read failed: {e}")
            return None
        if data is None:
            return None
        try:
            return [Language(code=item["code"], name=item["name"]) for item in json.loads(data)]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring corrupt language cache entry for {locale}: {e}")
            return None

    def _write_cache(self, locale: str, languages: List[Language]) -> None:
        if not self.cache:
            return
        payload = json.dumps([{"code": item.code, "name": item.name} for item in languages])
        try:
            self.cache.setex(f"{self._cache_prefix}{locale}", self.cache_ttl, payload)
        except redis.RedisError as e:
            logger.warning(f"Language cache write failed: {e}")
