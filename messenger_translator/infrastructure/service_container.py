"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

import redis

from messenger_translator.application.services.language_service import LanguageService
from messenger_translator.application.services.user_service import UserService
from messenger_translator.application.use_cases.page_setup_use_case import PageSetupUseCase
from messenger_translator.application.use_cases.process_event_use_case import ProcessEventUseCase
from messenger_translator.config.settings import get_config
from messenger_translator.domain.interfaces.message_provider import IMessageProvider
from messenger_translator.domain.interfaces.translation_provider import ITranslationProvider
from messenger_translator.domain.interfaces.user_repository import IUserRepository
from messenger_translator.infrastructure.clients.http_client import HttpClient
from messenger_translator.infrastructure.factories.provider_factory import ProviderFactory
from messenger_translator.infrastructure.redis_client import RedisClientFactory


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Built once per process from the configuration object; every component
    receives its settings from here rather than reading the environment.
    Services are created lazily, and any of them can be supplied up front
    (tests pass in-memory fakes).
    """

    def __init__(
        self,
        config=None,
        message_provider: Optional[IMessageProvider] = None,
        user_repository: Optional[IUserRepository] = None,
        translation_provider: Optional[ITranslationProvider] = None,
        cache: Optional[redis.Redis] = None,
        cache_enabled: bool = True
    ):
        """
        Initialize service container.

        Args:
            config: Configuration class (defaults to get_config())
            message_provider: Optional pre-built message provider
            user_repository: Optional pre-built user repository
            translation_provider: Optional pre-built translation provider
            cache: Optional Redis client for the language cache
            cache_enabled: Set to False to run without the language cache
        """
        self._logger = logging.getLogger(__name__)
        self.config = config or get_config()
        self._http_client: Optional[HttpClient] = None
        self._message_provider = message_provider
        self._user_repository = user_repository
        self._translation_provider = translation_provider
        self._cache = cache
        self._cache_resolved = cache is not None or not cache_enabled
        self._user_service: Optional[UserService] = None
        self._language_service: Optional[LanguageService] = None
        self._process_event_use_case: Optional[ProcessEventUseCase] = None

    def get_http_client(self) -> HttpClient:
        """Get or create the shared outbound HTTP client."""
        if self._http_client is None:
            self._http_client = HttpClient(timeout=self.config.REQUEST_TIMEOUT)
        return self._http_client

    def get_message_provider(self) -> IMessageProvider:
        """Get or create message provider instance."""
        if self._message_provider is None:
            self._message_provider = ProviderFactory.create_message_provider(
                self.config, self.get_http_client()
            )
            self._logger.info("MessageProvider created: messenger")
        return self._message_provider

    def get_user_repository(self) -> IUserRepository:
        """Get or create user repository instance."""
        if self._user_repository is None:
            try:
                self._user_repository = ProviderFactory.create_user_repository(
                    self.config, self.get_http_client()
                )
                self._logger.info(f"UserRepository created with {self.config.USER_STORAGE_TYPE}")
            except Exception as e:
                self._logger.error(f"Failed to create UserRepository: {e}")
                raise
        return self._user_repository

    def get_translation_provider(self) -> ITranslationProvider:
        """Get or create translation provider instance."""
        if self._translation_provider is None:
            self._translation_provider = ProviderFactory.create_translation_provider(
                self.config, self.get_http_client()
            )
            self._logger.info("TranslationProvider created: google")
        return self._translation_provider

    def get_cache(self) -> Optional[redis.Redis]:
        """Get the Redis client used for the language cache, if reachable."""
        if not self._cache_resolved:
            self._cache = RedisClientFactory.get_client(self.config.REDIS_URL)
            self._cache_resolved = True
        return self._cache

    def get_user_service(self) -> UserService:
        """Get or create user service instance."""
        if self._user_service is None:
            self._user_service = UserService(
                user_repository=self.get_user_repository(),
                message_provider=self.get_message_provider(),
                default_locale=self.config.DEFAULT_LOCALE,
                default_language=self.config.DEFAULT_LANGUAGE
            )
        return self._user_service

    def get_language_service(self) -> LanguageService:
        """Get or create language service instance."""
        if self._language_service is None:
            self._language_service = LanguageService(
                translation_provider=self.get_translation_provider(),
                user_service=self.get_user_service(),
                cache=self.get_cache(),
                cache_ttl=self.config.LANGUAGES_CACHE_TTL
            )
        return self._language_service

    def get_process_event_use_case(self) -> ProcessEventUseCase:
        """Get or create process event use case instance."""
        if self._process_event_use_case is None:
            self._process_event_use_case = ProcessEventUseCase(
                message_provider=self.get_message_provider(),
                user_service=self.get_user_service(),
                language_service=self.get_language_service(),
                default_locale=self.config.DEFAULT_LOCALE
            )
            self._logger.info("ProcessEventUseCase created")
        return self._process_event_use_case

    def get_page_setup_use_case(self) -> PageSetupUseCase:
        """Create the page maintenance use case."""
        return PageSetupUseCase(
            message_provider=self.get_message_provider(),
            user_repository=self.get_user_repository()
        )

    def close(self) -> None:
        """Release pooled connections."""
        if self._http_client is not None:
            self._http_client.close()
        RedisClientFactory.close()
