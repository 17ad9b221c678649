"""Factory for creating provider instances (Factory Pattern)."""
import logging

from messenger_translator.domain.interfaces.message_provider import IMessageProvider
from messenger_translator.domain.interfaces.translation_provider import ITranslationProvider
from messenger_translator.domain.interfaces.user_repository import IUserRepository
from messenger_translator.infrastructure.clients.http_client import HttpClient
from messenger_translator.infrastructure.providers.messenger_provider import MessengerProvider
from messenger_translator.infrastructure.providers.google_translate_provider import GoogleTranslateProvider
from messenger_translator.infrastructure.repositories.restdb_user_repository import RestDBUserRepository
from messenger_translator.infrastructure.repositories.redis_user_repository import RedisUserRepository
from messenger_translator.infrastructure.redis_client import RedisClientFactory


logger = logging.getLogger(__name__)


class ProviderFactory:
    """
    Factory for creating provider instances following Factory Pattern.

    Centralizes provider creation logic and allows easy switching between implementations.
    """

    @staticmethod
    def create_message_provider(config, http_client: HttpClient) -> IMessageProvider:
        """
        Create the Messenger Send API provider.

        Args:
            config: Configuration class
            http_client: Shared outbound HTTP client

        Returns:
            IMessageProvider instance
        """
        return MessengerProvider(
            http_client=http_client,
            access_token=config.ACCESS_TOKEN,
            app_secret=config.APP_SECRET,
            graph_api_url=config.GRAPH_API_URL,
            api_version=config.GRAPH_API_VERSION
        )

    @staticmethod
    def create_translation_provider(config, http_client: HttpClient) -> ITranslationProvider:
        """
        Create the translation backend provider.

        Args:
            config: Configuration class
            http_client: Shared outbound HTTP client

        Returns:
            ITranslationProvider instance
        """
        return GoogleTranslateProvider(
            http_client=http_client,
            api_key=config.TRANSLATOR_API_KEY,
            base_url=config.TRANSLATOR_API_URL
        )

    @staticmethod
    def create_user_repository(config, http_client: HttpClient) -> IUserRepository:
        """
        Create a user repository instance.

        Args:
            config: Configuration class (USER_STORAGE_TYPE selects the backend)
            http_client: Shared outbound HTTP client

        Returns:
            IUserRepository instance

        Raises:
            ValueError: If storage type is not supported
        """
        storage_type = (config.USER_STORAGE_TYPE or "restdb").lower()

        if storage_type == "restdb":
            return RestDBUserRepository(
                http_client=http_client,
                endpoint=config.DB_ENDPOINT,
                api_key=config.DB_API_KEY
            )
        elif storage_type == "redis":
            return RedisUserRepository(RedisClientFactory.get_client(config.REDIS_URL))
        else:
            raise ValueError(f"Unsupported user storage type: {storage_type}")
