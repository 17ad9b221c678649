"""User preference service (Service Layer Pattern)."""
import logging
from typing import Optional

from messenger_translator.domain.entities.user import UserPreference
from messenger_translator.domain.interfaces.message_provider import IMessageProvider
from messenger_translator.domain.interfaces.user_repository import IUserRepository
from messenger_translator.locale import normalize_locale


logger = logging.getLogger(__name__)


class UserService:
    """
    Resolves and updates user preference records.

    Every call goes to the repository; records are never memoized across
    events.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        message_provider: Optional[IMessageProvider] = None,
        default_locale: str = "en",
        default_language: str = "en"
    ):
        """
        Initialize user service.

        Args:
            user_repository: Preference store
            message_provider: Used to seed new users from their profile (optional)
            default_locale: Locale for users without a usable profile locale
            default_language: Translation target for new users
        """
        self.user_repository = user_repository
        self.message_provider = message_provider
        self.default_locale = default_locale
        self.default_language = default_language

    def get_or_create(self, sender_id: str) -> UserPreference:
        """
        Return the user's record, creating it on first contact.

        Raises:
            UserStoreError: If the store fails
        """
        user = self.user_repository.get_user(sender_id)
        if user is not None:
            return user

        locale, name = self.default_locale, None
        profile = self._get_profile(sender_id)
        if profile:
            name = profile.get("name")
            if profile.get("locale"):
                locale = normalize_locale(profile["locale"])

        logger.info(f"First contact from {sender_id}, creating preferences (locale={locale})")
        return self.user_repository.add_user(
            sender_id,
            locale=locale,
            language=self.default_language,
            name=name
        )

    def update_language(self, user: UserPreference, language: str) -> UserPreference:
        """
        Persist a new translation target and apply it to the given record.

        Raises:
            UserStoreError: If the store fails
        """
        self.user_repository.update_user(user.id, {"language": language})
        user.language = language
        return user

    def _get_profile(self, sender_id: str):
        if self.message_provider is None:
            return None
        try:
            return self.message_provider.get_user_profile(sender_id, fields="name,locale")
        except Exception as e:
            logger.warning(f"Could not fetch profile for {sender_id}: {e}")
            return None
