"""Interface for the user preference store (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List

from messenger_translator.domain.entities.user import UserPreference


class IUserRepository(ABC):
    """
    Interface for storing and retrieving user preference records.

    Implementations talk to a remote store on every call; nothing is cached.
    All methods raise UserStoreError when the store fails.
    """

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserPreference]:
        """
        Look up a user by sender id.

        Args:
            user_id: Page-scoped sender id

        Returns:
            The stored record, or None if the user is unknown
        """
        pass

    @abstractmethod
    def add_user(
        self,
        user_id: str,
        locale: str,
        language: str,
        name: Optional[str] = None
    ) -> UserPreference:
        """
        Create a user record.

        Args:
            user_id: Page-scoped sender id
            locale: Locale for the bot's own strings
            language: Translation target language
            name: Optional display name

        Returns:
            The created record
        """
        pass

    @abstractmethod
    def update_user(self, user_id: str, fields: Dict[str, Any]) -> UserPreference:
        """
        Partially update a user record.

        Args:
            user_id: Page-scoped sender id
            fields: Fields to change (e.g. {"language": "fr"})

        Returns:
            The updated record
        """
        pass

    @abstractmethod
    def list_users(self) -> List[UserPreference]:
        """Return every stored record."""
        pass
