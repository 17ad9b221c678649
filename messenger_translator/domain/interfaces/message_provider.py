"""Interface for message providers (Strategy Pattern).

Isolates the messaging platform's Send API from the event handling logic,
so that handlers can be exercised without a live page.
"""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class IMessageProvider(ABC):
    """
    Interface for message providers following Strategy Pattern.

    Implementations can be swapped without changing business logic.
    """

    @abstractmethod
    def send_text_message(self, recipient: str, message: str) -> Optional[Dict[str, Any]]:
        """
        Send a text message to a recipient.

        Args:
            recipient: Recipient identifier (page-scoped user id)
            message: Message text content

        Returns:
            Response dictionary with status and message_id, or None if failed
        """
        pass

    @abstractmethod
    def send_action(self, recipient: str, action: str) -> Optional[Dict[str, Any]]:
        """
        Send a sender action ("mark_seen", "typing_on", ...).

        Args:
            recipient: Recipient identifier
            action: Sender action token

        Returns:
            Response dictionary, or None if failed
        """
        pass

    @abstractmethod
    def get_user_profile(self, user_id: str, fields: str = "name,locale") -> Optional[Dict[str, Any]]:
        """
        Fetch public profile fields of a user.

        Args:
            user_id: Page-scoped user id
            fields: Comma separated profile fields

        Returns:
            Profile dictionary, or None if unavailable
        """
        pass

    @abstractmethod
    def set_get_started(self, payload: str) -> bool:
        """
        Configure the page's "Get Started" button.

        Args:
            payload: Postback payload sent when the button is pressed

        Returns:
            True if the page profile was updated
        """
        pass
