"""One-off page maintenance operations (Use Case Pattern)."""
import logging
from typing import Dict

from messenger_translator.domain.exceptions import UserStoreError
from messenger_translator.domain.interfaces.message_provider import IMessageProvider
from messenger_translator.domain.interfaces.user_repository import IUserRepository


logger = logging.getLogger(__name__)

GET_STARTED_PAYLOAD = "get_started"


class PageSetupUseCase:
    """Configures the page profile and repairs stored user records."""

    def __init__(self, message_provider: IMessageProvider, user_repository: IUserRepository):
        self.message_provider = message_provider
        self.user_repository = user_repository

    def configure_get_started(self, payload: str = GET_STARTED_PAYLOAD) -> bool:
        """Point the page's "Get Started" button at the help postback."""
        return self.message_provider.set_get_started(payload)

    def backfill_names(self, overwrite: bool = False) -> Dict[str, int]:
        """
        Fill in display names of stored users from their Messenger profile.

        Args:
            overwrite: Refresh names that are already set

        Returns:
            Counts of updated, skipped and failed records

        Raises:
            UserStoreError: If the users cannot be listed
        """
        stats = {"updated": 0, "skipped": 0, "failed": 0}

        for user in self.user_repository.list_users():
            if user.name and not overwrite:
                stats["skipped"] += 1
                continue

            profile = self.message_provider.get_user_profile(user.id, fields="name")
            if not profile or not profile.get("name"):
                logger.warning(f"No profile name for {user.id}")
                stats["failed"] += 1
                continue

            try:
                self.user_repository.update_user(user.id, {"name": profile["name"]})
            except UserStoreError as e:
                logger.error(f"Could not store name for {user.id}: {e}")
                stats["failed"] += 1
                continue

            logger.debug(f"Name of {user.id} set to {profile['name']!r}")
            stats["updated"] += 1

        logger.info(
            f"Name backfill finished: {stats['updated']} updated, "
            f"{stats['skipped']} skipped, {stats['failed']} failed"
        )
        return stats
