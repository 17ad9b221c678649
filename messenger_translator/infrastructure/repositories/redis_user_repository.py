"""Redis-based user preference storage implementation."""
import logging
import json
from typing import Optional, Dict, Any, List
import redis

from messenger_translator.domain.entities.user import UserPreference
from messenger_translator.domain.exceptions import UserStoreError
from messenger_translator.domain.interfaces.user_repository import IUserRepository


class RedisUserRepository(IUserRepository):
    """
    Redis-based user repository implementation.

    Follows Repository Pattern. Records are JSON documents without TTL.
    """

    def __init__(self, redis_client: Optional[redis.Redis]):
        """
        Initialize the repository.

        Args:
            redis_client: Redis client instance (Dependency Injection)
        """
        self.redis = redis_client
        self._logger = logging.getLogger(__name__)
        self._key_prefix = "user:"

    def _get_key(self, user_id: str) -> str:
        """Generate Redis key for a user."""
        return f"{self._key_prefix}{user_id}"

    def _require_redis(self) -> redis.Redis:
        if not self.redis:
            raise UserStoreError("Redis not available - cannot access user store")
        return self.redis

    def get_user(self, user_id: str) -> Optional[UserPreference]:
        client = self._require_redis()
        try:
            data = client.get(self._get_key(user_id))
        except redis.RedisError as e:
            raise UserStoreError(f"Failed to get user {user_id}: {e}") from e

        if data is None:
            return None
        return self._decode(user_id, data)

    def list_users(self) -> List[UserPreference]:
        client = self._require_redis()
        try:
            keys = list(client.scan_iter(match=f"{self._key_prefix}*"))
            values = client.mget(keys) if keys else []
        except redis.RedisError as e:
            raise UserStoreError(f"Failed to list users: {e}") from e

        return [self._decode(key, value) for key, value in zip(keys, values) if value is not None]

    def add_user(
        self,
        user_id: str,
        locale: str,
        language: str,
        name: Optional[str] = None
    ) -> UserPreference:
        user = UserPreference(id=user_id, locale=locale, language=language, name=name)
        self._save(user)
        self._logger.info(f"User {user_id} created (locale={locale}, language={language})")
        return user

    def update_user(self, user_id: str, fields: Dict[str, Any]) -> UserPreference:
        current = self.get_user(user_id)
        if current is None:
            raise UserStoreError(f"User {user_id} not found")

        data = current.to_dict()
        data.update(fields)
        user = UserPreference(**data)
        self._save(user)
        self._logger.debug(f"User {user_id} updated: {fields}")
        return user

    @staticmethod
    def _decode(user_id: str, data: str) -> UserPreference:
        try:
            return UserPreference(**json.loads(data))
        except (ValueError, TypeError) as e:
            raise UserStoreError(f"Corrupt record for user {user_id}: {e}") from e

    def _save(self, user: UserPreference) -> None:
        client = self._require_redis()
        try:
            client.set(self._get_key(user.id), json.dumps(user.to_dict()))
        except redis.RedisError as e:
            raise UserStoreError(f"Failed to store user {user.id}: {e}") from e
