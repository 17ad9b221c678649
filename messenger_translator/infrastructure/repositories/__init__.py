"""Repository implementations for the user preference store."""

from messenger_translator.infrastructure.repositories.restdb_user_repository import RestDBUserRepository
from messenger_translator.infrastructure.repositories.redis_user_repository import RedisUserRepository

__all__ = [
    "RestDBUserRepository",
    "RedisUserRepository",
]
