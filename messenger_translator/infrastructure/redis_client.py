"""Redis client factory following Dependency Inversion Principle."""
import logging
from typing import Dict, Optional
from urllib.parse import urlsplit, urlunsplit

import redis

logger = logging.getLogger(__name__)

REDIS_SCHEMES = ("redis", "rediss", "unix")


class RedisClientFactory:
    """
    Shares one pooled Redis client per URL within a process.

    Used for the language cache and, with USER_STORAGE_TYPE=redis, the user
    store. An unreachable server yields None; callers decide whether that is
    fatal (user store) or not (cache).
    """

    _clients: Dict[str, redis.Redis] = {}

    @staticmethod
    def mask_url(url: str) -> str:
        """Hide the password of a Redis URL for logging."""
        parts = urlsplit(url)
        if not parts.password:
            return url
        netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
        return urlunsplit(parts._replace(netloc=netloc))

    @classmethod
    def get_client(cls, url: Optional[str]) -> Optional[redis.Redis]:
        """
        Get the Redis client for a URL, connecting on first use.

        Args:
            url: Redis URL (redis://, rediss:// or unix://)

        Returns:
            Connected client, or None if the URL is unusable or the server is unreachable
        """
        if not url:
            logger.warning("Redis URL not configured")
            return None

        if url in cls._clients:
            return cls._clients[url]

        if urlsplit(url).scheme not in REDIS_SCHEMES:
            logger.warning(f"Invalid Redis URL scheme: {cls.mask_url(url)}")
            return None

        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30
        )

        try:
            client.ping()
        except redis.AuthenticationError as e:
            logger.error(f"Redis authentication failed for {cls.mask_url(url)}: {e}")
            return None
        except redis.ConnectionError as e:
            logger.warning(f"Failed to connect to Redis at {cls.mask_url(url)}: {e}")
            return None

        logger.info(f"Connected to Redis at {cls.mask_url(url)}")
        cls._clients[url] = client
        return client

    @classmethod
    def close(cls) -> None:
        """Close every pooled connection."""
        for client in cls._clients.values():
            client.close()
        cls._clients.clear()
