"""Redis implementation of CacheStore.

Entries are plain string keys written with SET ... EX, so expiry is owned
by Redis. This is the default implementation.
"""

import redis

from weather_cache.config import get_redis_client, settings
from weather_cache.errors import CacheTransportError


class RedisCacheRepository:
    """Redis-backed cache store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    The underlying client keeps its own connection pool, so a single
    instance is shared by all concurrent requests without extra locking.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls, redis_client: redis.Redis | None = None) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            redis_client: Redis client. If None, one is built from settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(redis_client=redis_client)

    def get(self, key: str) -> bytes | None:
        """Read a cache entry from Redis.

        Args:
            key: The cache key

        Returns:
            Stored bytes, or None if missing or expired
        """
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise CacheTransportError(f"Redis GET failed for {key!r}: {e}") from e

        if value is None:
            return None
        if isinstance(value, str):
            return value.encode()
        return value  # type: ignore[return-value]

    def put(self, key: str, value: bytes, ttl: int) -> None:
        """Write a cache entry to Redis with an expiry.

        Args:
            key: The cache key
            value: Serialized value
            ttl: Time-to-live in seconds
        """
        try:
            self._client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheTransportError(f"Redis SET failed for {key!r}: {e}") from e

    def ping(self) -> None:
        """Ping Redis.

        Raises:
            CacheTransportError: If Redis is unreachable
        """
        try:
            self._client.ping()
        except redis.RedisError as e:
            raise CacheTransportError(f"Could not connect to Redis at {settings.redis_url}: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            self.ping()
            return True
        except CacheTransportError:
            return False

    def close(self) -> None:
        """Close the client's connection pool."""
        self._client.close()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
