"""Cache storage protocol.

Defines the interface for a shared key-value store with per-key expiry.
Implementations:
- Redis (default)
- In-process dictionary (development and tests)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Implementations must be safe to share
    across concurrent callers; atomicity per key is the store's job.
    """

    def get(self, key: str) -> bytes | None:
        """Look up a cache entry.

        Args:
            key: The cache key, used verbatim

        Returns:
            The stored bytes, or None if the key is absent or expired

        Raises:
            CacheTransportError: If the store cannot be reached
        """
        ...

    def put(self, key: str, value: bytes, ttl: int) -> None:
        """Store a value, overwriting any existing entry.

        Args:
            key: The cache key, used verbatim
            value: Serialized value
            ttl: Time-to-live in seconds

        Raises:
            CacheTransportError: If the store cannot be reached
        """
        ...

    def ping(self) -> None:
        """Verify the store is reachable.

        Raises:
            CacheTransportError: If the store cannot be reached
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
