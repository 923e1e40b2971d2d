"""In-process implementation of CacheStore.

Useful for local development without Redis and for tests that need to
control time.
"""

import threading
import time
from collections.abc import Callable


class InMemoryCacheRepository:
    """Dictionary-backed cache store with per-entry expiry.

    Expired entries are evicted lazily on read. The clock is injectable so
    expiry can be exercised without sleeping.

    Example:
        ```python
        now = [0.0]
        store = InMemoryCacheRepository(clock=lambda: now[0])
        store.put("Paris", b"...", ttl=600)
        now[0] += 601
        assert store.get("Paris") is None
        ```
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[bytes, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    def put(self, key: str, value: bytes, ttl: int) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl)

    def ping(self) -> None:
        return None

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
