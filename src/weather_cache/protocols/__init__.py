"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, Visual Crossing → other APIs)
- Unit testing with fake implementations

Usage:
    ```python
    from weather_cache.protocols import CacheStore

    store: CacheStore = RedisCacheRepository.create()     # works
    store: CacheStore = InMemoryCacheRepository()         # also works
    ```
"""

from .cache_store import CacheStore
from .config_provider import ConfigProvider
from .weather_provider import WeatherProvider

__all__ = [
    "CacheStore",
    "ConfigProvider",
    "WeatherProvider",
]
