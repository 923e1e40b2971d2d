"""Repository layer for data access.

This layer abstracts external dependencies (Redis, the weather API, the
config file) behind protocol-based interfaces. The repositories are
protocol-based (structural typing), not inheritance-based.
"""

from weather_cache.protocols import CacheStore, ConfigProvider, WeatherProvider

from .file_config_provider import FileConfigProvider
from .memory_repository import InMemoryCacheRepository
from .redis_repository import RedisCacheRepository
from .visual_crossing_provider import VisualCrossingProvider

__all__ = [
    "CacheStore",
    "ConfigProvider",
    "WeatherProvider",
    "FileConfigProvider",
    "InMemoryCacheRepository",
    "RedisCacheRepository",
    "VisualCrossingProvider",
]
