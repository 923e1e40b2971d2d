"""Weather Cache - current weather lookups behind a read-through cache.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CacheStore, WeatherProvider, ConfigProvider)
    - repositories: Redis / in-memory stores, Visual Crossing client, config file
    - services: Read-through resolution (WeatherService)
    - handlers: HTTP endpoint handlers
    - dto: Wire formats (weather JSON, config file, API responses)
    - entities: Domain models (internal)

Usage:
    ```python
    from weather_cache.services import WeatherService

    service = WeatherService.create(
        cache_store=RedisCacheRepository.create(),
        provider=VisualCrossingProvider.create(),
        config_provider=FileConfigProvider.create(),
    )
    record = await service.resolve("Paris")
    ```

For HTTP API:
    ```python
    from weather_cache.api.app import app
    ```
"""

from weather_cache.config import get_redis_client, settings
from weather_cache.entities import CurrentConditions, ProviderConfig, WeatherRecord
from weather_cache.errors import (
    CacheTransportError,
    ConfigLoadError,
    UpstreamDecodeError,
    UpstreamUnavailableError,
    WeatherCacheError,
)
from weather_cache.handlers import WeatherHandler
from weather_cache.protocols import CacheStore, ConfigProvider, WeatherProvider
from weather_cache.repositories import (
    FileConfigProvider,
    InMemoryCacheRepository,
    RedisCacheRepository,
    VisualCrossingProvider,
)
from weather_cache.services import WeatherService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "ConfigProvider",
    "WeatherProvider",
    # Services (business logic)
    "WeatherService",
    # Handlers (HTTP)
    "WeatherHandler",
    # Repositories (data access)
    "RedisCacheRepository",
    "InMemoryCacheRepository",
    "VisualCrossingProvider",
    "FileConfigProvider",
    # Entities (domain models)
    "WeatherRecord",
    "CurrentConditions",
    "ProviderConfig",
    # Errors
    "WeatherCacheError",
    "ConfigLoadError",
    "UpstreamUnavailableError",
    "UpstreamDecodeError",
    "CacheTransportError",
]
