"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services built once in the lifespan (the composition root)
    - Dependency functions retrieve them from request.app.state
    - The cache handle is shared by every request for the process lifetime
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from weather_cache.config import settings
from weather_cache.errors import CacheTransportError
from weather_cache.handlers import WeatherHandler
from weather_cache.protocols import CacheStore, ConfigProvider, WeatherProvider
from weather_cache.repositories import (
    FileConfigProvider,
    InMemoryCacheRepository,
    RedisCacheRepository,
    VisualCrossingProvider,
)
from weather_cache.services import WeatherService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> WeatherHandler:
    """Dependency injection for WeatherHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "weather_handler", None)
    if handler is None:
        raise RuntimeError("WeatherHandler not initialized. Check lifespan setup.")
    return handler


def default_cache_store() -> CacheStore:
    """Build the cache store selected by CACHE_BACKEND."""
    if settings.uses_memory_backend:
        return InMemoryCacheRepository()
    return RedisCacheRepository.create()


def close_cache_store(store: CacheStore) -> None:
    """Release the connection pool of a store built by the lifespan."""
    if isinstance(store, RedisCacheRepository):
        store.close()


def build_lifespan(
    cache_store: CacheStore | None = None,
    provider: WeatherProvider | None = None,
    config_provider: ConfigProvider | None = None,
    ttl: int | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Create the lifespan context manager for the app.

    Collaborators that are not passed in are built from settings. Those
    built here are also closed here on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers and store them in app.state.

        Startup fails with CacheTransportError if the cache store does not
        answer a ping: the service must not serve without its cache.
        """
        # Explicit None checks: an empty in-memory store is falsy
        store = cache_store if cache_store is not None else default_cache_store()
        weather_provider = provider if provider is not None else VisualCrossingProvider.create()
        configs = config_provider if config_provider is not None else FileConfigProvider.create()

        logger.info("Starting Weather Cache API (backend=%s)", type(store).__name__)
        try:
            store.ping()
        except CacheTransportError:
            logger.error("Cache store is unreachable, refusing to start")
            if cache_store is None:
                close_cache_store(store)
            raise
        logger.info("Cache store connection successful")

        weather_service = WeatherService.create(
            cache_store=store,
            provider=weather_provider,
            config_provider=configs,
            ttl=ttl,
        )
        app.state.weather_service = weather_service
        app.state.weather_handler = WeatherHandler(weather_service=weather_service)
        logger.info("Weather service initialized (ttl=%ss)", weather_service.ttl)

        try:
            yield
        finally:
            del app.state.weather_handler
            del app.state.weather_service
            if provider is None:
                await weather_provider.close()
            if cache_store is None:
                close_cache_store(store)
            logger.info("Weather service shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[WeatherHandler, Depends(get_handler)]
