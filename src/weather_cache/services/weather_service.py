"""Weather service: cache-aside read-through resolution.

This service coordinates the cache store, the upstream weather provider
and the provider config source. Each call to resolve() is independent;
the only shared state is what lives in the cache store.
"""

import logging
import time

from pydantic import ValidationError

from weather_cache.config import settings
from weather_cache.dto import decode_record, encode_record
from weather_cache.entities import WeatherRecord
from weather_cache.errors import CacheTransportError, WeatherCacheError
from weather_cache.metrics import ResolverMetrics
from weather_cache.protocols import CacheStore, ConfigProvider, WeatherProvider

logger = logging.getLogger(__name__)


class WeatherService:
    """Read-through resolver for current weather.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: Redis or in-memory
    - WeatherProvider: Visual Crossing or any other source
    - ConfigProvider: file-based or anything that yields a ProviderConfig

    Concurrent misses for the same location are not coalesced: each one
    calls the provider and writes the cache, and the last write wins.

    Example:
        ```python
        from weather_cache.repositories import (
            FileConfigProvider,
            RedisCacheRepository,
            VisualCrossingProvider,
        )
        from weather_cache.services import WeatherService

        service = WeatherService.create(
            cache_store=RedisCacheRepository.create(),
            provider=VisualCrossingProvider.create(),
            config_provider=FileConfigProvider.create(),
        )
        record = await service.resolve("Paris")
        ```
    """

    def __init__(
        self,
        cache_store: CacheStore,
        provider: WeatherProvider,
        config_provider: ConfigProvider,
        ttl: int | None = None,
        metrics: ResolverMetrics | None = None,
    ) -> None:
        """Initialize the weather service.

        Args:
            cache_store: Shared cache store (required).
            provider: Upstream weather provider (required).
            config_provider: Source of provider credentials (required).
            ttl: Time-to-live for cache entries in seconds (must be positive). Defaults to settings.
            metrics: Metrics collector. A fresh one is created if omitted.

        Raises:
            ValueError: If ttl is not positive
        """
        self._cache = cache_store
        self._provider = provider
        self._config = config_provider
        self._ttl = ttl if ttl is not None else settings.cache_ttl
        if self._ttl <= 0:
            raise ValueError(f"ttl must be a positive number of seconds, got {self._ttl}")
        self._metrics = metrics or ResolverMetrics()

    @classmethod
    def create(
        cls,
        cache_store: CacheStore,
        provider: WeatherProvider,
        config_provider: ConfigProvider,
        ttl: int | None = None,
    ) -> "WeatherService":
        """Factory method to create WeatherService with default TTL and metrics.

        Args:
            cache_store: Shared cache store (required).
            provider: Upstream weather provider (required).
            config_provider: Source of provider credentials (required).
            ttl: Time-to-live in seconds. If None, uses settings.

        Returns:
            Configured WeatherService instance
        """
        return cls(
            cache_store=cache_store,
            provider=provider,
            config_provider=config_provider,
            ttl=ttl,
        )

    async def resolve(self, location: str) -> WeatherRecord:
        """Resolve current weather for a location.

        Business logic:
        1. Probe the cache; a decodable entry is returned as-is
        2. Otherwise load provider config and fetch from upstream
        3. Write the fetched record back to the cache with the TTL
        4. Return the fetched record

        Any cache problem on read or write is absorbed. Config and upstream
        errors propagate unchanged and leave the cache untouched.

        Args:
            location: Location key, used verbatim (no normalization)

        Returns:
            The WeatherRecord

        Raises:
            ConfigLoadError: If provider config cannot be loaded
            UpstreamUnavailableError: If the provider cannot be reached
            UpstreamDecodeError: If the provider response is malformed
        """
        cached = self._read_cache(location)
        if cached is not None:
            self._metrics.record_hit()
            return cached

        self._metrics.record_miss()
        record = await self._fetch_upstream(location)
        self._write_cache(location, record)
        return record

    def _read_cache(self, location: str) -> WeatherRecord | None:
        """Probe the cache, treating every failure as a miss."""
        try:
            raw = self._cache.get(location)
        except CacheTransportError as e:
            self._metrics.record_read_error()
            logger.warning("Cache read failed for %r, falling back to provider: %s", location, e)
            return None

        if raw is None:
            return None

        try:
            return decode_record(raw)
        except ValidationError:
            self._metrics.record_corrupt_entry()
            logger.warning("Ignoring undecodable cache entry for %r", location)
            return None

    async def _fetch_upstream(self, location: str) -> WeatherRecord:
        config = self._config.load()

        start_time = time.perf_counter()
        try:
            record = await self._provider.fetch(location, config)
        except WeatherCacheError:
            self._metrics.record_upstream_call(self._elapsed_ms(start_time), failed=True)
            raise
        self._metrics.record_upstream_call(self._elapsed_ms(start_time))
        return record

    def _write_cache(self, location: str, record: WeatherRecord) -> None:
        """Best-effort cache population.

        A failed write is intentionally not propagated: the caller already
        holds a valid record. It is logged and counted instead.
        """
        try:
            self._cache.put(location, encode_record(record), self._ttl)
        except CacheTransportError as e:
            self._metrics.record_write_error()
            logger.warning("Cache write failed for %r, returning uncached record: %s", location, e)

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return (time.perf_counter() - start_time) * 1000

    def is_healthy(self) -> bool:
        """Check if the cache store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        return self._cache.health_check()

    def get_stats(self) -> dict:
        """Get resolver statistics.

        Returns:
            Dictionary with metrics counters and the cache TTL
        """
        stats = self._metrics.to_dict()
        stats["ttl_seconds"] = self._ttl
        return stats

    @property
    def ttl(self) -> int:
        """Get the cache entry time-to-live in seconds."""
        return self._ttl

    @property
    def metrics(self) -> ResolverMetrics:
        """Get the metrics collector."""
        return self._metrics

    @property
    def cache_store(self) -> CacheStore:
        """Get the underlying cache store (for testing)."""
        return self._cache

    @property
    def provider(self) -> WeatherProvider:
        """Get the underlying weather provider (for testing)."""
        return self._provider
