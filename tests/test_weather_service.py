"""
Tests for read-through weather resolution.
"""

import asyncio

import pytest

from weather_cache.dto import decode_record, encode_record
from weather_cache.errors import (
    ConfigLoadError,
    UpstreamDecodeError,
    UpstreamUnavailableError,
)
from weather_cache.services import WeatherService

from conftest import PARIS


async def test_cache_hit_skips_provider(service, store, provider):
    """A valid cached entry is returned without calling the provider."""
    store.put("Paris", encode_record(PARIS), ttl=600)

    record = await service.resolve("Paris")

    assert record == PARIS
    assert provider.calls == []
    assert service.metrics.cache_hits == 1


async def test_miss_fetches_once_and_populates_cache(service, store, provider):
    record = await service.resolve("Paris")

    assert record == PARIS
    assert provider.calls == ["Paris"]
    assert store.puts == ["Paris"]
    assert decode_record(store.get("Paris")) == PARIS

    # Second lookup is served from cache
    again = await service.resolve("Paris")
    assert again == PARIS
    assert provider.calls == ["Paris"]


async def test_corrupt_entry_is_soft_miss(service, store, provider):
    store.put("X", b"\x00not json{", ttl=600)

    record = await service.resolve("X")

    assert record.address == "X"
    assert provider.calls == ["X"]
    assert decode_record(store.get("X")) == record
    assert service.metrics.corrupt_entries == 1


async def test_wrong_shape_entry_is_soft_miss(service, store, provider):
    store.put("Paris", b'{"address": "Paris"}', ttl=600)

    assert await service.resolve("Paris") == PARIS
    assert provider.calls == ["Paris"]


async def test_upstream_failure_propagates_without_cache_write(service, store, provider):
    provider.error = UpstreamUnavailableError("Weather provider request failed: connection refused")

    with pytest.raises(UpstreamUnavailableError):
        await service.resolve("Paris")

    assert store.puts == []
    assert store.get("Paris") is None
    assert service.metrics.upstream_errors == 1


async def test_upstream_decode_error_propagates(service, store, provider):
    provider.error = UpstreamDecodeError("not a weather record")

    with pytest.raises(UpstreamDecodeError):
        await service.resolve("Paris")

    assert store.puts == []


async def test_config_error_propagates_before_upstream(service, store, provider, config_provider):
    config_provider.fail = True

    with pytest.raises(ConfigLoadError):
        await service.resolve("Paris")

    assert provider.calls == []
    assert store.puts == []


async def test_config_error_not_raised_on_cache_hit(service, store, config_provider):
    config_provider.fail = True
    store.put("Paris", encode_record(PARIS), ttl=600)

    assert await service.resolve("Paris") == PARIS


async def test_cache_write_failure_is_swallowed(service, store, provider):
    store.fail_put = True

    record = await service.resolve("Paris")

    assert record == PARIS
    assert store.get("Paris") is None
    assert service.metrics.cache_write_errors == 1


async def test_cache_read_failure_falls_back_to_provider(service, store, provider):
    """A cache outage after startup degrades to always fetching upstream."""
    store.fail_get = True

    assert await service.resolve("Paris") == PARIS
    assert await service.resolve("Paris") == PARIS

    assert provider.calls == ["Paris", "Paris"]
    assert service.metrics.cache_read_errors == 2


async def test_keys_are_case_sensitive(service, store, provider):
    await service.resolve("Paris")
    record = await service.resolve("paris")

    assert record.address == "paris"
    assert provider.calls == ["Paris", "paris"]
    assert store.get("paris") != store.get("Paris")


async def test_keys_are_not_trimmed(service, provider):
    await service.resolve("Paris")
    await service.resolve(" Paris ")

    assert provider.calls == ["Paris", " Paris "]


async def test_entry_expires_after_ttl(service, store, provider, clock):
    await service.resolve("Paris")

    clock.advance(599)
    await service.resolve("Paris")
    assert provider.calls == ["Paris"]

    clock.advance(1)
    assert store.get("Paris") is None
    await service.resolve("Paris")
    assert provider.calls == ["Paris", "Paris"]


async def test_concurrent_misses_both_fetch(service, store, provider):
    """Concurrent misses for one key are not coalesced."""
    first, second = await asyncio.gather(service.resolve("Paris"), service.resolve("Paris"))

    assert first == second == PARIS
    assert provider.calls == ["Paris", "Paris"]
    assert store.puts == ["Paris", "Paris"]


async def test_stats(service, store):
    store.put("Paris", encode_record(PARIS), ttl=600)
    await service.resolve("Paris")
    await service.resolve("Rome")

    stats = service.get_stats()

    assert stats["total_requests"] == 2
    assert stats["cache_hits"] == 1
    assert stats["cache_misses"] == 1
    assert stats["hit_rate"] == 0.5
    assert stats["upstream_calls"] == 1
    assert stats["ttl_seconds"] == 600


def test_health_follows_cache_store(service, store):
    assert service.is_healthy() is True
    store.fail_ping = True
    assert service.is_healthy() is False


async def test_explicit_short_ttl_is_honoured(store, provider, config_provider, clock):
    service = WeatherService(cache_store=store, provider=provider, config_provider=config_provider, ttl=5)

    await service.resolve("Paris")
    clock.advance(5)
    await service.resolve("Paris")

    assert service.ttl == 5
    assert provider.calls == ["Paris", "Paris"]


@pytest.mark.parametrize("ttl", [0, -1])
def test_non_positive_ttl_is_rejected(store, provider, config_provider, ttl):
    with pytest.raises(ValueError):
        WeatherService(cache_store=store, provider=provider, config_provider=config_provider, ttl=ttl)
