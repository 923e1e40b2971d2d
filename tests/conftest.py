"""Shared fixtures and fakes for weather cache tests."""

import asyncio

import pytest

from weather_cache.entities import CurrentConditions, ProviderConfig, WeatherRecord
from weather_cache.errors import CacheTransportError, ConfigLoadError
from weather_cache.repositories import InMemoryCacheRepository
from weather_cache.services import WeatherService

PARIS_BODY = {
    "address": "Paris",
    "currentConditions": {"temp": 18.5, "humidity": 60, "wspd": 10, "conditions": "Clear"},
}

PARIS = WeatherRecord(
    address="Paris",
    current_conditions=CurrentConditions(
        temperature=18.5,
        humidity=60.0,
        wind_speed=10.0,
        description="Clear",
    ),
)


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeProvider:
    """WeatherProvider that returns canned records and counts calls."""

    def __init__(self, record: WeatherRecord = PARIS, error: Exception | None = None) -> None:
        self.record = record
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, location: str, config: ProviderConfig) -> WeatherRecord:
        self.calls.append(location)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return WeatherRecord(address=location, current_conditions=self.record.current_conditions)

    async def close(self) -> None:
        self.closed = True


class StaticConfigProvider:
    def __init__(self, api_key: str = "test-key", fail: bool = False) -> None:
        self.api_key = api_key
        self.fail = fail

    def load(self) -> ProviderConfig:
        if self.fail:
            raise ConfigLoadError("Cannot read API config .apiConfig: not found")
        return ProviderConfig(api_key=self.api_key)


class FlakyCacheStore(InMemoryCacheRepository):
    """In-memory store whose operations can be switched to fail."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.fail_get = False
        self.fail_put = False
        self.fail_ping = False
        self.puts: list[str] = []

    def get(self, key: str) -> bytes | None:
        if self.fail_get:
            raise CacheTransportError("connection refused")
        return super().get(key)

    def put(self, key: str, value: bytes, ttl: int) -> None:
        if self.fail_put:
            raise CacheTransportError("connection refused")
        self.puts.append(key)
        super().put(key, value, ttl)

    def ping(self) -> None:
        if self.fail_ping:
            raise CacheTransportError("Could not connect to cache store: connection refused")

    def health_check(self) -> bool:
        return not self.fail_ping


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return FlakyCacheStore(clock=clock)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def config_provider():
    return StaticConfigProvider()


@pytest.fixture
def service(store, provider, config_provider):
    return WeatherService.create(
        cache_store=store,
        provider=provider,
        config_provider=config_provider,
        ttl=600,
    )
