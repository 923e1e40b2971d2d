"""
Tests for the weather cache API.
"""

from unittest.mock import MagicMock

import pytest
import redis
from fastapi.testclient import TestClient

from weather_cache.api import dependencies
from weather_cache.api.app import create_app
from weather_cache.dto import encode_record
from weather_cache.errors import CacheTransportError, UpstreamUnavailableError
from weather_cache.repositories import RedisCacheRepository

from conftest import PARIS, PARIS_BODY


@pytest.fixture
def app(store, provider, config_provider):
    return create_app(cache_store=store, provider=provider, config_provider=config_provider, ttl=600)


@pytest.fixture
def client(app):
    """Create a test client with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Weather Cache API"


def test_hello(client):
    response = client.get("/hello")
    assert response.status_code == 200
    assert response.text == "Hello from weather cache!\n"


def test_weather_miss_then_hit(client, provider):
    response = client.get("/weather/Paris")
    assert response.status_code == 200
    assert response.json() == {
        "address": "Paris",
        "currentConditions": {"temp": 18.5, "humidity": 60.0, "wspd": 10.0, "conditions": "Clear"},
    }

    again = client.get("/weather/Paris")
    assert again.json() == response.json()
    assert provider.calls == ["Paris"]


def test_weather_served_from_cache(client, store, provider):
    store.put("Lyon", encode_record(PARIS), ttl=600)

    response = client.get("/weather/Lyon")

    assert response.status_code == 200
    assert response.json()["address"] == PARIS_BODY["address"]
    assert provider.calls == []


def test_weather_location_taken_verbatim(client, provider):
    client.get("/weather/New York")
    client.get("/weather/san francisco/CA")

    assert provider.calls == ["New York", "san francisco/CA"]


def test_weather_error_is_500_with_message(client, provider, store):
    provider.error = UpstreamUnavailableError("Weather provider request failed for 'Paris'")

    response = client.get("/weather/Paris")

    assert response.status_code == 500
    assert response.json() == {"detail": "Weather provider request failed for 'Paris'"}
    assert store.puts == []


def test_weather_config_error_is_500(client, config_provider):
    config_provider.fail = True

    response = client.get("/weather/Paris")

    assert response.status_code == 500
    assert "API config" in response.json()["detail"]


def test_health(client, store):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True}

    store.fail_ping = True
    response = client.get("/health")
    assert response.status_code == 503


def test_stats(client):
    client.get("/weather/Paris")
    client.get("/weather/Paris")

    response = client.get("/stats")
    assert response.status_code == 200
    data = response.json()
    assert data["cache_hits"] == 1
    assert data["cache_misses"] == 1
    assert data["ttl_seconds"] == 600


async def test_startup_refuses_unreachable_cache(app, store, provider):
    store.fail_ping = True

    with pytest.raises(CacheTransportError):
        async with app.router.lifespan_context(app):
            pass

    assert not hasattr(app.state, "weather_service")


async def test_failed_startup_closes_default_redis_store(monkeypatch, provider, config_provider):
    redis_client = MagicMock(spec=redis.Redis)
    redis_client.ping.side_effect = redis.ConnectionError("Connection refused")
    monkeypatch.setattr(
        dependencies,
        "default_cache_store",
        lambda: RedisCacheRepository(redis_client=redis_client),
    )
    app = create_app(provider=provider, config_provider=config_provider)

    with pytest.raises(CacheTransportError):
        async with app.router.lifespan_context(app):
            pass

    redis_client.close.assert_called_once()


async def test_injected_store_is_left_open(provider, config_provider):
    redis_client = MagicMock(spec=redis.Redis)
    redis_client.ping.side_effect = redis.ConnectionError("Connection refused")
    app = create_app(
        cache_store=RedisCacheRepository(redis_client=redis_client),
        provider=provider,
        config_provider=config_provider,
    )

    with pytest.raises(CacheTransportError):
        async with app.router.lifespan_context(app):
            pass

    redis_client.close.assert_not_called()
