from typing import Any

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from weather_cache.api.dependencies import HandlerDep, build_lifespan
from weather_cache.config import configure_logging, settings
from weather_cache.dto import HealthCheckResponse, ResolverStatsResponse, WeatherPayload
from weather_cache.protocols import CacheStore, ConfigProvider, WeatherProvider


def create_app(
    cache_store: CacheStore | None = None,
    provider: WeatherProvider | None = None,
    config_provider: ConfigProvider | None = None,
    ttl: int | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        cache_store: Cache store to use. Built from settings if None.
        provider: Upstream weather provider. Visual Crossing if None.
        config_provider: Provider config source. File-based if None.
        ttl: Cache entry TTL in seconds. Defaults to settings.

    Returns:
        The configured application
    """
    app = FastAPI(
        title="Weather Cache API",
        description="Current weather lookups with a Redis read-through cache",
        version="0.1.0",
        lifespan=build_lifespan(
            cache_store=cache_store,
            provider=provider,
            config_provider=config_provider,
            ttl=ttl,
        ),
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Weather Cache API",
            "version": "0.1.0",
            "endpoints": {
                "weather": "/weather/{location}",
                "hello": "/hello",
                "health": "/health",
                "stats": "/stats",
                "docs": "/docs",
            },
        }

    @app.get("/hello", response_class=PlainTextResponse)
    async def hello(handler: HandlerDep) -> str:
        """Greeting endpoint."""
        return await handler.hello()

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/stats", response_model=ResolverStatsResponse)
    async def stats(handler: HandlerDep) -> ResolverStatsResponse:
        """Resolver statistics."""
        return await handler.get_stats()

    @app.get("/weather/{location:path}", response_model=WeatherPayload)
    async def weather(location: str, handler: HandlerDep) -> WeatherPayload:
        """
        Current weather for a location.

        The location is everything after /weather/, used verbatim as the
        cache key and the provider query.
        """
        return await handler.get_weather(location)

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "weather_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
