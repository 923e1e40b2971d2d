"""HTTP handlers for weather lookups.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
"""

import logging

from fastapi import HTTPException, status

from weather_cache.dto import HealthCheckResponse, ResolverStatsResponse, WeatherPayload
from weather_cache.errors import WeatherCacheError
from weather_cache.services import WeatherService

logger = logging.getLogger(__name__)

GREETING = "Hello from weather cache!\n"


class WeatherHandler:
    """HTTP handlers for weather operations.

    This handler delegates business logic to WeatherService and handles:
    - Converting entities to DTOs
    - Mapping resolver errors to 500 responses carrying the error text
    """

    def __init__(self, weather_service: WeatherService) -> None:
        """Initialize the weather handler.

        Args:
            weather_service: The weather service for business logic (required).
        """
        self._weather = weather_service

    async def get_weather(self, location: str) -> WeatherPayload:
        """Handle GET /weather/{location} requests.

        Args:
            location: Location key taken verbatim from the URL path

        Returns:
            The weather record in its wire shape

        Raises:
            HTTPException: 500 with the error message if resolution fails
        """
        try:
            record = await self._weather.resolve(location)
        except WeatherCacheError as e:
            logger.error("Weather lookup failed for %r: %s", location, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return WeatherPayload.from_entity(record)

    async def hello(self) -> str:
        """Handle GET /hello requests."""
        return GREETING

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if the cache store is unreachable
        """
        is_healthy = self._weather.is_healthy()
        if not is_healthy:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Cache store is unreachable",
            )

        return HealthCheckResponse(status="healthy", cache_healthy=True)

    async def get_stats(self) -> ResolverStatsResponse:
        """Handle GET /stats requests."""
        return ResolverStatsResponse(**self._weather.get_stats())
