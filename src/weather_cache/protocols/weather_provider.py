"""Upstream weather provider protocol.

Implementations can include:
- Visual Crossing timeline API (default)
- Any other service returning current conditions for a location string
"""

from typing import Protocol, runtime_checkable

from weather_cache.entities import ProviderConfig, WeatherRecord


@runtime_checkable
class WeatherProvider(Protocol):
    """Protocol for upstream weather data sources."""

    async def fetch(self, location: str, config: ProviderConfig) -> WeatherRecord:
        """Fetch current weather for a location.

        Args:
            location: The location key, passed through unmodified
            config: Provider credentials

        Returns:
            The parsed weather record

        Raises:
            UpstreamUnavailableError: On network failure or non-success status
            UpstreamDecodeError: If the response is not a valid weather record
        """
        ...

    async def close(self) -> None:
        """Release any network resources held by the provider."""
        ...
