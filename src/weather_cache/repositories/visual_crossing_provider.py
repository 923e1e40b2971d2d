"""Visual Crossing weather provider.

Uses the Visual Crossing timeline API to fetch current conditions:

    GET {base_url}/{location}?unitGroup=metric&key={api_key}&contentType=json

The service is slow and rate limited, which is why WeatherService keeps
a cache in front of it. No retries are performed here.
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from weather_cache.config import settings
from weather_cache.dto import WeatherPayload
from weather_cache.entities import ProviderConfig, WeatherRecord
from weather_cache.errors import UpstreamDecodeError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


class VisualCrossingProvider:
    """Visual Crossing implementation of WeatherProvider protocol.

    This class satisfies the WeatherProvider protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        provider = VisualCrossingProvider.create()
        record = await provider.fetch("Paris", ProviderConfig(api_key="..."))
        print(record.current_conditions.temperature)
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Visual Crossing provider.

        Args:
            base_url: Timeline API base URL. Defaults to settings.upstream_base_url.
            timeout: Request timeout in seconds. Defaults to settings.upstream_timeout.
            client: Pre-built async HTTP client (mainly for tests).
        """
        self._base_url = (base_url or settings.upstream_base_url).rstrip("/")
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "VisualCrossingProvider":
        """Factory method to create VisualCrossingProvider with defaults.

        Args:
            base_url: API base URL. If None, uses settings.
            timeout: Request timeout. If None, uses settings.

        Returns:
            Configured VisualCrossingProvider
        """
        return cls(base_url=base_url, timeout=timeout)

    def build_url(self, location: str) -> str:
        """Build the request URL for a location (without query parameters).

        The location is sent as one path segment; characters such as "/" or
        spaces are percent-encoded so the provider receives the key unchanged.
        """
        return f"{self._base_url}/{quote(location, safe='')}"

    async def fetch(self, location: str, config: ProviderConfig) -> WeatherRecord:
        """Fetch current weather for a location.

        Args:
            location: The location key, unmodified
            config: Provider credentials

        Returns:
            The parsed WeatherRecord

        Raises:
            UpstreamUnavailableError: On network failure or non-2xx response
            UpstreamDecodeError: If the body is not a valid weather record
        """
        params = {
            "unitGroup": "metric",
            "key": config.api_key,
            "contentType": "json",
        }

        try:
            response = await self.client.get(self.build_url(location), params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # The URL carries the API key, so it is left out of the message
            raise UpstreamUnavailableError(
                f"Weather provider returned HTTP {e.response.status_code} for {location!r}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                f"Weather provider request failed for {location!r}: {type(e).__name__}: {e}"
            ) from e

        try:
            payload = WeatherPayload.model_validate_json(response.content)
        except ValidationError as e:
            logger.debug("Undecodable provider body for %r: %.200s", location, response.text)
            raise UpstreamDecodeError(
                f"Weather provider response for {location!r} is not a weather record: "
                f"{e.error_count()} validation error(s)"
            ) from e

        return payload.to_entity()

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
