"""Error taxonomy for weather resolution.

Only ConfigLoadError, UpstreamUnavailableError and UpstreamDecodeError ever
reach callers of WeatherService.resolve(). CacheTransportError is raised by
cache stores and absorbed by the service.
"""


class WeatherCacheError(Exception):
    """Base class for all weather cache errors."""


class ConfigLoadError(WeatherCacheError):
    """Provider configuration is missing or malformed."""


class UpstreamUnavailableError(WeatherCacheError):
    """The upstream provider could not be reached or returned a non-success status."""


class UpstreamDecodeError(WeatherCacheError):
    """The upstream response could not be parsed into a weather record."""


class CacheTransportError(WeatherCacheError):
    """The cache store could not be reached."""
