"""Data Transfer Objects for wire formats and API contracts.

These Pydantic models define the external formats: the upstream/cache
weather JSON, the provider config file, and HTTP responses.

Internal domain logic should use entities from the entities package.
"""

from .config import ProviderConfigFile
from .responses import HealthCheckResponse, ResolverStatsResponse
from .weather import CurrentConditionsPayload, WeatherPayload, decode_record, encode_record

__all__ = [
    "CurrentConditionsPayload",
    "WeatherPayload",
    "encode_record",
    "decode_record",
    "ProviderConfigFile",
    "HealthCheckResponse",
    "ResolverStatsResponse",
]
