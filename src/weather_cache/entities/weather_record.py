"""Weather record domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentConditions:
    """Current conditions block of a weather record.

    Attributes:
        temperature: Air temperature (metric units)
        humidity: Relative humidity in percent
        wind_speed: Wind speed (metric units)
        description: Human readable conditions, e.g. "Clear"
    """

    temperature: float
    humidity: float
    wind_speed: float
    description: str


@dataclass(frozen=True)
class WeatherRecord:
    """Resolved weather for a location.

    Produced either from a cached entry or from an upstream response.

    Attributes:
        address: Resolved address label returned by the provider
        current_conditions: The current conditions at that address
    """

    address: str
    current_conditions: CurrentConditions
