"""Wire format of a weather record.

The same shape is used for the upstream response body, the cached entry
and the HTTP response of GET /weather/{location}.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr

from weather_cache.entities import CurrentConditions, WeatherRecord


class CurrentConditionsPayload(BaseModel):
    """currentConditions block as sent by the provider."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    temp: StrictFloat = Field(..., description="Temperature (metric)")
    humidity: StrictFloat = Field(..., description="Relative humidity in percent")
    wspd: StrictFloat = Field(..., description="Wind speed (metric)")
    conditions: StrictStr = Field(..., description="Textual description of the conditions")


class WeatherPayload(BaseModel):
    """Weather record in its JSON wire shape.

    Unknown fields (the provider sends many) are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address: StrictStr = Field(..., description="Resolved address label")
    current_conditions: CurrentConditionsPayload = Field(..., alias="currentConditions")

    @classmethod
    def from_entity(cls, record: WeatherRecord) -> "WeatherPayload":
        """Build the wire model from a domain record."""
        conditions = record.current_conditions
        return cls(
            address=record.address,
            current_conditions=CurrentConditionsPayload(
                temp=conditions.temperature,
                humidity=conditions.humidity,
                wspd=conditions.wind_speed,
                conditions=conditions.description,
            ),
        )

    def to_entity(self) -> WeatherRecord:
        """Convert the wire model into a domain record."""
        conditions = self.current_conditions
        return WeatherRecord(
            address=self.address,
            current_conditions=CurrentConditions(
                temperature=conditions.temp,
                humidity=conditions.humidity,
                wind_speed=conditions.wspd,
                description=conditions.conditions,
            ),
        )


def encode_record(record: WeatherRecord) -> bytes:
    """Serialize a record for storage in the cache."""
    return WeatherPayload.from_entity(record).model_dump_json(by_alias=True).encode()


def decode_record(raw: bytes | str) -> WeatherRecord:
    """Deserialize a cached entry.

    Raises:
        pydantic.ValidationError: If the bytes are not a valid record
    """
    return WeatherPayload.model_validate_json(raw).to_entity()
