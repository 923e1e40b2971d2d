"""Provider configuration file format."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from weather_cache.entities import ProviderConfig


class ProviderConfigFile(BaseModel):
    """Contents of the API config file: {"OpenWeatherApiKey": "..."}."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: StrictStr = Field(..., alias="OpenWeatherApiKey", min_length=1)

    def to_entity(self) -> ProviderConfig:
        return ProviderConfig(api_key=self.api_key)
