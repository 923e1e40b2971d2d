"""Provider configuration source protocol."""

from typing import Protocol, runtime_checkable

from weather_cache.entities import ProviderConfig


@runtime_checkable
class ConfigProvider(Protocol):
    """Protocol for loading upstream provider credentials."""

    def load(self) -> ProviderConfig:
        """Load the provider configuration.

        Raises:
            ConfigLoadError: If the configuration is missing or malformed
        """
        ...
