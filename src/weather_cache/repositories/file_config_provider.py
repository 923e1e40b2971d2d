"""File-based provider configuration.

Reads a JSON file of the form {"OpenWeatherApiKey": "..."}.
"""

import logging
import threading
from pathlib import Path

from pydantic import ValidationError

from weather_cache.config import settings
from weather_cache.dto import ProviderConfigFile
from weather_cache.entities import ProviderConfig
from weather_cache.errors import ConfigLoadError

logger = logging.getLogger(__name__)


class FileConfigProvider:
    """ConfigProvider that reads credentials from a JSON file.

    The first successful load is kept for the lifetime of the provider.
    Failed loads are not remembered, so the next call reads the file again.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path or settings.api_config_path)
        self._config: ProviderConfig | None = None
        self._lock = threading.Lock()

    @classmethod
    def create(cls, path: str | Path | None = None) -> "FileConfigProvider":
        return cls(path=path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ProviderConfig:
        """Load provider credentials.

        Returns:
            The ProviderConfig

        Raises:
            ConfigLoadError: If the file is missing, unreadable or malformed
        """
        if self._config is not None:
            return self._config

        with self._lock:
            if self._config is None:
                self._config = self._read()
                logger.info("Loaded provider config from %s", self._path)
            return self._config

    def _read(self) -> ProviderConfig:
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            raise ConfigLoadError(f"Cannot read API config {self._path}: {e}") from e

        try:
            return ProviderConfigFile.model_validate_json(raw).to_entity()
        except ValidationError as e:
            raise ConfigLoadError(
                f"Malformed API config {self._path}: expected {{\"OpenWeatherApiKey\": string}}"
            ) from e
