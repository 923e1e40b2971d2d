import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "redis")
    cache_ttl: int = int(os.getenv("CACHE_TTL", "600"))  # 10 minutes default

    # Upstream provider
    api_config_path: str = os.getenv("API_CONFIG_PATH", ".apiConfig")
    upstream_base_url: str = os.getenv(
        "UPSTREAM_BASE_URL",
        "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline",
    )
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "30.0"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8080"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def uses_memory_backend(self) -> bool:
        """Check if the in-process cache backend is configured.

        Returns:
            True if CACHE_BACKEND is "memory", False for Redis
        """
        return self.cache_backend.lower() == "memory"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError(f"CACHE_TTL must be a positive number of seconds, got {self.cache_ttl}")

        if self.cache_backend.lower() not in ("redis", "memory"):
            raise ValueError(
                f"CACHE_BACKEND must be one of ['redis', 'memory'], got {self.cache_backend!r}"
            )

        if self.upstream_timeout <= 0:
            raise ValueError("UPSTREAM_TIMEOUT must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
