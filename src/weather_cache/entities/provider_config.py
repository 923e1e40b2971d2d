"""Upstream provider configuration entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProviderConfig:
    """Credentials needed to call the upstream weather provider."""

    api_key: str = field(repr=False)
