"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")


class ResolverStatsResponse(BaseModel):
    """Response DTO for resolver statistics."""

    total_requests: int = Field(..., ge=0)
    cache_hits: int = Field(..., ge=0)
    cache_misses: int = Field(..., ge=0)
    hit_rate: float = Field(..., description="Fraction of requests served from cache", ge=0.0, le=1.0)
    cache_read_errors: int = Field(..., description="Cache reads that failed in transport", ge=0)
    corrupt_entries: int = Field(..., description="Cached entries that could not be decoded", ge=0)
    cache_write_errors: int = Field(..., description="Swallowed cache write failures", ge=0)
    upstream_calls: int = Field(..., ge=0)
    upstream_errors: int = Field(..., ge=0)
    avg_upstream_time_ms: float = Field(..., ge=0.0)
    ttl_seconds: int = Field(
        ...,
        description="Time-to-live for cache entries in seconds",
        ge=0,
    )
