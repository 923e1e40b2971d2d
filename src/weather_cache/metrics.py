from dataclasses import dataclass


@dataclass
class ResolverMetrics:
    """Track outcome counters for weather resolution."""

    total_requests: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    cache_read_errors: int = 0
    corrupt_entries: int = 0
    cache_write_errors: int = 0
    upstream_calls: int = 0
    upstream_errors: int = 0
    total_upstream_time_ms: float = 0.0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_requests == 0:
            return 0.0
        return self.cache_hits / self.total_requests

    @property
    def avg_upstream_time_ms(self) -> float:
        """Calculate average upstream call duration."""
        if self.upstream_calls == 0:
            return 0.0
        return self.total_upstream_time_ms / self.upstream_calls

    def record_hit(self) -> None:
        """Record a cache hit."""
        self.total_requests += 1
        self.cache_hits += 1

    def record_miss(self) -> None:
        """Record a cache miss (including soft misses)."""
        self.total_requests += 1
        self.cache_misses += 1

    def record_read_error(self) -> None:
        self.cache_read_errors += 1

    def record_corrupt_entry(self) -> None:
        self.corrupt_entries += 1

    def record_write_error(self) -> None:
        self.cache_write_errors += 1

    def record_upstream_call(self, duration_ms: float, failed: bool = False) -> None:
        """Record an upstream API call."""
        self.upstream_calls += 1
        self.total_upstream_time_ms += duration_ms
        if failed:
            self.upstream_errors += 1

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "total_requests": self.total_requests,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "hit_rate": self.hit_rate,
            "cache_read_errors": self.cache_read_errors,
            "corrupt_entries": self.corrupt_entries,
            "cache_write_errors": self.cache_write_errors,
            "upstream_calls": self.upstream_calls,
            "upstream_errors": self.upstream_errors,
            "avg_upstream_time_ms": self.avg_upstream_time_ms,
        }
