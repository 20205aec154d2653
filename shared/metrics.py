"""
Shared metrics configuration for the Showcase project feed.
"""

import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

from prometheus_client import Counter, Histogram, CollectorRegistry


class MetricsCollector:
    """Prometheus metrics for cache and fetch activity.

    Each collector owns a registry unless one is passed in, so several
    repositories (and test cases) can live in one process without
    duplicate-registration errors.
    """

    def __init__(self, service_name: str = "showcase", registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up cache and fetch metrics."""
        self._metrics["cache_requests_total"] = Counter(
            f"{self.service_name}_cache_requests_total",
            "Total project cache lookups",
            ["result"],
            registry=self.registry
        )

        self._metrics["fetch_total"] = Counter(
            f"{self.service_name}_fetch_total",
            "Total project feed fetches",
            ["status"],
            registry=self.registry
        )

        self._metrics["fetch_duration_seconds"] = Histogram(
            f"{self.service_name}_fetch_duration_seconds",
            "Project feed fetch duration in seconds",
            registry=self.registry
        )

    def get_metric(self, name: str):
        """Get a metric by name."""
        return self._metrics.get(name)

    def record_cache_lookup(self, hit: bool):
        """Record a cache hit or miss."""
        self._metrics["cache_requests_total"].labels(result="hit" if hit else "miss").inc()

    def record_fetch(self, status: str, duration: float):
        """Record the outcome and duration of one feed fetch."""
        self._metrics["fetch_total"].labels(status=status).inc()
        self._metrics["fetch_duration_seconds"].observe(duration)

    @contextmanager
    def time_fetch(self):
        """Context manager recording a fetch as success or error."""
        start_time = time.time()
        status = "error"
        try:
            yield
            status = "success"
        finally:
            self.record_fetch(status, time.time() - start_time)

    def sample(self, name: str, **labels) -> float:
        """Current value of a sample, 0.0 when it has not been recorded yet."""
        value = self.registry.get_sample_value(f"{self.service_name}_{name}", labels or None)
        return value or 0.0
