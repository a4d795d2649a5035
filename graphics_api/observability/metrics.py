"""
Prometheus metrics collection for the graphics discovery library.

Provides RED metrics (Rate, Errors, Duration) for provider calls.
"""

from prometheus_client import (
    Counter,
    Histogram,
    REGISTRY,
)

# Use the default registry
metrics_registry = REGISTRY

# Provider Metrics
graphics_provider_duration_seconds = Histogram(
    "graphics_provider_duration_seconds",
    "Graphics provider search duration in seconds",
    ["provider"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
    registry=metrics_registry,
)

graphics_provider_requests_total = Counter(
    "graphics_provider_requests_total",
    "Total graphics provider searches",
    ["provider", "status"],  # status: ok, error, timeout, unavailable
    registry=metrics_registry,
)

graphics_results_count = Histogram(
    "graphics_results_count",
    "Number of results returned by a provider search",
    ["provider"],
    buckets=[0, 1, 3, 5, 10, 20, 50],
    registry=metrics_registry,
)

# Query Metrics
graphics_queries_total = Counter(
    "graphics_queries_total",
    "Total aggregated graphics queries",
    ["outcome"],  # outcome: results, empty
    registry=metrics_registry,
)
