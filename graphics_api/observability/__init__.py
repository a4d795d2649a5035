"""
Observability infrastructure for the graphics discovery library.

Provides:
- Structured logging with correlation IDs
- Prometheus metrics for provider calls
"""

from .logging import get_logger, setup_logging, correlation_id_context, get_correlation_id
from .metrics import (
    metrics_registry,
    graphics_provider_duration_seconds,
    graphics_provider_requests_total,
    graphics_results_count,
    graphics_queries_total,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "correlation_id_context",
    "get_correlation_id",
    "metrics_registry",
    "graphics_provider_duration_seconds",
    "graphics_provider_requests_total",
    "graphics_results_count",
    "graphics_queries_total",
]
