"""Query observability metrics.

Structured logging and metrics tracking for the aggregation pipeline.
Tracked per query:
- provider_status_reporting: Provider health and performance
- query_latency: End-to-end and per-provider latencies
- result counts before and after truncation

Each call to track_query() yields its own QueryMetrics, so concurrent
queries never share a collector.
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from graphics_api.observability.metrics import (
    graphics_provider_duration_seconds,
    graphics_provider_requests_total,
    graphics_queries_total,
    graphics_results_count,
)

logger = logging.getLogger("graphics_api.metrics")


@dataclass
class ProviderMetrics:
    """Metrics for a single provider execution."""
    provider_id: str
    status: str  # ok, error, timeout, unavailable
    result_count: int
    latency_ms: float
    error_message: Optional[str] = None


@dataclass
class QueryMetrics:
    """Aggregated metrics for a single query operation."""
    query: str = ""
    sources_selected: List[str] = field(default_factory=list)
    used_fallback: bool = False
    total_results: int = 0
    returned_results: int = 0
    providers_called: int = 0
    providers_succeeded: int = 0
    providers_failed: int = 0
    total_latency_ms: float = 0.0
    provider_metrics: List[ProviderMetrics] = field(default_factory=list)

    def success_rate(self) -> float:
        """Calculate provider success rate."""
        if self.providers_called == 0:
            return 0.0
        return self.providers_succeeded / self.providers_called

    def has_results(self) -> bool:
        return self.returned_results > 0

    def record_provider(self, provider_id: str, status: str, result_count: int,
                        latency_ms: float, error_message: Optional[str] = None) -> None:
        """Record metrics for a provider execution."""
        self.provider_metrics.append(ProviderMetrics(
            provider_id=provider_id,
            status=status,
            result_count=result_count,
            latency_ms=latency_ms,
            error_message=error_message,
        ))
        self.providers_called += 1

        if status == "ok":
            self.providers_succeeded += 1
        else:
            self.providers_failed += 1

        graphics_provider_requests_total.labels(provider=provider_id, status=status).inc()
        if status != "unavailable":
            graphics_provider_duration_seconds.labels(provider=provider_id).observe(latency_ms / 1000)
            graphics_results_count.labels(provider=provider_id).observe(result_count)

    def record_results(self, total: int, returned: int) -> None:
        self.total_results = total
        self.returned_results = returned

    def log(self) -> None:
        """Log the collected metrics in structured format."""
        provider_summary = [
            {
                "id": pm.provider_id,
                "status": pm.status,
                "results": pm.result_count,
                "latency_ms": round(pm.latency_ms, 1),
            }
            for pm in self.provider_metrics
        ]

        log_data = {
            "event": "query_complete",
            "query_length": len(self.query),
            "sources": self.sources_selected,
            "used_fallback": self.used_fallback,
            "results": {
                "total": self.total_results,
                "returned": self.returned_results,
            },
            "providers": {
                "called": self.providers_called,
                "succeeded": self.providers_succeeded,
                "failed": self.providers_failed,
                "success_rate": round(self.success_rate(), 2),
                "details": provider_summary,
            },
            "latency_ms": round(self.total_latency_ms, 1),
            "success": self.has_results(),
        }

        if self.providers_failed == self.providers_called and self.providers_called > 0:
            logger.error("Query failed - all providers failed", extra=log_data)
        elif self.providers_failed > 0:
            logger.warning("Query completed with provider failures", extra=log_data)
        elif not self.has_results():
            logger.warning("Query completed but no results", extra=log_data)
        else:
            logger.info("Query completed successfully", extra=log_data)


@contextmanager
def track_query(query: str = "") -> Iterator[QueryMetrics]:
    """Context manager that times a query and logs its metrics on exit."""
    metrics = QueryMetrics(query=query)
    started = time.monotonic()
    try:
        yield metrics
    finally:
        metrics.total_latency_ms = (time.monotonic() - started) * 1000
        graphics_queries_total.labels(outcome="results" if metrics.has_results() else "empty").inc()
        metrics.log()


def log_query_start(query: str, sources: List[str]) -> None:
    """Log query operation start."""
    logger.info(
        "Query started",
        extra={
            "event": "query_start",
            "query_length": len(query),
            "sources_selected": sources,
        }
    )
