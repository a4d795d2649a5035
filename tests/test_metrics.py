"""Tests for query observability metrics."""

import logging

from graphics_api.metrics import ProviderMetrics, QueryMetrics, log_query_start, track_query
from graphics_api.observability.metrics import metrics_registry


def _sample(name, labels):
    return metrics_registry.get_sample_value(name, labels) or 0.0


class TestQueryMetrics:
    def test_success_rate_with_all_succeeded(self):
        metrics = QueryMetrics(providers_called=3, providers_succeeded=3)
        assert metrics.success_rate() == 1.0

    def test_success_rate_with_partial_failure(self):
        metrics = QueryMetrics(providers_called=4, providers_succeeded=2, providers_failed=2)
        assert metrics.success_rate() == 0.5

    def test_success_rate_with_no_providers(self):
        assert QueryMetrics().success_rate() == 0.0

    def test_has_results(self):
        assert QueryMetrics(returned_results=5).has_results() is True
        assert QueryMetrics(returned_results=0).has_results() is False

    def test_record_provider_counts(self):
        metrics = QueryMetrics()
        metrics.record_provider("phosphor", "ok", 5, 120.0)
        metrics.record_provider("lucide", "timeout", 0, 8000.0, error_message="Search timed out")

        assert metrics.providers_called == 2
        assert metrics.providers_succeeded == 1
        assert metrics.providers_failed == 1
        assert metrics.provider_metrics[1] == ProviderMetrics(
            provider_id="lucide",
            status="timeout",
            result_count=0,
            latency_ms=8000.0,
            error_message="Search timed out",
        )

    def test_record_provider_updates_prometheus(self):
        labels = {"provider": "test-provider", "status": "error"}
        before = _sample("graphics_provider_requests_total", labels)

        QueryMetrics().record_provider("test-provider", "error", 0, 15.0)

        assert _sample("graphics_provider_requests_total", labels) == before + 1

    def test_unavailable_provider_skips_duration(self):
        labels = {"provider": "never-registered"}
        before = _sample("graphics_provider_duration_seconds_count", labels)

        QueryMetrics().record_provider("never-registered", "unavailable", 0, 0)

        assert _sample("graphics_provider_duration_seconds_count", labels) == before


class TestTrackQuery:
    def test_yields_fresh_metrics(self):
        with track_query("a") as first:
            first.record_results(total=3, returned=3)
        with track_query("b") as second:
            pass

        assert first is not second
        assert second.returned_results == 0
        assert first.total_latency_ms >= 0

    def test_counts_outcome(self):
        before = _sample("graphics_queries_total", {"outcome": "empty"})

        with track_query("nothing"):
            pass

        assert _sample("graphics_queries_total", {"outcome": "empty"}) == before + 1

    def test_logs_failure_when_all_providers_fail(self, caplog):
        with caplog.at_level(logging.INFO, logger="graphics_api.metrics"):
            with track_query("x") as metrics:
                metrics.record_provider("phosphor", "error", 0, 10.0)

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.event == "query_complete"
        assert record.providers["failed"] == 1

    def test_logs_success(self, caplog):
        with caplog.at_level(logging.INFO, logger="graphics_api.metrics"):
            with track_query("x") as metrics:
                metrics.record_provider("phosphor", "ok", 2, 10.0)
                metrics.record_results(total=2, returned=2)

        assert caplog.records[-1].getMessage() == "Query completed successfully"


def test_log_query_start(caplog):
    with caplog.at_level(logging.INFO, logger="graphics_api.metrics"):
        log_query_start("flat icon", ["phosphor", "lucide"])

    record = caplog.records[-1]
    assert record.event == "query_start"
    assert record.sources_selected == ["phosphor", "lucide"]
    assert record.query_length == 9
