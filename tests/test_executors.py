"""Tests for the provider executor status reporting."""

import logging

import pytest

from graphics_api.exceptions import ProviderError

from graphics_api.executors import run_provider_with_status
from graphics_api.models import GraphicResult


@pytest.mark.asyncio
async def test_ok_status_with_latency(make_provider):
    results, status = await run_provider_with_status("phosphor", make_provider("phosphor", count=3), ["lock"])

    assert len(results) == 3
    assert all(isinstance(r, GraphicResult) for r in results)
    assert status.status == "ok"
    assert status.result_count == 3
    assert status.latency_ms is not None and status.latency_ms >= 0


@pytest.mark.asyncio
async def test_missing_provider_is_unavailable():
    results, status = await run_provider_with_status("nope", None, ["x"])

    assert results == []
    assert status.status == "unavailable"
    assert status.message == "Provider not registered"


@pytest.mark.asyncio
async def test_exception_becomes_error_status(make_provider):
    provider = make_provider("storyset", error=ValueError("bad payload"))

    results, status = await run_provider_with_status("storyset", provider, ["team"])

    assert results == []
    assert status.status == "error"
    assert status.message == "Search failed: bad payload"


@pytest.mark.asyncio
async def test_timeout_status(make_provider):
    provider = make_provider("lucide", delay=1.0)

    results, status = await run_provider_with_status("lucide", provider, ["x"], timeout_seconds=0.01)

    assert results == []
    assert status.status == "timeout"
    assert status.message == "Search timed out"


@pytest.mark.asyncio
async def test_dict_results_are_validated():
    class DictProvider:
        async def search(self, terms):
            return [{"url": "https://x.test/a.svg", "source": "lucide", "metadata": {"name": "a"}}]

    results, status = await run_provider_with_status("lucide", DictProvider(), [])

    assert results == [GraphicResult(url="https://x.test/a.svg", source="lucide", metadata={"name": "a"})]
    assert status.status == "ok"


@pytest.mark.asyncio
async def test_malformed_results_become_error():
    class BrokenProvider:
        async def search(self, terms):
            return [{"title": "no url here"}]

    results, status = await run_provider_with_status("iconoodle", BrokenProvider(), [])

    assert results == []
    assert status.status == "error"


@pytest.mark.asyncio
async def test_terms_are_passed_as_list(make_provider):
    provider = make_provider("phosphor")
    await run_provider_with_status("phosphor", provider, ("a", "b"))
    assert provider.search_calls == [["a", "b"]]


@pytest.mark.asyncio
async def test_provider_error_is_logged_with_detail(make_provider, caplog):
    provider = make_provider("lucide", error=ProviderError("HTTP 503", provider="lucide", status_code=503))

    with caplog.at_level(logging.WARNING, logger="graphics_api.executors.base"):
        _, status = await run_provider_with_status("lucide", provider, ["lock"])

    record = caplog.records[-1]
    assert status.status == "error"
    assert record.provider_id == "lucide"
    assert record.error == "ProviderError"
    assert record.detail == {"provider": "lucide", "service": "graphics_provider"}
