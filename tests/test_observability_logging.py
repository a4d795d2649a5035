"""Tests for structured logging helpers."""

import json
import logging
import os
import subprocess
import sys

import pytest

from graphics_api.aggregator import query_graphics
from graphics_api.observability.logging import (
    CorrelationIDFilter,
    CustomJsonFormatter,
    SensitiveDataFilter,
    correlation_id_context,
    generate_correlation_id,
    get_correlation_id,
    scrub_secrets,
    setup_logging,
)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _record(msg="hello", args=None, **extra):
    record = logging.LogRecord("graphics_api.test", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_generated_ids_are_prefixed():
    correlation_id = generate_correlation_id()
    assert correlation_id.startswith("qry-")
    assert len(correlation_id) == 20


def test_context_sets_and_resets():
    assert get_correlation_id() is None
    with correlation_id_context("qry-fixed") as correlation_id:
        assert correlation_id == "qry-fixed"
        assert get_correlation_id() == "qry-fixed"
    assert get_correlation_id() is None


def test_correlation_filter_defaults_to_none():
    record = _record()
    CorrelationIDFilter().filter(record)
    assert record.correlation_id == "none"


def test_sensitive_extra_fields_are_redacted():
    record = _record(api_key="abc123", provider_id="storyset")
    SensitiveDataFilter().filter(record)
    assert record.api_key == "[REDACTED]"
    assert record.provider_id == "storyset"


def test_sensitive_args_are_redacted():
    record = _record("payload %s", ({"token": "t", "name": "lock"},))
    SensitiveDataFilter().filter(record)
    assert record.getMessage() == "payload {'token': '[REDACTED]', 'name': 'lock'}"


def test_url_secrets_are_scrubbed():
    record = _record("GET %s", ("https://example.test/icons?api_key=abc&name=lock",))
    SensitiveDataFilter().filter(record)
    assert record.getMessage() == "GET https://example.test/icons?api_key=[REDACTED]&name=lock"


def test_scrub_secrets_leaves_plain_text():
    assert scrub_secrets("no credentials here") == "no credentials here"
    assert scrub_secrets("token=xyz") == "token=[REDACTED]"


def test_setup_logging_replaces_only_its_own_handler():
    root = logging.getLogger()
    level = root.level
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        setup_logging(level="warning", log_format="json")
        setup_logging(level="warning", log_format="json")

        ours = [h for h in root.handlers if getattr(h, "graphics_api_handler", False)]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, CustomJsonFormatter)
        assert foreign in root.handlers
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(foreign)
        for handler in list(root.handlers):
            if getattr(handler, "graphics_api_handler", False):
                root.removeHandler(handler)
        root.setLevel(level)


def test_import_leaves_host_logging_alone():
    script = (
        "import logging\n"
        "logging.basicConfig(level=logging.WARNING)\n"
        "root = logging.getLogger()\n"
        "before = list(root.handlers)\n"
        "import graphics_api\n"
        "assert root.level == logging.WARNING, root.level\n"
        "assert root.handlers == before, root.handlers\n"
        "assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger('graphics_api').handlers)\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", script],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr


def test_json_formatter_uses_current_module_path():
    from pythonjsonlogger.json import JsonFormatter

    assert issubclass(CustomJsonFormatter, JsonFormatter)


def test_json_formatter_fields():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(logger)s %(correlation_id)s %(message)s")
    record = _record(correlation_id="qry-1")

    payload = json.loads(formatter.format(record))

    assert payload["service"] == "graphics-api"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "graphics_api.test"
    assert payload["correlation_id"] == "qry-1"
    assert payload["message"] == "hello"


@pytest.mark.asyncio
async def test_query_runs_under_a_correlation_id():
    seen = []

    class RecordingProvider:
        async def search(self, terms):
            seen.append(get_correlation_id())
            return []

    await query_graphics({"prefer_sources": ["phosphor"]}, {"phosphor": RecordingProvider()})

    assert seen[0] is not None and seen[0].startswith("qry-")
    assert get_correlation_id() is None
