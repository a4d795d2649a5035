"""
Logging for the graphics query engine.

Every aggregated query runs under a query id held in a ContextVar, so
provider logs emitted from concurrent tasks can be tied back to the query
that spawned them. Nothing is configured on import: the host application
calls setup_logging() when it wants this output (plain text in
development, JSON via python-json-logger in production).

    from graphics_api.observability import get_logger, correlation_id_context, setup_logging

    setup_logging()  # once, from the application entry point
    logger = get_logger(__name__)
    with correlation_id_context():
        logger.info("Provider finished", extra={"provider_id": "phosphor", "result_count": 5})
"""

import logging
import os
import re
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "graphics-api"

_query_id: ContextVar[Optional[str]] = ContextVar("graphics_query_id", default=None)

# Extra fields whose values never reach a log line
REDACTED_FIELDS = frozenset({"api_key", "apikey", "token", "secret", "password", "authorization"})

# key=value pairs inside logged URLs and messages
_SECRET_PARAM = re.compile(r"(?i)\b(api_key|apikey|key|token|secret|signature)=([^&\s\"']+)")

TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(correlation_id)s] %(name)s: %(message)s"
JSON_FORMAT = "%(timestamp)s %(level)s %(logger)s %(correlation_id)s %(message)s"


def generate_correlation_id() -> str:
    return f"qry-{uuid.uuid4().hex[:16]}"


def get_correlation_id() -> Optional[str]:
    return _query_id.get()


class correlation_id_context:
    """
    Bind a query id for the duration of a block.

    Reuses the given id (e.g. one already bound by an outer query) or
    generates a fresh one. The previous value is restored on exit.
    """

    def __init__(self, correlation_id: Optional[str] = None):
        self.correlation_id = correlation_id or generate_correlation_id()
        self._token = None

    def __enter__(self) -> str:
        self._token = _query_id.set(self.correlation_id)
        return self.correlation_id

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _query_id.reset(self._token)


class CorrelationIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "none"
        return True


def scrub_secrets(text: str) -> str:
    """Mask credential-looking query parameters in free text."""
    return _SECRET_PARAM.sub(lambda m: f"{m.group(1)}=[REDACTED]", text)


class SensitiveDataFilter(logging.Filter):
    """Masks secret extras, secret mapping keys in args, and secrets in URLs."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = scrub_secrets(record.msg)
        if record.args:
            record.args = self._redact(record.args)

        for key in list(vars(record)):
            if key.lower() in REDACTED_FIELDS:
                setattr(record, key, "[REDACTED]")
        return True

    def _redact(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: "[REDACTED]" if str(k).lower() in REDACTED_FIELDS else self._redact(v)
                for k, v in value.items()
            }
        if isinstance(value, (list, tuple)):
            return type(value)(self._redact(item) for item in value)
        if isinstance(value, str):
            return scrub_secrets(value)
        return value


class CustomJsonFormatter(JsonFormatter):
    """JSON lines with service, environment and query id on every record."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["correlation_id"] = getattr(record, "correlation_id", "none")
        log_record["service"] = SERVICE_NAME
        log_record["environment"] = os.getenv("ENVIRONMENT", "development")
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def _build_handler(log_format: str) -> logging.Handler:
    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(CustomJsonFormatter(JSON_FORMAT, rename_fields={"timestamp": "@timestamp"}))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%H:%M:%S"))
    handler.addFilter(CorrelationIDFilter())
    handler.addFilter(SensitiveDataFilter())
    # Marks the handler as ours so reconfiguring replaces only it
    handler.graphics_api_handler = True
    return handler


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Install the graphics-api handler on the root logger.

    Environment variables (used when arguments are omitted):
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default INFO)
    - LOG_FORMAT: json or text (default json when ENVIRONMENT=production)
    - ENVIRONMENT: development, staging, production

    Handlers installed by the host application are left alone.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if log_format is None:
        log_format = os.getenv("LOG_FORMAT", "json" if os.getenv("ENVIRONMENT") == "production" else "text")

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "graphics_api_handler", False):
            root_logger.removeHandler(handler)

    root_logger.addHandler(_build_handler(log_format.lower()))
    root_logger.setLevel(level)

    # Per-request chatter from the HTTP client
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

