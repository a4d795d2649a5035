"""Shared constants and environment tunables for the query engine."""

import os

DEFAULT_LIMIT = 10

# Queried when selection ends up empty: one illustration source, one icon source.
DEFAULT_FALLBACK_SOURCES = ("storyset", "phosphor")

# Scoring weights for the source ranker
CONTENT_TYPE_WEIGHT = 10
STYLE_WEIGHT = 5
CATEGORY_WEIGHT = 3

# Tokens shorter than this are dropped by the query parser
MIN_TERM_LENGTH = 3

# Context-aware query() tuning
CONTEXT_ICON_HINTS = 3
CONTEXT_MIN_RESULTS = 5
CONTEXT_RESULT_CAP = 10


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = int(os.getenv(name, str(default)))
    except ValueError:
        return default
    return value if value > 0 else default


# How many providers from the selection are actually queried
MAX_CONCURRENT_PROVIDERS = _int_env("GRAPHICS_MAX_CONCURRENT_PROVIDERS", 3)

PROVIDER_TIMEOUT_SECONDS = _float_env("GRAPHICS_PROVIDER_TIMEOUT_SECONDS", 8.0)

HTTP_TIMEOUT_SECONDS = _float_env("GRAPHICS_HTTP_TIMEOUT_SECONDS", 10.0)
