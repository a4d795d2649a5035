"""Unified graphics query API: illustrations, icons and doodles from public sources."""

import logging

from .models import (
    AggregatedGraphicsResponse,
    ContextGraphics,
    GraphicResult,
    ParsedQuery,
    ProviderStatusSnapshot,
    QueryOptions,
    StoryContext,
)
from .taxonomy import SOURCE_CAPABILITIES, SOURCE_NAMES, TAXONOMY
from .context import CONTEXT_MAPPINGS, get_icons_for_context, get_themes_for_context, parse_context
from .query import parse, parse_query, tokenize
from .scorer import rank_sources, score_sources
from .aggregator import query_graphics, query_graphics_with_status, select_sources
from .providers import PROVIDERS, available_provider_ids
from .repository import GraphicsRepository, get_graphics_for_context, get_repository, query
from .prefetch import (
    get_prefetched_url,
    prefetch_graphic,
    prefetch_graphics,
    svg_to_base64_data_uri,
    svg_to_data_uri,
)

__all__ = [
    "AggregatedGraphicsResponse",
    "ContextGraphics",
    "GraphicResult",
    "ParsedQuery",
    "ProviderStatusSnapshot",
    "QueryOptions",
    "StoryContext",
    "SOURCE_CAPABILITIES",
    "SOURCE_NAMES",
    "TAXONOMY",
    "CONTEXT_MAPPINGS",
    "get_icons_for_context",
    "get_themes_for_context",
    "parse_context",
    "parse",
    "parse_query",
    "tokenize",
    "rank_sources",
    "score_sources",
    "query_graphics",
    "query_graphics_with_status",
    "select_sources",
    "PROVIDERS",
    "available_provider_ids",
    "GraphicsRepository",
    "get_graphics_for_context",
    "get_repository",
    "query",
    "get_prefetched_url",
    "prefetch_graphic",
    "prefetch_graphics",
    "svg_to_base64_data_uri",
    "svg_to_data_uri",
]

# Silent unless the host configures logging or calls observability.setup_logging()
logging.getLogger(__name__).addHandler(logging.NullHandler())
