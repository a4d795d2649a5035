"""
Aggregation orchestrator: source selection, concurrent fan-out, merge.

Selection precedence (first that applies wins):
  1. a non-empty prefer_sources list, in caller order
  2. the ranker's recommendation
then exclude_sources is removed, and an empty selection falls back to the
default illustration + icon pair (minus anything excluded).

At most MAX_CONCURRENT_PROVIDERS providers are queried, concurrently.
A provider that raises, times out or is missing from the registry
contributes nothing. Results are concatenated in selection order and
truncated to the limit; there is no de-duplication across providers.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from graphics_api import constants
from graphics_api.executors import run_provider_with_status
from graphics_api.metrics import log_query_start, track_query
from graphics_api.models import (
    AggregatedGraphicsResponse,
    GraphicResult,
    ParsedQuery,
    QueryOptions,
)
from graphics_api.providers.base import SupportsSearch
from graphics_api.query import parse_query
from graphics_api.scorer import rank_sources
from graphics_api.observability.logging import correlation_id_context, get_correlation_id

logger = logging.getLogger(__name__)

QueryInput = Union[str, QueryOptions, Dict[str, Any]]


def coerce_options(query_input: Optional[QueryInput]) -> QueryOptions:
    """Accept a bare concept string, a QueryOptions, or a dict of its fields."""
    if query_input is None:
        return QueryOptions()
    if isinstance(query_input, QueryOptions):
        return query_input
    if isinstance(query_input, str):
        return QueryOptions(concept=query_input)
    return QueryOptions.model_validate(query_input)


def _dedupe(items: Sequence[Optional[str]]) -> List[str]:
    return list(dict.fromkeys(item for item in items if item))


def apply_overrides(parsed: ParsedQuery, options: QueryOptions) -> ParsedQuery:
    """Merge explicit categories/style/content type into a parsed query."""
    if not (options.categories or options.style or options.content_type):
        return parsed

    categories = _dedupe([*options.categories, *parsed.detected_categories])
    styles = _dedupe([options.style, *parsed.detected_styles])
    content_type = options.content_type or parsed.detected_content_type

    return parsed.model_copy(update={
        "detected_categories": categories,
        "detected_styles": styles,
        "detected_content_type": content_type,
        "recommended_sources": rank_sources(categories, styles, content_type),
    })


def build_search_terms(parsed: ParsedQuery, options: QueryOptions) -> List[str]:
    """Parsed terms followed by any caller subjects, lowercased and deduplicated."""
    subjects = [subject.strip().lower() for subject in options.subjects]
    return _dedupe([*parsed.terms, *subjects])


def select_sources(
    recommended: Sequence[str],
    prefer_sources: Sequence[str] = (),
    exclude_sources: Sequence[str] = (),
) -> Tuple[List[str], bool]:
    """Return (sources in query order, whether the default pair was used)."""
    sources = list(prefer_sources) if prefer_sources else list(recommended)

    excluded = set(exclude_sources)
    if excluded:
        sources = [source for source in sources if source not in excluded]

    if sources:
        return sources, False

    fallback = [source for source in constants.DEFAULT_FALLBACK_SOURCES if source not in excluded]
    return fallback, True


async def query_graphics_with_status(
    query_input: Optional[QueryInput],
    providers: Mapping[str, SupportsSearch],
    *,
    timeout_seconds: Optional[float] = None,
    max_providers: Optional[int] = None,
) -> AggregatedGraphicsResponse:
    """Run an aggregated query and report per-provider status."""
    options = coerce_options(query_input)
    concept = options.concept or ""
    timeout = timeout_seconds if timeout_seconds is not None else constants.PROVIDER_TIMEOUT_SECONDS
    cap = max_providers if max_providers is not None else constants.MAX_CONCURRENT_PROVIDERS
    limit = options.limit or constants.DEFAULT_LIMIT

    parsed = apply_overrides(parse_query(concept), options)
    terms = build_search_terms(parsed, options)

    sources, used_fallback = select_sources(
        parsed.recommended_sources,
        prefer_sources=options.prefer_sources,
        exclude_sources=options.exclude_sources,
    )
    to_query = sources[:cap]

    with correlation_id_context(get_correlation_id()), track_query(concept) as metrics:
        metrics.sources_selected = to_query
        metrics.used_fallback = used_fallback
        log_query_start(concept, to_query)

        if used_fallback:
            logger.info(f"[Aggregator] No informative signal in {concept!r}, using fallback {to_query}")

        outcomes = await asyncio.gather(*[
            run_provider_with_status(
                source,
                providers.get(source),
                terms,
                timeout_seconds=timeout,
            )
            for source in to_query
        ])

        merged: List[GraphicResult] = []
        statuses = []
        for results, status in outcomes:
            merged.extend(results)
            statuses.append(status)
            metrics.record_provider(
                provider_id=status.provider_id,
                status=status.status,
                result_count=status.result_count,
                latency_ms=status.latency_ms or 0,
                error_message=status.message,
            )

        limited = merged[:limit]
        metrics.record_results(total=len(merged), returned=len(limited))

    return AggregatedGraphicsResponse(
        parsed_query=parsed,
        selected_sources=to_query,
        results=limited,
        provider_statuses=statuses,
    )


async def query_graphics(
    query_input: Optional[QueryInput],
    providers: Mapping[str, SupportsSearch],
    **kwargs: Any,
) -> List[GraphicResult]:
    """Query providers and return merged results only."""
    response = await query_graphics_with_status(query_input, providers, **kwargs)
    return response.results
