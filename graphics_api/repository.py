"""
GraphicsRepository: the registry of providers plus the context-aware
entry points built on top of the aggregator.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional

from graphics_api.exceptions import ProviderNotFoundError
from graphics_api import constants
from graphics_api.aggregator import QueryInput, coerce_options, query_graphics, query_graphics_with_status
from graphics_api.context import get_icons_for_context, get_themes_for_context
from graphics_api.models import (
    AggregatedGraphicsResponse,
    ContextGraphics,
    GraphicResult,
    LucideOptions,
    PhosphorOptions,
    QueryOptions,
)
from graphics_api.providers import build_default_providers
from graphics_api.providers.base import SupportsSearch
from graphics_api.query import tokenize

logger = logging.getLogger(__name__)


def _successful(outcomes: List[Any], label: str) -> List[GraphicResult]:
    """Drop failed and empty lookups; failures are logged, not raised."""
    results: List[GraphicResult] = []
    for outcome in outcomes:
        if isinstance(outcome, Exception):
            logger.warning(f"[GraphicsRepository] {label} lookup failed: {outcome}")
            continue
        if outcome is not None:
            results.append(outcome)
    return results


class GraphicsRepository:
    def __init__(self, providers: Optional[Mapping[str, SupportsSearch]] = None):
        self.providers: Dict[str, Any] = dict(providers) if providers is not None else build_default_providers()
        logger.debug(f"[GraphicsRepository] Registered providers: {list(self.providers.keys())}")

    def get_provider(self, provider_id: str) -> Any:
        provider = self.providers.get(provider_id)
        if provider is None:
            raise ProviderNotFoundError(
                f"Unknown provider: {provider_id}",
                detail={"provider_id": provider_id, "available": list(self.providers.keys())},
            )
        return provider

    async def query_with_status(self, query_input: Optional[QueryInput], **kwargs: Any) -> AggregatedGraphicsResponse:
        return await query_graphics_with_status(query_input, self.providers, **kwargs)

    async def query_graphics(self, query_input: Optional[QueryInput], **kwargs: Any) -> List[GraphicResult]:
        """Plain aggregated query, no context enrichment."""
        return await query_graphics(query_input, self.providers, **kwargs)

    async def query(self, query_input: QueryInput, **kwargs: Any) -> List[GraphicResult]:
        """
        Context-aware query.

        A plain string is enriched with icon hints from the context tables
        before aggregation. When that still yields few results, hinted icons
        are fetched directly from phosphor and lucide and appended.
        """
        if isinstance(query_input, str):
            concept = query_input
        else:
            concept = coerce_options(query_input).concept or ""

        icon_hints = get_icons_for_context(concept)
        themes = get_themes_for_context(concept)
        logger.debug(f"[GraphicsRepository] Context hints for {concept!r}: icons={icon_hints} themes={themes}")

        if isinstance(query_input, str):
            hinted = icon_hints[:constants.CONTEXT_ICON_HINTS]
            enhanced = list(dict.fromkeys([*tokenize(concept), *hinted]))
            query_input = QueryOptions(concept=concept, subjects=enhanced)

        results = await query_graphics(query_input, self.providers, **kwargs)

        if not icon_hints or len(results) >= constants.CONTEXT_MIN_RESULTS:
            return results

        icons = await self._fetch_hinted_icons(icon_hints[:constants.CONTEXT_ICON_HINTS])
        return [*results, *icons][:constants.CONTEXT_RESULT_CAP]

    async def _fetch_hinted_icons(self, names: List[str]) -> List[GraphicResult]:
        phosphor = self.providers.get("phosphor")
        lucide = self.providers.get("lucide")

        # Phosphor then lucide for each name, in hint order
        lookups = []
        for name in names:
            if phosphor is not None:
                lookups.append(phosphor.get(PhosphorOptions(name=name, weight="regular")))
            if lucide is not None:
                lookups.append(lucide.get(LucideOptions(name=name)))

        if not lookups:
            return []

        outcomes = await asyncio.gather(*lookups, return_exceptions=True)
        return _successful(list(outcomes), "icon")

    async def get_graphics_for_context(self, context: str) -> ContextGraphics:
        """Icons, illustrations and doodles for a storyline, fetched concurrently."""
        icon_names = get_icons_for_context(context)
        themes = get_themes_for_context(context)

        phosphor = self.get_provider("phosphor")
        storyset = self.get_provider("storyset")
        iconoodle = self.get_provider("iconoodle")

        async def _icons() -> List[GraphicResult]:
            outcomes = await asyncio.gather(
                *[phosphor.get(PhosphorOptions(name=name, weight="regular")) for name in icon_names[:5]],
                return_exceptions=True,
            )
            return _successful(list(outcomes), "icon")

        icons, illustrations, doodles = await asyncio.gather(
            _icons(),
            storyset.search(themes),
            iconoodle.search(icon_names[:constants.CONTEXT_ICON_HINTS]),
            return_exceptions=True,
        )

        return ContextGraphics(
            icons=icons if isinstance(icons, list) else [],
            illustrations=_list_or_empty(illustrations, "illustration"),
            doodles=_list_or_empty(doodles, "doodle"),
        )


def _list_or_empty(outcome: Any, label: str) -> List[GraphicResult]:
    if isinstance(outcome, Exception):
        logger.warning(f"[GraphicsRepository] {label} search failed: {outcome}")
        return []
    return list(outcome or [])


_default_repository: Optional[GraphicsRepository] = None


def get_repository() -> GraphicsRepository:
    """Process-wide repository over the default providers."""
    global _default_repository
    if _default_repository is None:
        _default_repository = GraphicsRepository()
    return _default_repository


async def query(query_input: QueryInput, **kwargs: Any) -> List[GraphicResult]:
    return await get_repository().query(query_input, **kwargs)


async def get_graphics_for_context(context: str) -> ContextGraphics:
    return await get_repository().get_graphics_for_context(context)
