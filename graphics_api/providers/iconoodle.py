"""
Iconoodle provider.

The whole catalog ships as one doodles.json with embedded SVGs, so it is
fetched once per provider instance and filtered locally.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

from graphics_api.exceptions import ProviderError
from graphics_api.models import GraphicResult, IconoodleOptions
from graphics_api.providers.base import GraphicProvider
from graphics_api.utils.svg import recolor_hex

logger = logging.getLogger(__name__)

DOODLES_JSON_URL = "https://raw.githubusercontent.com/NK2552003/Iconoodle/main/lib/doodles.json"
SITE_URL = "https://nk2552003.github.io/Iconoodle"

SEARCH_RESULT_COUNT = 5


class IconoodleProvider(GraphicProvider):
    source = "iconoodle"

    def __init__(self):
        self._cache: Optional[List[Dict[str, Any]]] = None

    async def fetch_doodles(self) -> List[Dict[str, Any]]:
        """The catalog, or [] if it can't be loaded. Failures are not cached."""
        if self._cache is not None:
            return self._cache

        try:
            data = await self.fetch_json(DOODLES_JSON_URL)
            if not isinstance(data, list):
                raise ProviderError("doodles.json is not a list", provider=self.source)
        except ProviderError as e:
            logger.error(f"[Iconoodle] Error fetching doodles: {e}")
            return []

        self._cache = data
        return data

    def _to_result(self, doodle: Dict[str, Any], svg: Optional[str] = None) -> GraphicResult:
        return GraphicResult(
            url=f"{SITE_URL}{doodle.get('src', '')}",
            svg=svg if svg is not None else doodle.get("svg"),
            source=self.source,
            metadata={
                "id": doodle.get("id"),
                "category": doodle.get("category"),
                "style": doodle.get("style"),
                "viewBox": doodle.get("viewBox"),
            },
        )

    async def get_categories(self) -> List[str]:
        doodles = await self.fetch_doodles()
        return list(dict.fromkeys(d.get("category", "") for d in doodles))

    async def get_styles(self) -> List[str]:
        doodles = await self.fetch_doodles()
        return list(dict.fromkeys(d.get("style", "") for d in doodles))

    async def get_by_id(self, doodle_id: str) -> Optional[GraphicResult]:
        for doodle in await self.fetch_doodles():
            if doodle.get("id") == doodle_id:
                return self._to_result(doodle)
        return None

    async def get_by_category(self, category: str) -> List[GraphicResult]:
        doodles = await self.fetch_doodles()
        return [self._to_result(d) for d in doodles if d.get("category") == category]

    async def get_by_style(self, style: str) -> List[GraphicResult]:
        doodles = await self.fetch_doodles()
        return [self._to_result(d) for d in doodles if d.get("style") == style]

    async def get_random(self) -> Optional[GraphicResult]:
        doodles = await self.fetch_doodles()
        if not doodles:
            return None
        return self._to_result(random.choice(doodles))

    async def get(self, options: IconoodleOptions) -> Optional[GraphicResult]:
        """First doodle whose id or category contains the name, optionally recolored."""
        name = options.name.lower()
        for doodle in await self.fetch_doodles():
            if name in str(doodle.get("id", "")).lower() or name in str(doodle.get("category", "")).lower():
                svg = doodle.get("svg") or ""
                if options.color:
                    svg = recolor_hex(svg, options.color)
                return self._to_result(doodle, svg=svg)
        return None

    async def search(self, terms: List[str]) -> List[GraphicResult]:
        doodles = await self.fetch_doodles()
        lowered = [term.lower() for term in terms]

        def _matches(doodle: Dict[str, Any]) -> bool:
            fields = [str(doodle.get(key, "")).lower() for key in ("id", "category", "style")]
            return any(term in field for term in lowered for field in fields)

        matches = [d for d in doodles if _matches(d)]
        selected = matches[:SEARCH_RESULT_COUNT] or doodles[:SEARCH_RESULT_COUNT]
        return [self._to_result(d) for d in selected]

    async def count(self) -> int:
        return len(await self.fetch_doodles())

    def clear_cache(self) -> None:
        self._cache = None
