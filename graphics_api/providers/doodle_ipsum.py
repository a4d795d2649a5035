"""Doodle Ipsum provider: URL-built doodles, no auth and no search API."""

from __future__ import annotations

import random
from typing import Dict, List, Optional
from urllib.parse import urlencode

from graphics_api.models import DoodleIpsumOptions, DoodleStyle, GraphicResult
from graphics_api.providers.base import GraphicProvider

BASE_URL = "https://doodleipsum.com"

STYLES: tuple = ("flat", "hand-drawn", "outlined", "abstract")

_STYLE_MAP: Dict[str, DoodleStyle] = {
    "sketch": "hand-drawn",
    "doodle": "hand-drawn",
    "simple": "flat",
    "clean": "flat",
    "line": "outlined",
    "geometric": "abstract",
}

SEARCH_RESULT_COUNT = 3


class DoodleIpsumProvider(GraphicProvider):
    source = "doodle-ipsum"

    def get_url(self, options: Optional[DoodleIpsumOptions] = None) -> str:
        options = options or DoodleIpsumOptions()
        url = f"{BASE_URL}/{options.width}x{options.height}/{options.style}"

        params = {}
        if options.id is not None:
            params["i"] = str(options.id)
        if options.seed is not None:
            params["n"] = str(options.seed)
        if options.background:
            params["bg"] = options.background

        return f"{url}?{urlencode(params)}" if params else url

    def _result(self, options: DoodleIpsumOptions, **metadata) -> GraphicResult:
        return GraphicResult(
            url=self.get_url(options),
            source=self.source,
            width=options.width,
            height=options.height,
            metadata={"style": options.style, **metadata},
        )

    def get_random(self, options: Optional[DoodleIpsumOptions] = None) -> GraphicResult:
        seed = random.randint(0, 9999)
        options = (options or DoodleIpsumOptions()).model_copy(update={"id": None, "seed": seed})
        return self._result(options, seed=seed)

    def get_by_id(self, doodle_id: int, options: Optional[DoodleIpsumOptions] = None) -> GraphicResult:
        options = (options or DoodleIpsumOptions()).model_copy(update={"id": doodle_id})
        return self._result(options, id=doodle_id)

    def get_many(self, count: int, options: Optional[DoodleIpsumOptions] = None) -> List[GraphicResult]:
        return [self.get_random(options) for _ in range(count)]

    async def get(self, options: Optional[DoodleIpsumOptions] = None) -> GraphicResult:
        if options is not None and options.id is not None:
            return self.get_by_id(options.id, options)
        return self.get_random(options)

    async def search(self, terms: List[str]) -> List[GraphicResult]:
        """Random doodles in the first style the terms hint at (flat by default)."""
        matched_style: DoodleStyle = "flat"
        for term in terms:
            if term in _STYLE_MAP:
                matched_style = _STYLE_MAP[term]
                break
            if term in STYLES:
                matched_style = term
                break

        return self.get_many(SEARCH_RESULT_COUNT, DoodleIpsumOptions(style=matched_style))
