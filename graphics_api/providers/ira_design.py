"""IRA Design provider: gradient SVG illustrations served from GitHub."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from graphics_api.models import GraphicResult, IRACategory, IRADesignOptions
from graphics_api.providers.base import GraphicProvider
from graphics_api.utils.svg import apply_gradient_stops

GITHUB_RAW = "https://raw.githubusercontent.com/ira-design/ira-illustrations"
SVG_BRANCH = "SVG"

CATEGORIES: tuple = ("characters", "objects", "backgrounds")

# Known illustrations, a subset of the repository
ILLUSTRATIONS: Dict[str, Tuple[str, ...]] = {
    "characters": (
        "char1", "char2", "char3", "char4", "char5",
        "char6", "char7", "char8", "char9", "char10",
    ),
    "objects": (
        "obj1", "obj2", "obj3", "obj4", "obj5",
        "laptop", "phone", "plant", "coffee", "book",
    ),
    "backgrounds": ("bg1", "bg2", "bg3", "bg4", "bg5"),
}

_CATEGORY_MAP: Dict[str, IRACategory] = {
    "person": "characters",
    "people": "characters",
    "human": "characters",
    "character": "characters",
    "object": "objects",
    "item": "objects",
    "thing": "objects",
    "background": "backgrounds",
    "scene": "backgrounds",
}


class IRADesignProvider(GraphicProvider):
    source = "ira-design"

    def get_url(self, category: IRACategory, name: str) -> str:
        return f"{GITHUB_RAW}/{SVG_BRANCH}/{category}/{name}.svg"

    async def fetch_svg(self, category: IRACategory, name: str) -> Optional[str]:
        return await self.fetch_svg_url(self.get_url(category, name))

    async def get(self, options: Optional[IRADesignOptions] = None) -> GraphicResult:
        options = options or IRADesignOptions()
        category = options.category
        name = options.name or ILLUSTRATIONS[category][0]

        svg = None
        if options.colors:
            content = await self.fetch_svg(category, name)
            if content:
                svg = apply_gradient_stops(
                    content,
                    primary=options.colors.primary,
                    secondary=options.colors.secondary,
                )

        return GraphicResult(
            url=self.get_url(category, name),
            svg=svg,
            source=self.source,
            metadata={"category": category, "name": name},
        )

    def get_random(self, category: IRACategory = "characters") -> GraphicResult:
        name = random.choice(ILLUSTRATIONS[category])
        return GraphicResult(
            url=self.get_url(category, name),
            source=self.source,
            metadata={"category": category, "name": name},
        )

    def list_illustrations(self, category: Optional[IRACategory] = None) -> List[str]:
        if category:
            return list(ILLUSTRATIONS[category])
        return [name for names in ILLUSTRATIONS.values() for name in names]

    async def search(self, terms: List[str]) -> List[GraphicResult]:
        matched_category: IRACategory = "characters"
        for term in terms:
            if term in _CATEGORY_MAP:
                matched_category = _CATEGORY_MAP[term]
                break

        return [self.get_random(matched_category), self.get_random(matched_category)]
