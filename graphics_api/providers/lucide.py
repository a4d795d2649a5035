"""Lucide icons provider, served from the unpkg CDN."""

from __future__ import annotations

from typing import List, Optional

from graphics_api.models import GraphicResult, LucideOptions
from graphics_api.providers.base import GraphicProvider
from graphics_api.utils.svg import replace_current_color, set_size, svg_to_base64_data_uri

UNPKG_URL = "https://unpkg.com/lucide-static@latest/icons"

DEFAULT_SIZE = 24
DEFAULT_STROKE_WIDTH = 2
SEARCH_RESULT_COUNT = 5

COMMON_ICONS: tuple = (
    "arrow-right", "arrow-left", "arrow-up", "arrow-down",
    "check", "x", "plus", "minus",
    "user", "users", "settings", "home",
    "search", "bell", "mail", "heart",
    "star", "bookmark", "download", "upload",
    "trash-2", "edit", "copy", "share-2",
    "play", "pause", "square", "skip-forward",
    "sun", "moon", "cloud", "zap",
    "code", "terminal", "database", "globe",
    "message-circle", "phone", "camera", "image",
    "folder", "file", "file-text", "archive",
    "calendar", "clock", "map-pin", "navigation",
    "wifi", "bluetooth", "battery", "power",
    "lock", "unlock", "key", "shield",
)


class LucideProvider(GraphicProvider):
    source = "lucide"

    def get_url(self, name: str) -> str:
        return f"{UNPKG_URL}/{name}.svg"

    async def fetch_svg(self, name: str) -> Optional[str]:
        return await self.fetch_svg_url(self.get_url(name))

    async def get(self, options: LucideOptions) -> GraphicResult:
        svg = await self.fetch_svg(options.name)
        if svg:
            if options.size != DEFAULT_SIZE:
                svg = set_size(svg, options.size, current=str(DEFAULT_SIZE))
            if options.color:
                svg = replace_current_color(svg, options.color)
            if options.stroke_width != DEFAULT_STROKE_WIDTH:
                stroke_width = f"{options.stroke_width:g}"
                svg = svg.replace('stroke-width="2"', f'stroke-width="{stroke_width}"')

        return GraphicResult(
            url=self.get_url(options.name),
            svg=svg,
            source=self.source,
            width=options.size,
            height=options.size,
            metadata={"name": options.name, "stroke_width": options.stroke_width},
        )

    async def get_data_uri(self, name: str) -> Optional[str]:
        svg = await self.fetch_svg(name)
        if not svg:
            return None
        return svg_to_base64_data_uri(svg)

    async def search(self, terms: List[str]) -> List[GraphicResult]:
        # Only the first hyphen is dropped for the reverse match
        matches = [
            icon for icon in COMMON_ICONS
            if any(term in icon or icon.replace("-", "", 1) in term for term in terms)
        ]
        names = matches[:SEARCH_RESULT_COUNT] or list(COMMON_ICONS[:SEARCH_RESULT_COUNT])

        return [
            GraphicResult(
                url=self.get_url(name),
                source=self.source,
                width=DEFAULT_SIZE,
                height=DEFAULT_SIZE,
                metadata={"name": name},
            )
            for name in names
        ]
