"""Phosphor icons provider, served raw from the GitHub core repository."""

from __future__ import annotations

from typing import List, Optional

from graphics_api.models import GraphicResult, PhosphorOptions, PhosphorWeight
from graphics_api.providers.base import GraphicProvider
from graphics_api.utils.svg import replace_current_color, set_size, svg_to_base64_data_uri

GITHUB_RAW = "https://raw.githubusercontent.com/phosphor-icons/core/main/assets"

WEIGHTS: tuple = ("thin", "light", "regular", "bold", "fill", "duotone")

DEFAULT_SIZE = 24
SEARCH_RESULT_COUNT = 5

# Common icon names (subset of the full set)
COMMON_ICONS: tuple = tuple(dict.fromkeys([
    "arrow-right", "arrow-left", "arrow-up", "arrow-down",
    "check", "x", "plus", "minus",
    "user", "users", "gear", "house",
    "magnifying-glass", "bell", "envelope", "heart",
    "star", "bookmark", "download", "upload",
    "trash", "pencil", "copy", "share",
    "play", "pause", "stop", "skip-forward",
    "sun", "moon", "cloud", "lightning",
    "code", "terminal", "database", "globe",
    "chat", "phone", "camera", "image",
    "credit-card", "wallet", "bank", "currency-dollar",
    "lock", "key", "shield", "warning",
    "check-circle", "x-circle", "info", "question",
    "trophy", "medal", "crown", "flag",
    "briefcase", "calendar", "clock", "hourglass",
    "file", "folder", "archive", "clipboard",
    "link", "at", "hash", "percent",
    "chart-line", "chart-bar", "chart-pie", "trend-up",
    "rocket", "lightning", "fire", "sparkle",
    "shopping-cart", "bag", "package", "gift",
    "log-in", "log-out", "sign-in", "sign-out",
]))


def _filename(name: str, weight: PhosphorWeight) -> str:
    # Non-regular weights carry a -{weight} suffix
    if weight == "regular":
        return f"{name}.svg"
    return f"{name}-{weight}.svg"


class PhosphorProvider(GraphicProvider):
    source = "phosphor"

    def get_url(self, name: str, weight: PhosphorWeight = "regular") -> str:
        return f"{GITHUB_RAW}/{weight}/{_filename(name, weight)}"

    async def fetch_svg(self, name: str, weight: PhosphorWeight = "regular") -> Optional[str]:
        return await self.fetch_svg_url(self.get_url(name, weight))

    async def get(self, options: PhosphorOptions) -> GraphicResult:
        svg = await self.fetch_svg(options.name, options.weight)
        if svg:
            if options.size:
                svg = set_size(svg, options.size)
            if options.color:
                svg = replace_current_color(svg, options.color)

        size = options.size or DEFAULT_SIZE
        return GraphicResult(
            url=self.get_url(options.name, options.weight),
            svg=svg,
            source=self.source,
            width=size,
            height=size,
            metadata={"name": options.name, "weight": options.weight},
        )

    async def get_data_uri(self, name: str, weight: PhosphorWeight = "regular") -> Optional[str]:
        svg = await self.fetch_svg(name, weight)
        if not svg:
            return None
        return svg_to_base64_data_uri(svg)

    async def search(self, terms: List[str]) -> List[GraphicResult]:
        matches = [
            icon for icon in COMMON_ICONS
            if any(term in icon or icon.replace("-", "") in term for term in terms)
        ]
        names = matches[:SEARCH_RESULT_COUNT] or list(COMMON_ICONS[:SEARCH_RESULT_COUNT])

        return [
            GraphicResult(
                url=self.get_url(name),
                source=self.source,
                width=DEFAULT_SIZE,
                height=DEFAULT_SIZE,
                metadata={"name": name, "weight": "regular"},
            )
            for name in names
        ]
