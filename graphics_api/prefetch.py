"""
Prefetch helpers for offline rendering.

Renderers that cannot reach external URLs get results whose url is a
self-contained data URI. A result that can't be fetched is returned
unchanged.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from graphics_api import constants
from graphics_api.models import GraphicResult
from graphics_api.utils.svg import (
    bytes_to_data_uri,
    looks_like_svg,
    svg_to_base64_data_uri,
    svg_to_data_uri,
)

logger = logging.getLogger(__name__)

__all__ = [
    "prefetch_graphics",
    "prefetch_graphic",
    "get_prefetched_url",
    "render_svg_content",
    "svg_to_data_uri",
    "svg_to_base64_data_uri",
]


async def _prefetch_one(client: httpx.AsyncClient, graphic: GraphicResult) -> GraphicResult:
    if graphic.svg:
        return graphic.model_copy(update={"url": svg_to_data_uri(graphic.svg), "prefetched": True})

    try:
        response = await client.get(graphic.url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.info(f"[Prefetch] Keeping remote url for {graphic.url}: {e}")
        return graphic

    content_type = response.headers.get("content-type", "")
    text = response.text
    if looks_like_svg(text, content_type):
        return graphic.model_copy(update={
            "svg": text,
            "url": svg_to_data_uri(text),
            "prefetched": True,
        })

    media_type = content_type.split(";")[0].strip() or "application/octet-stream"
    return graphic.model_copy(update={
        "url": bytes_to_data_uri(response.content, media_type),
        "prefetched": True,
    })


async def prefetch_graphics(
    graphics: Sequence[GraphicResult],
    client: Optional[httpx.AsyncClient] = None,
) -> List[GraphicResult]:
    """Inline every result as a data URI, preserving order."""
    if not graphics:
        return []

    if client is not None:
        return list(await asyncio.gather(*[_prefetch_one(client, g) for g in graphics]))

    async with httpx.AsyncClient(timeout=constants.HTTP_TIMEOUT_SECONDS, follow_redirects=True) as owned:
        return list(await asyncio.gather(*[_prefetch_one(owned, g) for g in graphics]))


async def prefetch_graphic(graphic: GraphicResult, client: Optional[httpx.AsyncClient] = None) -> GraphicResult:
    prefetched = await prefetch_graphics([graphic], client=client)
    return prefetched[0]


def get_prefetched_url(graphic: GraphicResult) -> str:
    """Data URI for inline SVG, otherwise the result's url."""
    if graphic.svg:
        return svg_to_data_uri(graphic.svg)
    return graphic.url


def render_svg_content(graphic: GraphicResult) -> Optional[str]:
    return graphic.svg or None
