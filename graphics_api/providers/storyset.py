"""Storyset provider: Freepik's public vectors API, no auth."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from graphics_api.exceptions import ProviderError
from graphics_api.models import GraphicResult, StorysetCategory, StorysetOptions, StorysetStyle
from graphics_api.providers.base import GraphicProvider

logger = logging.getLogger(__name__)

API_URL = "https://stories.freepiklabs.com/api/vectors"

CATEGORIES: tuple = ("business", "coding", "education", "health", "people", "technology")
STYLES: tuple = ("rafiki", "bro", "amico", "pana", "cuate")

_CATEGORY_MAP: Dict[str, StorysetCategory] = {
    "code": "coding",
    "coding": "coding",
    "programming": "coding",
    "developer": "coding",
    "tech": "technology",
    "computer": "technology",
    "office": "business",
    "work": "business",
    "team": "business",
    "meeting": "business",
    "learn": "education",
    "study": "education",
    "doctor": "health",
    "medical": "health",
    "person": "people",
    "human": "people",
}


class StorysetProvider(GraphicProvider):
    source = "storyset"

    def get_fallback(self, category: str, style: str) -> List[GraphicResult]:
        """Category page link used when the API is unreachable."""
        return [GraphicResult(
            url=f"https://storyset.com/{category}",
            source=self.source,
            metadata={"category": category, "style": style, "fallback": True},
        )]

    def get_embed_url(self, slug: str, style: StorysetStyle = "rafiki", color: str = "6366f1") -> str:
        return f"https://storyset.com/illustration/{slug}/{style}?color={color}"

    async def fetch(self, options: Optional[StorysetOptions] = None) -> List[GraphicResult]:
        options = options or StorysetOptions()
        params = {
            "category": options.category,
            "style": options.style,
            "page": "1",
            "per_page": "12",
        }
        if options.search:
            params["search"] = options.search

        try:
            data = await self.fetch_json(API_URL, params=params)
            items = data["data"]
            return [
                GraphicResult(
                    url=item.get("thumbnail") or item.get("svg_url") or "",
                    source=self.source,
                    metadata={
                        "id": item.get("id"),
                        "title": item.get("title"),
                        "slug": item.get("slug"),
                        "category": item.get("category"),
                        "style": options.style,
                    },
                )
                for item in items
            ]
        except (ProviderError, KeyError, TypeError, AttributeError) as e:
            logger.info(f"[Storyset] API unavailable, using fallback: {e}")
            return self.get_fallback(options.category, options.style)

    async def get(self, options: Optional[StorysetOptions] = None) -> Optional[GraphicResult]:
        results = await self.fetch(options)
        return results[0] if results else None

    async def search(self, terms: List[str]) -> List[GraphicResult]:
        matched_category: StorysetCategory = "business"
        for term in terms:
            if term in _CATEGORY_MAP:
                matched_category = _CATEGORY_MAP[term]
                break
            if term in CATEGORIES:
                matched_category = term
                break

        return await self.fetch(StorysetOptions(
            category=matched_category,
            search=" ".join(terms) or None,
        ))
