"""Base class and HTTP helpers for graphics providers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol

import httpx

from graphics_api.exceptions import ProviderError
from graphics_api import constants
from graphics_api.models import GraphicResult

logger = logging.getLogger(__name__)


class SupportsSearch(Protocol):
    """The only capability the aggregator needs from a provider."""

    async def search(self, terms: List[str]) -> List[GraphicResult]:
        ...


class GraphicProvider(ABC):
    """
    Abstract base class for graphics providers.

    A provider turns normalized search terms into GraphicResults for one
    public source, and can fetch a single asset by provider-specific options.
    """

    # Provider identifier (used for registration and in GraphicResult.source)
    source: str = "base"

    @abstractmethod
    async def search(self, terms: List[str]) -> List[GraphicResult]:
        """
        Search the source.

        Args:
            terms: Normalized lowercase search terms

        Returns:
            List of GraphicResult objects (may be empty)
        """

    @abstractmethod
    async def get(self, options: Any) -> Optional[GraphicResult]:
        """Fetch a single asset, or None when the source has no match."""

    async def _request(self, url: str, params: Optional[Dict[str, str]] = None) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                timeout=constants.HTTP_TIMEOUT_SECONDS, follow_redirects=True
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise ProviderError(
                f"HTTP {status_code} from {url}",
                provider=self.source,
                status_code=status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"{type(e).__name__}: {e}", provider=self.source) from e

    async def fetch_text(self, url: str, params: Optional[Dict[str, str]] = None) -> str:
        response = await self._request(url, params=params)
        return response.text

    async def fetch_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        response = await self._request(url, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON from {url}", provider=self.source) from e

    async def fetch_svg_url(self, url: str) -> Optional[str]:
        """SVG text at url, or None if it can't be fetched."""
        try:
            return await self.fetch_text(url)
        except ProviderError as e:
            logger.debug(f"[{self.source}] SVG fetch failed: {e}")
            return None
