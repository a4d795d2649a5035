import asyncio
import os
import sys
from typing import List, Optional

import pytest

# Add project root to path to allow importing graphics_api
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from graphics_api.models import GraphicResult


class FakeProvider:
    """In-memory provider: returns canned results and records every call."""

    def __init__(self, source: str, count: int = 2, delay: float = 0.0, error: Optional[Exception] = None):
        self.source = source
        self.count = count
        self.delay = delay
        self.error = error
        self.search_calls: List[List[str]] = []
        self.get_calls: List[object] = []

    def make_result(self, index: int) -> GraphicResult:
        return GraphicResult(url=f"https://{self.source}.test/{index}.svg", source=self.source)

    async def search(self, terms: List[str]) -> List[GraphicResult]:
        self.search_calls.append(list(terms))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return [self.make_result(i) for i in range(self.count)]

    async def get(self, options) -> Optional[GraphicResult]:
        self.get_calls.append(options)
        if self.error is not None:
            raise self.error
        return GraphicResult(url=f"https://{self.source}.test/{options.name}.svg", source=self.source)


SOURCE_ORDER = ("doodle-ipsum", "storyset", "ira-design", "phosphor", "lucide", "iconoodle")


@pytest.fixture
def fake_providers():
    """One FakeProvider per known source, two results each."""
    return {source: FakeProvider(source) for source in SOURCE_ORDER}


@pytest.fixture
def make_provider():
    """Factory for a single FakeProvider with custom behaviour."""
    return FakeProvider
