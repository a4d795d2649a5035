"""Graphics provider registry."""

from __future__ import annotations

from typing import Dict, List

from graphics_api.providers.base import GraphicProvider, SupportsSearch
from graphics_api.providers.doodle_ipsum import DoodleIpsumProvider
from graphics_api.providers.iconoodle import IconoodleProvider
from graphics_api.providers.ira_design import IRADesignProvider
from graphics_api.providers.lucide import LucideProvider
from graphics_api.providers.phosphor import PhosphorProvider
from graphics_api.providers.storyset import StorysetProvider

doodle_ipsum = DoodleIpsumProvider()
storyset = StorysetProvider()
ira_design = IRADesignProvider()
phosphor = PhosphorProvider()
lucide = LucideProvider()
iconoodle = IconoodleProvider()

PROVIDERS: Dict[str, GraphicProvider] = {
    provider.source: provider
    for provider in (doodle_ipsum, storyset, ira_design, phosphor, lucide, iconoodle)
}


def build_default_providers() -> Dict[str, GraphicProvider]:
    """Fresh instances, one per source, in ranking order."""
    providers = (
        DoodleIpsumProvider(),
        StorysetProvider(),
        IRADesignProvider(),
        PhosphorProvider(),
        LucideProvider(),
        IconoodleProvider(),
    )
    return {provider.source: provider for provider in providers}


def available_provider_ids() -> List[str]:
    return list(PROVIDERS.keys())


__all__ = [
    "GraphicProvider",
    "SupportsSearch",
    "DoodleIpsumProvider",
    "StorysetProvider",
    "IRADesignProvider",
    "PhosphorProvider",
    "LucideProvider",
    "IconoodleProvider",
    "PROVIDERS",
    "build_default_providers",
    "available_provider_ids",
    "doodle_ipsum",
    "storyset",
    "ira_design",
    "phosphor",
    "lucide",
    "iconoodle",
]
