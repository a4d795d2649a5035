"""Tag taxonomy and source capability tables for semantic graphics search."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Literal, Mapping, Tuple

Category = Literal[
    "business",
    "technology",
    "people",
    "education",
    "health",
    "creative",
    "nature",
    "communication",
]
Style = Literal["flat", "hand-drawn", "outlined", "abstract", "3d", "colorful", "dark"]
ContentType = Literal["icon", "illustration", "doodle", "character"]
SourceName = Literal["doodle-ipsum", "storyset", "ira-design", "phosphor", "lucide", "iconoodle"]

WILDCARD = "*"

_CATEGORIES: Dict[str, FrozenSet[str]] = {
    "business": frozenset({
        "meeting", "presentation", "chart", "money", "deal", "handshake",
        "office", "teamwork", "strategy", "growth", "success", "startup",
        "entrepreneur", "investment", "profit", "sales", "marketing",
        "payment", "payments", "invoice", "transaction", "finance",
        "confirmation", "checkout", "purchase",
    }),
    "technology": frozenset({
        "coding", "programming", "laptop", "computer", "server", "cloud",
        "robot", "ai", "data", "network", "software", "developer", "code",
        "api", "database", "security", "cyber", "tech", "digital",
    }),
    "people": frozenset({
        "team", "person", "individual", "celebration", "working", "thinking",
        "happy", "sad", "walking", "sitting", "standing", "running",
        "talking", "group", "crowd", "family", "friends", "colleagues",
    }),
    "education": frozenset({
        "book", "graduation", "classroom", "study", "learning", "teaching",
        "school", "university", "student", "teacher", "knowledge", "science",
        "reading", "writing", "exam", "certificate", "diploma",
    }),
    "health": frozenset({
        "doctor", "medicine", "fitness", "wellness", "hospital", "nurse",
        "exercise", "yoga", "meditation", "mental", "heart", "healthy",
        "medical", "care", "therapy", "nutrition",
    }),
    "creative": frozenset({
        "art", "design", "music", "paint", "draw", "creative", "idea",
        "inspiration", "color", "brush", "canvas", "photography", "video",
    }),
    "nature": frozenset({
        "tree", "flower", "plant", "animal", "forest", "mountain", "ocean",
        "sun", "moon", "star", "weather", "environment", "eco", "green",
    }),
    "communication": frozenset({
        "chat", "message", "email", "phone", "call", "social", "media",
        "notification", "inbox", "send", "receive", "broadcast",
    }),
}

_STYLES: Dict[str, FrozenSet[str]] = {
    "flat": frozenset({"flat", "simple", "clean", "minimal", "modern"}),
    "hand-drawn": frozenset({"hand-drawn", "sketch", "doodle", "handmade", "organic"}),
    "outlined": frozenset({"outlined", "line", "stroke", "wireframe"}),
    "abstract": frozenset({"abstract", "geometric", "artistic"}),
    "3d": frozenset({"3d", "isometric", "dimensional", "perspective"}),
    "colorful": frozenset({"colorful", "vibrant", "bright", "vivid"}),
    "dark": frozenset({"dark", "night", "moody", "dramatic"}),
}

_CONTENT_TYPES: Dict[str, FrozenSet[str]] = {
    "icon": frozenset({"icon", "symbol", "glyph", "pictogram", "ui"}),
    "illustration": frozenset({"illustration", "scene", "artwork", "picture", "image"}),
    "doodle": frozenset({"doodle", "sketch", "scribble", "hand-drawn"}),
    "character": frozenset({"character", "person", "avatar", "figure", "human"}),
}

# Read-only views; dict insertion order is the scan order.
CATEGORIES: Mapping[str, FrozenSet[str]] = MappingProxyType(_CATEGORIES)
STYLES: Mapping[str, FrozenSet[str]] = MappingProxyType(_STYLES)
CONTENT_TYPES: Mapping[str, FrozenSet[str]] = MappingProxyType(_CONTENT_TYPES)

TAXONOMY: Mapping[str, Mapping[str, FrozenSet[str]]] = MappingProxyType({
    "categories": CATEGORIES,
    "styles": STYLES,
    "content_types": CONTENT_TYPES,
})


@dataclass(frozen=True)
class SourceCapability:
    """What a provider serves: content types, styles and categories."""

    types: FrozenSet[str]
    styles: FrozenSet[str]
    categories: FrozenSet[str]

    def serves_category(self, category: str) -> bool:
        return WILDCARD in self.categories or category in self.categories


# Iteration order here is the ranker's tie-break order.
SOURCE_CAPABILITIES: Mapping[str, SourceCapability] = MappingProxyType({
    "doodle-ipsum": SourceCapability(
        types=frozenset({"doodle", "illustration"}),
        styles=frozenset({"flat", "hand-drawn", "outlined", "abstract"}),
        categories=frozenset({WILDCARD}),
    ),
    "storyset": SourceCapability(
        types=frozenset({"illustration", "character"}),
        styles=frozenset({"flat", "colorful"}),
        categories=frozenset({"business", "technology", "people", "education", "health"}),
    ),
    "ira-design": SourceCapability(
        types=frozenset({"illustration", "character"}),
        styles=frozenset({"flat", "colorful"}),
        categories=frozenset({"business", "people", "technology"}),
    ),
    "phosphor": SourceCapability(
        types=frozenset({"icon"}),
        styles=frozenset({"outlined", "flat"}),
        categories=frozenset({WILDCARD}),
    ),
    "lucide": SourceCapability(
        types=frozenset({"icon"}),
        styles=frozenset({"outlined"}),
        categories=frozenset({WILDCARD}),
    ),
    "iconoodle": SourceCapability(
        types=frozenset({"icon", "doodle"}),
        styles=frozenset({"hand-drawn"}),
        categories=frozenset({WILDCARD}),
    ),
})

SOURCE_NAMES: Tuple[str, ...] = tuple(SOURCE_CAPABILITIES.keys())


def matches_key(term: str, key: str, keywords: FrozenSet[str]) -> bool:
    """A term matches a taxonomy key by name or by keyword membership."""
    return term == key or term in keywords
