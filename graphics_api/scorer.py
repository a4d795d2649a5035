"""
Source ranking for the graphics query engine.

Each provider is scored against the detected query attributes:
  - content type served:   +10
  - each style served:     +5
  - each category served:  +3 (a wildcard provider serves every category)

Providers scoring zero are never recommended; falling back to default
providers is the aggregator's job.
"""

import logging
from typing import Dict, List, Optional, Sequence

from graphics_api.constants import CATEGORY_WEIGHT, CONTENT_TYPE_WEIGHT, STYLE_WEIGHT
from graphics_api.taxonomy import SOURCE_CAPABILITIES

logger = logging.getLogger(__name__)


def score_sources(
    categories: Sequence[str] = (),
    styles: Sequence[str] = (),
    content_type: Optional[str] = None,
) -> Dict[str, int]:
    """Score every known provider. Keys follow the capability table order."""
    scores: Dict[str, int] = {}

    for source, capability in SOURCE_CAPABILITIES.items():
        score = 0

        if content_type and content_type in capability.types:
            score += CONTENT_TYPE_WEIGHT

        for style in styles:
            if style in capability.styles:
                score += STYLE_WEIGHT

        for category in categories:
            if capability.serves_category(category):
                score += CATEGORY_WEIGHT

        scores[source] = score

    return scores


def rank_sources(
    categories: Sequence[str] = (),
    styles: Sequence[str] = (),
    content_type: Optional[str] = None,
) -> List[str]:
    """Return providers worth querying, best first, ties in table order."""
    scores = score_sources(categories, styles, content_type)

    # sorted() is stable, so equal scores keep the capability table order
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    recommended = [source for source, score in ranked if score > 0]

    if recommended:
        logger.debug(
            f"[Scorer] Ranked {len(recommended)} sources. "
            f"Top: {recommended[0]} ({scores[recommended[0]]})"
        )
    return recommended
