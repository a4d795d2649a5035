"""
Semantic query parsing.

Classifies a free-text scene description against the taxonomy:
  - categories and styles accumulate in order of first appearance
  - the content type is singular; a later content-type word replaces an
    earlier one ("icon illustration" resolves to illustration)
"""

from typing import List, Optional

from graphics_api.constants import MIN_TERM_LENGTH
from graphics_api.models import ParsedQuery
from graphics_api.scorer import rank_sources
from graphics_api.taxonomy import CATEGORIES, CONTENT_TYPES, STYLES, matches_key


def tokenize(text: str) -> List[str]:
    """Lowercase, split on whitespace, drop tokens shorter than MIN_TERM_LENGTH."""
    return [term for term in (text or "").lower().split() if len(term) >= MIN_TERM_LENGTH]


def parse_query(text: str) -> ParsedQuery:
    """Parse a natural language query into structured components."""
    terms = tokenize(text)

    detected_categories: List[str] = []
    detected_styles: List[str] = []
    detected_content_type: Optional[str] = None

    for term in terms:
        for category, keywords in CATEGORIES.items():
            if matches_key(term, category, keywords) and category not in detected_categories:
                detected_categories.append(category)

        for style, keywords in STYLES.items():
            if matches_key(term, style, keywords) and style not in detected_styles:
                detected_styles.append(style)

        for content_type, keywords in CONTENT_TYPES.items():
            if matches_key(term, content_type, keywords):
                detected_content_type = content_type

    recommended_sources = rank_sources(
        categories=detected_categories,
        styles=detected_styles,
        content_type=detected_content_type,
    )

    return ParsedQuery(
        terms=terms,
        detected_categories=detected_categories,
        detected_styles=detected_styles,
        detected_content_type=detected_content_type,
        recommended_sources=recommended_sources,
    )


parse = parse_query
