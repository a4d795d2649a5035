"""Typed models for the graphics query pipeline."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from graphics_api.taxonomy import Category, ContentType, Style

ProviderStatus = Literal["ok", "error", "timeout", "unavailable"]

DoodleStyle = Literal["flat", "hand-drawn", "outlined", "abstract"]
StorysetCategory = Literal["business", "coding", "education", "health", "people", "technology"]
StorysetStyle = Literal["rafiki", "bro", "amico", "pana", "cuate"]
IRACategory = Literal["characters", "objects", "backgrounds"]
PhosphorWeight = Literal["thin", "light", "regular", "bold", "fill", "duotone"]


class GraphicResult(BaseModel):
    """A single icon, illustration or doodle returned by a provider."""

    model_config = ConfigDict(frozen=True)

    url: str
    source: str
    svg: Optional[str] = None
    width: Optional[Union[int, float]] = None
    height: Optional[Union[int, float]] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    prefetched: bool = False


class QueryOptions(BaseModel):
    """Caller-supplied query configuration. Every field is optional."""

    # Accepts snake_case or camelCase keys; anything else is a typo
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    concept: Optional[str] = None
    style: Optional[Style] = None
    content_type: Optional[ContentType] = None
    categories: List[Category] = Field(default_factory=list)
    subjects: List[str] = Field(default_factory=list)
    prefer_sources: List[str] = Field(default_factory=list)
    exclude_sources: List[str] = Field(default_factory=list)
    limit: Optional[int] = Field(None, ge=0)

    @field_validator("subjects", "prefer_sources", "exclude_sources", mode="before")
    @classmethod
    def _ensure_list(cls, value: Sequence[str] | str | None) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(item) for item in value]

    @field_validator("categories", mode="before")
    @classmethod
    def _ensure_categories(cls, value: Sequence[str] | str | None) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)


class ParsedQuery(BaseModel):
    """Structured classification of a free-text query."""

    terms: List[str] = Field(default_factory=list)
    detected_categories: List[Category] = Field(default_factory=list)
    detected_styles: List[Style] = Field(default_factory=list)
    detected_content_type: Optional[ContentType] = None
    recommended_sources: List[str] = Field(default_factory=list)


class ProviderStatusSnapshot(BaseModel):
    provider_id: str
    status: ProviderStatus
    result_count: int = 0
    latency_ms: Optional[int] = None
    message: Optional[str] = None


class AggregatedGraphicsResponse(BaseModel):
    """Full payload of one aggregated query, including provider health."""

    parsed_query: ParsedQuery
    selected_sources: List[str] = Field(default_factory=list)
    results: List[GraphicResult] = Field(default_factory=list)
    provider_statuses: List[ProviderStatusSnapshot] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def provider_summary(self) -> Dict[str, ProviderStatusSnapshot]:
        return {status.provider_id: status for status in self.provider_statuses}


class StoryContext(BaseModel):
    """Action/subject/emotion/setting words detected in a storyline."""

    action: Optional[str] = None
    subject: Optional[str] = None
    emotion: Optional[str] = None
    setting: Optional[str] = None


class ContextGraphics(BaseModel):
    icons: List[GraphicResult] = Field(default_factory=list)
    illustrations: List[GraphicResult] = Field(default_factory=list)
    doodles: List[GraphicResult] = Field(default_factory=list)


# Provider-specific options

class DoodleIpsumOptions(BaseModel):
    width: int = 400
    height: int = 300
    style: DoodleStyle = "flat"
    id: Optional[int] = None
    seed: Optional[int] = None
    background: Optional[str] = None


class StorysetOptions(BaseModel):
    category: StorysetCategory = "business"
    style: StorysetStyle = "rafiki"
    color: Optional[str] = None
    search: Optional[str] = None


class IRAColors(BaseModel):
    primary: Optional[str] = None
    secondary: Optional[str] = None
    accent: Optional[str] = None


class IRADesignOptions(BaseModel):
    category: IRACategory = "characters"
    name: Optional[str] = None
    colors: Optional[IRAColors] = None


class PhosphorOptions(BaseModel):
    name: str
    weight: PhosphorWeight = "regular"
    size: Optional[int] = None
    color: Optional[str] = None


class LucideOptions(BaseModel):
    name: str
    size: int = 24
    color: Optional[str] = None
    stroke_width: float = 2


class IconoodleOptions(BaseModel):
    name: str
    pack: Optional[str] = None
    color: Optional[str] = None
