"""Data models for the recipe image resolution pipeline.

Defines Pydantic models for the values that flow through the cascade:
search requests, ranked query terms, provider candidates, scored candidates,
the internal provider result variant and the final resolution.
All models use Pydantic v2 validation.
"""

from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SearchRequest(BaseModel):
    """Immutable input for one image resolution.

    The cascade is total, so an empty or whitespace name is accepted here and
    simply resolves to a fallback image.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Annotated[str, Field("", max_length=500, description="Free-text recipe name")]
    cuisine: Annotated[str, Field("", max_length=100, description="Optional cuisine, e.g. 'Thai'")]

    @field_validator("name", "cuisine", mode="before")
    @classmethod
    def coerce_missing_to_empty(cls, v):
        """Treat None as an empty string."""
        return "" if v is None else v


class QueryTerm(BaseModel):
    """A ranked search phrase. Lower priority is tried first."""

    model_config = ConfigDict(frozen=True)

    text: Annotated[str, Field(min_length=3, description="Search phrase sent to a provider")]
    priority: Annotated[int, Field(ge=0, description="Position in the try order (0 = first)")]


class Candidate(BaseModel):
    """A prospective image returned by a provider before filtering and scoring."""

    url: Annotated[str, Field(min_length=1, description="Direct image URL")]
    width: Annotated[int, Field(0, ge=0, description="Reported width in pixels")]
    height: Annotated[int, Field(0, ge=0, description="Reported height in pixels")]
    description_text: Annotated[
        str, Field("", description="Description and alt text joined, used for keyword matching")
    ]
    popularity_signal: Annotated[float, Field(0.0, ge=0, description="Primary popularity (likes), 0 if unavailable")]
    secondary_popularity_signal: Annotated[
        float, Field(0.0, ge=0, description="Secondary popularity (downloads), 0 if unavailable")
    ]

    @field_validator("popularity_signal", "secondary_popularity_signal", "width", "height", mode="before")
    @classmethod
    def coerce_missing_numbers(cls, v):
        """Providers omit counters they do not track; treat None as 0."""
        return 0 if v is None else v

    @property
    def aspect_ratio(self) -> Optional[float]:
        """Width over height, or None when the height is unknown."""
        if self.height <= 0:
            return None
        return self.width / self.height


class ScoredCandidate(Candidate):
    """Candidate plus its relevance score."""

    score: Annotated[float, Field(description="Additive relevance score, compared within one call only")]
    matched_term: Annotated[Optional[str], Field(None, description="Query term that produced this candidate")]


class ProviderResult(BaseModel):
    """Outcome of one provider stage.

    A sum type of accepted / empty / transport_error. Only an accepted result
    carries a candidate; the orchestrator treats the other two as "try next".
    """

    status: Literal["accepted", "empty", "transport_error"]
    candidate: Optional[ScoredCandidate] = None
    reason: Optional[str] = None

    @model_validator(mode="after")
    def check_variant_shape(self) -> "ProviderResult":
        """Accepted results need a candidate; the others must not have one."""
        if self.status == "accepted" and self.candidate is None:
            raise ValueError("accepted result requires a candidate")
        if self.status != "accepted" and self.candidate is not None:
            raise ValueError(f"{self.status} result must not carry a candidate")
        return self

    @classmethod
    def accepted(cls, candidate: ScoredCandidate) -> "ProviderResult":
        return cls(status="accepted", candidate=candidate)

    @classmethod
    def empty(cls, reason: Optional[str] = None) -> "ProviderResult":
        return cls(status="empty", reason=reason)

    @classmethod
    def transport_error(cls, reason: str) -> "ProviderResult":
        return cls(status="transport_error", reason=reason)

    @property
    def is_accepted(self) -> bool:
        return self.status == "accepted"


class ImageResolution(BaseModel):
    """Final answer for one recipe: always a non-empty URL plus where it came from."""

    url: Annotated[str, Field(min_length=1, description="Resolved image URL")]
    source: Annotated[str, Field(description="Provider stage name, or 'fallback'")]
    recipe_name: Annotated[str, Field("", description="Recipe name as requested")]
    cuisine: Annotated[str, Field("", description="Cuisine as requested")]
    score: Annotated[Optional[float], Field(None, description="Relevance score; None for fallback images")]
    matched_term: Annotated[Optional[str], Field(None, description="Query term that won; None for fallback images")]
    attempts: Annotated[
        List[str],
        Field(default_factory=list, description="Provider stages tried, with their outcome, in cascade order"),
    ]
