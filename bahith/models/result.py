"""
Search result data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from bahith.models.record import Category, EntityRecord


class MatchKind(str, Enum):
    """How a query matched a record."""

    EXACT = "exact"
    VARIANT = "variant"
    PARTIAL = "partial"
    FUZZY = "fuzzy"
    RELATED = "related"


class MatchResult(BaseModel):
    """
    Result of matching a query against one record.

    Scores are on a 0-1 scale; ``score_percent`` gives the 0-100 view.

    Attributes:
        record: The matched record
        score: Match score (0.0-1.0)
        kind: Which matching strategy produced the score
        matched_field: Name of the record field that matched best
        matched_text: The surface text of that field
    """

    record: EntityRecord = Field(
        ...,
        description="The matched record",
    )
    score: float = Field(
        ...,
        description="Match score (0.0-1.0)",
        ge=0.0,
        le=1.0,
    )
    kind: MatchKind = Field(
        ...,
        description="Matching strategy that produced the score",
    )
    matched_field: Optional[str] = Field(
        default=None,
        description="Record field that matched (name_en, variants_ar, alias, ...)",
    )
    matched_text: Optional[str] = Field(
        default=None,
        description="Surface text of the matched field",
    )

    model_config = {"frozen": True}

    @computed_field
    @property
    def score_percent(self) -> float:
        """Score on the 0-100 scale."""
        return round(self.score * 100, 2)

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def category(self) -> Category:
        return self.record.category

    def __str__(self) -> str:
        return f"MatchResult({self.record.id}, {self.kind.value}, score={self.score:.2f})"


class RankingFactors(BaseModel):
    """Bonuses and penalties the ranker applied to one result."""

    exact_match_bonus: float = 0.0
    category_bonus: float = 0.0
    language_match_bonus: float = 0.0
    fuzzy_penalty: float = 0.0
    popularity_bonus: float = 0.0
    recency_bonus: float = 0.0

    model_config = {"frozen": True}


class RankedResult(MatchResult):
    """
    A match result after weighted re-scoring.

    Attributes:
        final_score: Score after bonuses and penalties, clamped to 0.0-1.0
        factors: Breakdown of what the ranker applied
    """

    final_score: float = Field(
        ...,
        description="Re-scored relevance (0.0-1.0)",
        ge=0.0,
        le=1.0,
    )
    factors: RankingFactors = Field(
        default_factory=RankingFactors,
        description="Applied bonuses and penalties",
    )

    def __str__(self) -> str:
        return (
            f"RankedResult({self.record.id}, {self.kind.value}, "
            f"score={self.score:.2f}, final={self.final_score:.2f})"
        )


class Suggestion(BaseModel):
    """Lightweight autocomplete entry."""

    id: str
    category: Category
    name_ar: str
    name_en: str
    score: float = Field(..., ge=0.0, le=1.0)

    model_config = {"frozen": True}
