"""
Search and ranking option models.
"""

from pydantic import BaseModel, Field

from bahith.config import BahithSettings
from bahith.models.record import Category


class SearchOptions(BaseModel):
    """
    Options for a single search.

    Attributes:
        limit: Maximum number of results
        min_score: Results scoring below this are dropped
        include_partial: Enable prefix, substring and token matching
        include_initials: Enable acronym matching ("MA" -> "Mishary Al-Afasy")
        bilingual: Match against both scripts regardless of the query's script
    """

    limit: int = Field(default=10, ge=1)
    min_score: float = Field(default=0.3, ge=0.0, le=1.0)
    include_partial: bool = True
    include_initials: bool = True
    bilingual: bool = True

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: BahithSettings, **overrides) -> "SearchOptions":
        """Build options whose defaults come from ``settings``."""
        values = {"limit": settings.default_limit, "min_score": settings.min_score}
        values.update(overrides)
        return cls(**values)


class RankingWeights(BaseModel):
    """
    Weights used by the ranker.

    All weights are finite and non-negative.
    """

    boost_exact_matches: bool = True
    exact_match_bonus: float = Field(default=0.2, ge=0.0, allow_inf_nan=False)
    boost_reciters: float = Field(default=0.1, ge=0.0, allow_inf_nan=False)
    boost_surahs: float = Field(default=0.08, ge=0.0, allow_inf_nan=False)
    boost_quran_terms: float = Field(default=0.05, ge=0.0, allow_inf_nan=False)
    penalize_fuzzy: float = Field(default=0.2, ge=0.0, le=1.0)
    language_weight: float = Field(default=0.15, ge=0.0, allow_inf_nan=False)
    popularity_weight: float = Field(default=0.1, ge=0.0, allow_inf_nan=False)

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: BahithSettings) -> "RankingWeights":
        return cls(**{name: getattr(settings, name) for name in cls.model_fields})

    def category_bonus(self, category: Category) -> float:
        if category == Category.RECITER:
            return self.boost_reciters
        if category == Category.SURAH:
            return self.boost_surahs
        if category == Category.QURAN_TERM:
            return self.boost_quran_terms
        return 0.0
