"""
Pydantic data models for Bahith library.

These models represent the core data structures used throughout the library:
- Script / NormalizedString: Detected script and canonical text
- EntityRecord: A reciter, surah or Quranic term
- MatchResult / RankedResult: Per-query results before and after ranking
- SearchOptions / RankingWeights: Per-call configuration
"""

from bahith.models.text import NormalizedString, Script
from bahith.models.record import Category, EntityRecord, RevelationType
from bahith.models.result import (
    MatchKind,
    MatchResult,
    RankedResult,
    RankingFactors,
    Suggestion,
)
from bahith.models.options import RankingWeights, SearchOptions

__all__ = [
    "Script",
    "NormalizedString",
    "Category",
    "EntityRecord",
    "RevelationType",
    "MatchKind",
    "MatchResult",
    "RankedResult",
    "RankingFactors",
    "Suggestion",
    "SearchOptions",
    "RankingWeights",
]
