"""
باحث (Bahith) - Bilingual Arabic/English search for Quran reciters, surahs and terms.

Usage:
    from bahith import SearchEngine

    engine = SearchEngine.with_default_catalog()

    # Search in either script, with or without diacritics
    for result in engine.search("الفاتحة"):
        print(f"{result.record.name_en}: {result.final_score:.2f} ({result.kind.value})")

    # Transliteration variants fold to one spelling
    engine.search("Mohamed Ayub")[0].record.name_en   # "Muhammad Ayyub"

    # Autocomplete
    suggestions = engine.suggest("Afa")
"""

from bahith.models import (
    Category,
    EntityRecord,
    MatchKind,
    MatchResult,
    NormalizedString,
    RankedResult,
    RankingFactors,
    RankingWeights,
    RevelationType,
    Script,
    SearchOptions,
    Suggestion,
)
from bahith.config import BahithSettings, get_settings, configure
from bahith.exceptions import (
    BahithError,
    CatalogError,
    DuplicateRecordError,
    ConfigurationError,
)
from bahith.data import CatalogSnapshot, build_snapshot, default_snapshot
from bahith.engine import SearchEngine

__version__ = "1.0.0"
__all__ = [
    # Version
    "__version__",
    # Engine
    "SearchEngine",
    # Catalog
    "CatalogSnapshot",
    "build_snapshot",
    "default_snapshot",
    # Models
    "Category",
    "EntityRecord",
    "RevelationType",
    "Script",
    "NormalizedString",
    "MatchKind",
    "MatchResult",
    "RankedResult",
    "RankingFactors",
    "Suggestion",
    "SearchOptions",
    "RankingWeights",
    # Config
    "BahithSettings",
    "get_settings",
    "configure",
    # Exceptions
    "BahithError",
    "CatalogError",
    "DuplicateRecordError",
    "ConfigurationError",
]
