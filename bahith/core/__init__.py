"""
Core modules for Bahith library.

This package contains the search logic:
- Arabic and English text normalization
- Similarity measures
- Query-to-record matching
- Single-catalog and cross-catalog search
- Weighted ranking
"""

from bahith.core.normalization import (
    detect_script,
    dominant_script,
    normalize,
    normalize_arabic,
    normalize_latin,
    normalize_text,
    tokenize,
    extract_initials,
    matches_initials,
    transliteration_variants,
)
from bahith.core.similarity import (
    edit_distance,
    similarity,
    bigrams,
    bigram_similarity,
)
from bahith.core.index import FieldRole, IndexedField, IndexedRecord, index_record
from bahith.core.matcher import (
    PreparedQuery,
    prepare_query,
    match_field,
    match_record,
)
from bahith.core.collection import search_collection
from bahith.core.merge import merge_results, search_catalogs
from bahith.core.ranker import SearchRanker, search_ranker

__all__ = [
    # Normalization
    "detect_script",
    "dominant_script",
    "normalize",
    "normalize_arabic",
    "normalize_latin",
    "normalize_text",
    "tokenize",
    "extract_initials",
    "matches_initials",
    "transliteration_variants",
    # Similarity
    "edit_distance",
    "similarity",
    "bigrams",
    "bigram_similarity",
    # Index
    "FieldRole",
    "IndexedField",
    "IndexedRecord",
    "index_record",
    # Matcher
    "PreparedQuery",
    "prepare_query",
    "match_field",
    "match_record",
    # Search
    "search_collection",
    "merge_results",
    "search_catalogs",
    # Ranker
    "SearchRanker",
    "search_ranker",
]
