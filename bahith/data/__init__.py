"""
Catalog data module for Bahith.

Provides catalog snapshots and access to the bundled reciter, surah and
Quranic term records.
"""

from bahith.data.catalog import (
    CATALOG_ORDER,
    EMPTY_SNAPSHOT,
    CatalogSnapshot,
    build_snapshot,
)
from bahith.data.quran import (
    default_snapshot,
    get_surah,
    get_surah_name,
    load_reciters,
    load_surahs,
    load_terms,
)

__all__ = [
    # Snapshots
    "CATALOG_ORDER",
    "EMPTY_SNAPSHOT",
    "CatalogSnapshot",
    "build_snapshot",
    "default_snapshot",
    # Bundled records
    "load_reciters",
    "load_surahs",
    "load_terms",
    "get_surah",
    "get_surah_name",
]
