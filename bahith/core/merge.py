"""
Cross-catalog search and result merging.
"""

from typing import TYPE_CHECKING, Iterable, Optional, Union

from bahith.core.collection import search_collection
from bahith.core.matcher import PreparedQuery, prepare_query
from bahith.models import MatchResult, Script, SearchOptions

if TYPE_CHECKING:
    from bahith.data.catalog import CatalogSnapshot


DEFAULT_OVER_FETCH = 2


def merge_results(*result_lists: Iterable[MatchResult]) -> dict[str, MatchResult]:
    """
    Merge result lists by record id, keeping the higher score.

    On equal scores the result seen first is kept.

    Returns:
        Mapping of record id to its best result, in first-seen order
    """
    merged: dict[str, MatchResult] = {}
    for results in result_lists:
        for result in results:
            existing = merged.get(result.id)
            if existing is None or result.score > existing.score:
                merged[result.id] = result
    return merged


def search_catalogs(
    query: Union[str, PreparedQuery],
    snapshot: "CatalogSnapshot",
    options: Optional[SearchOptions] = None,
    over_fetch: int = DEFAULT_OVER_FETCH,
    scripts: Optional[frozenset[Script]] = None,
) -> list[MatchResult]:
    """
    Search every catalog of a snapshot and merge the results.

    Each catalog is searched with ``limit * over_fetch`` so that re-ranking
    has room to promote results; the merged list is not truncated.

    Returns:
        Unique-by-id results with score >= ``options.min_score``,
        sorted by descending score
    """
    opts = options or SearchOptions()
    prepared = query if isinstance(query, PreparedQuery) else prepare_query(query)
    if prepared.is_empty:
        return []

    per_catalog = [
        search_collection(
            prepared,
            records,
            limit=opts.limit * over_fetch,
            min_score=opts.min_score,
            options=opts,
            scripts=scripts,
        )
        for _, records in snapshot.collections()
    ]

    merged = merge_results(*per_catalog)
    results = [r for r in merged.values() if r.score >= opts.min_score]
    return sorted(results, key=lambda r: r.score, reverse=True)
