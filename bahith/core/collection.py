"""
Single-catalog search.
"""

from typing import Iterable, Optional, Union

from bahith.core.index import IndexedRecord
from bahith.core.matcher import PreparedQuery, match_record, prepare_query
from bahith.models import MatchResult, Script, SearchOptions


def search_collection(
    query: Union[str, PreparedQuery],
    records: Iterable[IndexedRecord],
    limit: Optional[int] = None,
    min_score: Optional[float] = None,
    options: Optional[SearchOptions] = None,
    scripts: Optional[frozenset[Script]] = None,
) -> list[MatchResult]:
    """
    Match a query against every record of one catalog.

    Args:
        query: Raw or prepared query
        records: Indexed records of one catalog, in catalog order
        limit: Maximum number of results (default: ``options.limit``)
        min_score: Results scoring below this are dropped
            (default: ``options.min_score``)
        options: Strategy switches and defaults (default: SearchOptions())
        scripts: Restrict matching to fields of these scripts

    Returns:
        Results sorted by descending score, ties in catalog order
    """
    opts = options or SearchOptions()
    if limit is None:
        limit = opts.limit
    if min_score is None:
        min_score = opts.min_score
    else:
        opts = opts.model_copy(update={"min_score": min_score})

    prepared = query if isinstance(query, PreparedQuery) else prepare_query(query)
    if prepared.is_empty or limit <= 0:
        return []

    results = []
    for indexed in records:
        result = match_record(prepared, indexed, opts, scripts)
        if result is not None and result.score >= min_score:
            results.append(result)

    # sorted() is stable: equal scores keep catalog order
    results = sorted(results, key=lambda r: r.score, reverse=True)
    return results[:limit]
