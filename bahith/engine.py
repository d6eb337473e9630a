"""
Search engine facade.

Ties the matcher, cross-catalog merge and ranker to one catalog snapshot.
The snapshot reference is replaced, never modified, when the catalog is
reloaded; each call reads the reference once and works on that view.
"""

import time
from typing import Iterable, Optional

from bahith._logging import log_catalog_loaded, log_search_complete, log_search_start
from bahith.config import BahithSettings, get_settings
from bahith.core.collection import search_collection
from bahith.core.index import index_record
from bahith.core.matcher import match_record, prepare_query
from bahith.core.merge import search_catalogs
from bahith.core.ranker import SearchRanker
from bahith.core.similarity import similarity
from bahith.data import EMPTY_SNAPSHOT, CatalogSnapshot, build_snapshot, default_snapshot
from bahith.data.catalog import RecordLike
from bahith.models import (
    Category,
    EntityRecord,
    MatchKind,
    MatchResult,
    RankedResult,
    RankingWeights,
    Script,
    SearchOptions,
    Suggestion,
)


EXACT_MATCH_FLOOR = 0.95

SIMILAR_MIN_SCORE = 0.4
RELATED_SCORE_FACTOR = 0.6


class SearchEngine:
    """
    Bilingual search over reciters, surahs and Quranic terms.

    Example:
        engine = SearchEngine.with_default_catalog()
        for result in engine.search("Mohamed Ayub"):
            print(result.record.name_en, result.final_score)
    """

    def __init__(
        self,
        snapshot: Optional[CatalogSnapshot] = None,
        settings: Optional[BahithSettings] = None,
        ranker: Optional[SearchRanker] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            snapshot: Catalog to search (default: empty until load_catalog)
            settings: Settings to use (default: global settings)
            ranker: Ranker to use (default: one weighted from settings)
        """
        self._settings = settings or get_settings()
        self._snapshot = snapshot if snapshot is not None else EMPTY_SNAPSHOT
        self._ranker = ranker or SearchRanker(RankingWeights.from_settings(self._settings))

    @classmethod
    def with_default_catalog(cls, settings: Optional[BahithSettings] = None) -> "SearchEngine":
        """Engine over the bundled reciter, surah and term catalogs."""
        return cls(snapshot=default_snapshot(), settings=settings)

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    @property
    def settings(self) -> BahithSettings:
        return self._settings

    @property
    def ranker(self) -> SearchRanker:
        return self._ranker

    def load_catalog(
        self,
        snapshot: Optional[CatalogSnapshot] = None,
        *,
        reciters: Iterable[RecordLike] = (),
        surahs: Iterable[RecordLike] = (),
        terms: Iterable[RecordLike] = (),
    ) -> CatalogSnapshot:
        """
        Replace the catalog.

        Either pass a prepared snapshot, or records for each catalog. The
        new snapshot is built completely before it replaces the old one,
        so a failed load leaves the current catalog in place.

        Returns:
            The snapshot now in use

        Raises:
            CatalogError: If a supplied record is invalid or duplicated
        """
        if snapshot is None:
            snapshot = build_snapshot(reciters=reciters, surahs=surahs, terms=terms)

        self._snapshot = snapshot

        counts = snapshot.counts()
        log_catalog_loaded(
            reciters=counts[Category.RECITER],
            surahs=counts[Category.SURAH],
            terms=counts[Category.QURAN_TERM],
        )
        return snapshot

    def default_options(self, **overrides) -> SearchOptions:
        """Search options built from the engine's settings."""
        return SearchOptions.from_settings(self._settings, **overrides)

    def search(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        weights: Optional[RankingWeights] = None,
    ) -> list[RankedResult]:
        """
        Search all catalogs.

        Args:
            query: Query in Arabic or Latin script
            options: Search options (default: from settings)
            weights: Ranking weights for this call (default: the ranker's)

        Returns:
            At most ``options.limit`` ranked results, best first.
            Empty for an empty query or an empty catalog.
        """
        return self._search(query, options, weights)

    def _search(
        self,
        query: str,
        options: Optional[SearchOptions],
        weights: Optional[RankingWeights],
        scripts: Optional[frozenset[Script]] = None,
        category: Optional[Category] = None,
    ) -> list[RankedResult]:
        opts = options or self.default_options()
        prepared = prepare_query(query)
        if prepared.is_empty:
            return []

        snapshot = self._snapshot
        start = time.perf_counter()
        log_search_start(prepared.raw, prepared.script.value)

        over_fetch = self._settings.over_fetch_factor
        if category is None:
            matches = search_catalogs(prepared, snapshot, opts, over_fetch=over_fetch, scripts=scripts)
        else:
            matches = search_collection(
                prepared,
                snapshot.indexed(category),
                limit=opts.limit * over_fetch,
                min_score=opts.min_score,
                options=opts,
                scripts=scripts,
            )

        ranked = self._ranker.rank(matches, prepared.raw, weights)[: opts.limit]

        log_search_complete(prepared.raw, len(ranked), time.perf_counter() - start)
        return ranked

    def suggest(self, partial: str, limit: Optional[int] = None) -> list[Suggestion]:
        """
        Autocomplete suggestions for partially typed input.

        Uses the search pipeline with a lower score floor. Input shorter
        than ``suggest_min_length`` characters gets no suggestions.
        """
        text = (partial or "").strip()
        if len(text) < self._settings.suggest_min_length:
            return []

        options = self.default_options(
            limit=limit or self._settings.suggest_limit,
            min_score=self._settings.suggest_min_score,
        )
        return [
            Suggestion(
                id=result.id,
                category=result.category,
                name_ar=result.record.name_ar,
                name_en=result.record.name_en,
                score=result.final_score,
            )
            for result in self.search(text, options)
        ]

    def get_by_id(self, record_id: str) -> Optional[EntityRecord]:
        """Record with this id, or None if the catalog has none."""
        return self._snapshot.get(record_id)

    def search_by_category(
        self,
        query: str,
        category: Category,
        options: Optional[SearchOptions] = None,
        weights: Optional[RankingWeights] = None,
    ) -> list[RankedResult]:
        """Search a single catalog."""
        return self._search(query, options, weights, category=category)

    def search_with_filters(
        self,
        query: str,
        language: Optional[Script] = None,
        exact_match: bool = False,
        options: Optional[SearchOptions] = None,
    ) -> list[RankedResult]:
        """
        Search with a language restriction and/or exact matching only.

        Args:
            query: Search query
            language: Only match fields written in this script;
                None or MIXED searches both
            exact_match: Keep only exact and variant-exact matches
            options: Base search options

        Returns:
            Ranked results
        """
        opts = options or self.default_options()
        scripts = None
        if language is not None and language != Script.MIXED:
            scripts = frozenset({language})
            opts = opts.model_copy(update={"bilingual": False})
        if exact_match:
            opts = opts.model_copy(update={"min_score": max(opts.min_score, EXACT_MATCH_FLOOR)})

        return self._search(query, opts, None, scripts=scripts)

    def find_similar(self, name: str, limit: int = 3) -> list[MatchResult]:
        """
        Records whose primary names are close to, but not the same as, ``name``.

        Useful for "did you mean" prompts after a search with no results.

        Returns:
            Up to ``limit`` fuzzy results with similarity in [0.4, 1), best first
        """
        if not (name or "").strip():
            return []

        results = []
        for record in self._snapshot.records():
            best, field, text = 0.0, None, None
            for attr in ("name_ar", "name_en"):
                candidate = getattr(record, attr)
                if not candidate:
                    continue
                score = similarity(name, candidate)
                if score > best:
                    best, field, text = score, attr, candidate

            if SIMILAR_MIN_SCORE <= best < 1.0:
                results.append(
                    MatchResult(
                        record=record,
                        score=best,
                        kind=MatchKind.FUZZY,
                        matched_field=field,
                        matched_text=text,
                    )
                )

        results.sort(key=lambda r: r.score, reverse=True)
        return results[:limit]

    def related(self, record_id: str, limit: int = 5) -> list[RankedResult]:
        """
        Records related to the given one by name.

        Searches with the record's English name (Arabic if it has none),
        drops the record itself and scales the remaining scores down.
        """
        record = self.get_by_id(record_id)
        if record is None:
            return []

        query = record.name_en or record.name_ar
        matches = search_catalogs(
            query,
            self._snapshot,
            self.default_options(limit=limit + 1),
            over_fetch=self._settings.over_fetch_factor,
        )
        related = [
            m.model_copy(update={"score": m.score * RELATED_SCORE_FACTOR, "kind": MatchKind.RELATED})
            for m in matches
            if m.id != record_id
        ]
        return self._ranker.rank(related, query)[:limit]

    def lookup_exact(self, query: str) -> list[EntityRecord]:
        """Records with a name, variant or alias equal to the normalized query."""
        prepared = prepare_query(query)
        if prepared.is_empty:
            return []

        snapshot = self._snapshot
        found: dict[str, EntityRecord] = {}
        for key in (prepared.arabic, prepared.latin):
            for record in snapshot.lookup(key):
                found.setdefault(record.id, record)
        return list(found.values())

    def matches_entity(self, query: str, record_id: str) -> bool:
        """Whether ``record_id`` is the top result for ``query``."""
        top = self.top_result(query)
        return top is not None and top.id == record_id

    def match_score(self, query: str, record_id: str) -> float:
        """Match score of ``query`` against one record, 0 if it does not match."""
        record = self.get_by_id(record_id)
        if record is None:
            return 0.0

        result = match_record(prepare_query(query), index_record(record), self.default_options())
        return result.score if result is not None else 0.0

    def top_result(self, query: str, options: Optional[SearchOptions] = None) -> Optional[RankedResult]:
        """Best result for ``query``, or None."""
        opts = (options or self.default_options()).model_copy(update={"limit": 1})
        results = self.search(query, opts)
        return results[0] if results else None

    def batch_search(
        self,
        queries: Iterable[str],
        options: Optional[SearchOptions] = None,
    ) -> dict[str, list[RankedResult]]:
        """Search several queries, keyed by query."""
        return {query: self.search(query, options) for query in queries}

    @staticmethod
    def format_result(result: MatchResult, locale: str = "en") -> str:
        """Display name of a result's record in ``locale`` ("ar" or "en")."""
        return result.record.title(locale)
