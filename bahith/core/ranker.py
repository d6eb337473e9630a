"""
Weighted re-ranking of merged search results.

The ranker starts from each result's match score and applies, in order:
an exact-match bonus, a per-category bonus, a language-agreement bonus,
a multiplicative fuzzy-match penalty and a small category popularity bonus.
The final score is clamped to 0-1 and results are re-sorted (stable).

All re-ranking passes return new lists and never modify their input.
"""

from types import MappingProxyType
from typing import Iterable, Optional

from bahith.core.normalization import detect_script, dominant_script
from bahith.models import (
    Category,
    MatchKind,
    MatchResult,
    RankedResult,
    RankingFactors,
    RankingWeights,
    Script,
)


CATEGORY_POPULARITY = MappingProxyType({
    Category.RECITER: 0.9,
    Category.SURAH: 0.8,
    Category.QURAN_TERM: 0.7,
})
DEFAULT_POPULARITY = 0.5

# Static recency heuristic: reciters, then late (short, often recited) surahs
RECITER_RECENCY = 0.7
LATE_SURAH_RECENCY = 0.6
EARLY_SURAH_RECENCY = 0.4
DEFAULT_RECENCY = 0.5
LATE_SURAH_FROM = 81


def _clamp(score: float) -> float:
    return min(max(score, 0.0), 1.0)


def recency_score(result: MatchResult) -> float:
    """Static recency weight of a result's record."""
    record = result.record
    if record.category == Category.RECITER:
        return RECITER_RECENCY
    if record.category == Category.SURAH and record.number is not None:
        return LATE_SURAH_RECENCY if record.number >= LATE_SURAH_FROM else EARLY_SURAH_RECENCY
    return DEFAULT_RECENCY


class SearchRanker:
    """
    Re-scores and orders search results.

    Example:
        ranker = SearchRanker()
        ranked = ranker.rank(results, "Afasy")
        print(ranker.explain(ranked[0]))
    """

    def __init__(
        self,
        weights: Optional[RankingWeights] = None,
        popularity: Optional[dict[Category, float]] = None,
    ) -> None:
        self._weights = weights or RankingWeights()
        self._popularity = MappingProxyType(dict(popularity or CATEGORY_POPULARITY))

    @property
    def weights(self) -> RankingWeights:
        return self._weights

    def popularity(self, category: Category) -> float:
        return self._popularity.get(category, DEFAULT_POPULARITY)

    def rank(
        self,
        results: Iterable[MatchResult],
        query: str,
        weights: Optional[RankingWeights] = None,
    ) -> list[RankedResult]:
        """
        Re-score results for ``query`` and sort them by final score.

        Args:
            results: Match results, usually from cross-catalog search
            query: The raw query, used to detect its script
            weights: Overrides the ranker's weights for this call

        Returns:
            New list of RankedResult, highest final score first; ties keep input order
        """
        w = weights or self._weights
        query_script = detect_script(query or "")

        ranked = [self._score(result, query_script, w) for result in results]
        return sorted(ranked, key=lambda r: r.final_score, reverse=True)

    def _score(
        self,
        result: MatchResult,
        query_script: Script,
        weights: RankingWeights,
    ) -> RankedResult:
        score = result.score
        exact_bonus = category_bonus = language_bonus = fuzzy_penalty = 0.0

        if weights.boost_exact_matches and result.kind == MatchKind.EXACT:
            exact_bonus = weights.exact_match_bonus
            score += exact_bonus

        category_bonus = weights.category_bonus(result.category)
        score += category_bonus

        if query_script != Script.MIXED:
            if dominant_script(result.record.display_text) == query_script:
                language_bonus = weights.language_weight
                score += language_bonus

        if result.kind == MatchKind.FUZZY:
            penalized = score * (1 - weights.penalize_fuzzy)
            fuzzy_penalty = score - penalized
            score = penalized

        popularity_bonus = self.popularity(result.category) * weights.popularity_weight
        score += popularity_bonus

        return RankedResult(
            record=result.record,
            score=result.score,
            kind=result.kind,
            matched_field=result.matched_field,
            matched_text=result.matched_text,
            final_score=_clamp(score),
            factors=RankingFactors(
                exact_match_bonus=exact_bonus,
                category_bonus=category_bonus,
                language_match_bonus=language_bonus,
                fuzzy_penalty=fuzzy_penalty,
                popularity_bonus=popularity_bonus,
            ),
        )

    def top_result(
        self,
        results: Iterable[MatchResult],
        query: str,
        weights: Optional[RankingWeights] = None,
    ) -> Optional[RankedResult]:
        """Highest-ranked result, or None when there are no results."""
        ranked = self.rank(results, query, weights)
        return ranked[0] if ranked else None

    def explain(self, result: RankedResult) -> str:
        """Human-readable summary of what the ranker applied to ``result``."""
        explanations = []
        factors = result.factors

        if factors.exact_match_bonus > 0:
            explanations.append("Exact match bonus applied")
        if factors.category_bonus > 0:
            explanations.append(f"{result.category.value} category boost applied")
        if factors.language_match_bonus > 0:
            explanations.append("Language match bonus applied")
        if factors.fuzzy_penalty > 0:
            explanations.append("Fuzzy match penalty applied")
        if factors.recency_bonus > 0:
            explanations.append("Recency weighting applied")

        if not explanations:
            return "Standard relevance scoring"
        return ", ".join(explanations)

    def rerank_by_popularity(self, results: Iterable[RankedResult]) -> list[RankedResult]:
        """Order by category popularity, then by final score."""
        return sorted(
            results,
            key=lambda r: (self.popularity(r.category), r.final_score),
            reverse=True,
        )

    def rerank_by_recency(self, results: Iterable[RankedResult]) -> list[RankedResult]:
        """
        Order by the static recency heuristic, then by final score.

        The returned results record their recency weight in
        ``factors.recency_bonus``; final scores are unchanged.
        """
        annotated = [
            r.model_copy(
                update={
                    "factors": r.factors.model_copy(update={"recency_bonus": recency_score(r)})
                }
            )
            for r in results
        ]
        return sorted(
            annotated,
            key=lambda r: (r.factors.recency_bonus, r.final_score),
            reverse=True,
        )

    @staticmethod
    def diversify(results: Iterable[RankedResult], max_per_category: int = 3) -> list[RankedResult]:
        """Keep at most ``max_per_category`` results per category, preserving order."""
        counts: dict[Category, int] = {}
        diverse = []
        for result in results:
            count = counts.get(result.category, 0)
            if count < max_per_category:
                diverse.append(result)
                counts[result.category] = count + 1
        return diverse

    @staticmethod
    def filter_by_min_score(results: Iterable[RankedResult], min_score: float) -> list[RankedResult]:
        """Results whose final score is at least ``min_score``."""
        return [r for r in results if r.final_score >= min_score]


search_ranker = SearchRanker()
