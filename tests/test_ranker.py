"""Tests for result ranking and re-ranking passes."""

import pytest

from bahith.core.ranker import SearchRanker, recency_score
from bahith.models import (
    Category,
    EntityRecord,
    MatchKind,
    MatchResult,
    RankingWeights,
)


def record(record_id: str, category: Category, name_en: str = "Name", name_ar: str = "", number=None):
    return EntityRecord(id=record_id, category=category, name_en=name_en, name_ar=name_ar, number=number)


def result(rec: EntityRecord, score: float = 0.5, kind: MatchKind = MatchKind.PARTIAL) -> MatchResult:
    return MatchResult(record=rec, score=score, kind=kind)


RECITER = record("reciter", Category.RECITER, "Saud Al-Shuraim")
SURAH = record("surah-18", Category.SURAH, "Al-Kahf", number=18)
TERM = record("quran-tajweed", Category.QURAN_TERM, "Tajweed")

NO_BONUS = RankingWeights(
    boost_exact_matches=False,
    boost_reciters=0.0,
    boost_surahs=0.0,
    boost_quran_terms=0.0,
    language_weight=0.0,
    popularity_weight=0.0,
)


@pytest.fixture
def ranker():
    return SearchRanker()


class TestRank:
    def test_category_orders_equal_base_scores(self, ranker):
        ranked = ranker.rank([result(TERM), result(SURAH), result(RECITER)], "query")
        assert [r.category for r in ranked] == [Category.RECITER, Category.SURAH, Category.QURAN_TERM]

    def test_breakdown(self, ranker):
        ranked = ranker.rank([result(RECITER, 0.5)], "query")[0]
        assert ranked.score == 0.5
        assert ranked.factors.exact_match_bonus == 0.0
        assert ranked.factors.category_bonus == pytest.approx(0.1)
        assert ranked.factors.language_match_bonus == pytest.approx(0.15)
        assert ranked.factors.popularity_bonus == pytest.approx(0.09)
        assert ranked.final_score == pytest.approx(0.5 + 0.1 + 0.15 + 0.09)

    def test_exact_bonus(self, ranker):
        ranked = ranker.rank([result(TERM, 0.5, MatchKind.EXACT)], "query")[0]
        assert ranked.factors.exact_match_bonus == pytest.approx(0.2)

    def test_exact_bonus_disabled(self, ranker):
        weights = RankingWeights(boost_exact_matches=False)
        ranked = ranker.rank([result(TERM, 0.5, MatchKind.EXACT)], "query", weights)[0]
        assert ranked.factors.exact_match_bonus == 0.0

    def test_fuzzy_penalty(self, ranker):
        ranked = ranker.rank([result(RECITER, 0.5, MatchKind.FUZZY)], "query")[0]
        assert ranked.factors.fuzzy_penalty == pytest.approx(0.75 * 0.2)
        assert ranked.final_score == pytest.approx(0.75 * 0.8 + 0.09)

    def test_clamped(self, ranker):
        ranked = ranker.rank([result(RECITER, 1.0, MatchKind.EXACT)], "query")[0]
        assert ranked.final_score == 1.0

    def test_language_bonus_requires_same_script(self, ranker):
        arabic_query = ranker.rank([result(RECITER)], "سعود")[0]
        mixed_query = ranker.rank([result(RECITER)], "سورة Al-Kahf")[0]
        assert arabic_query.factors.language_match_bonus == 0.0
        assert mixed_query.factors.language_match_bonus == 0.0

    def test_language_bonus_uses_dominant_script_of_display_text(self, ranker):
        bilingual = record("b", Category.RECITER, "Saud", "سعود الشريم")
        ranked = ranker.rank([result(bilingual)], "الشريم")[0]
        assert ranked.factors.language_match_bonus == pytest.approx(0.15)

    def test_stable_for_ties(self, ranker):
        first = record("first", Category.RECITER)
        second = record("second", Category.RECITER)
        ranked = ranker.rank([result(first), result(second)], "query")
        assert [r.id for r in ranked] == ["first", "second"]

    def test_does_not_modify_input(self, ranker):
        results = [result(TERM, 0.4), result(RECITER, 0.6)]
        ranker.rank(results, "query")
        assert [r.id for r in results] == ["quran-tajweed", "reciter"]

    def test_empty(self, ranker):
        assert ranker.rank([], "query") == []
        assert ranker.top_result([], "query") is None

    def test_top_result(self, ranker):
        top = ranker.top_result([result(TERM, 0.9), result(RECITER, 0.3)], "query")
        assert top.id == "quran-tajweed"

    def test_custom_popularity(self):
        ranker = SearchRanker(popularity={Category.QURAN_TERM: 1.0})
        assert ranker.popularity(Category.QURAN_TERM) == 1.0
        assert ranker.popularity(Category.RECITER) == 0.5


class TestExplain:
    def test_standard_scoring(self):
        ranker = SearchRanker(NO_BONUS)
        ranked = ranker.rank([result(RECITER)], "query")[0]
        assert ranker.explain(ranked) == "Standard relevance scoring"

    def test_lists_applied_factors(self, ranker):
        ranked = ranker.rank([result(RECITER, 0.9, MatchKind.EXACT)], "query")[0]
        explanation = ranker.explain(ranked)
        assert "Exact match bonus applied" in explanation
        assert "reciter category boost applied" in explanation
        assert "Language match bonus applied" in explanation


class TestRerank:
    def test_by_popularity(self, ranker):
        ranked = ranker.rank([result(TERM, 0.9), result(RECITER, 0.3)], "query")
        reranked = ranker.rerank_by_popularity(ranked)
        assert [r.id for r in reranked] == ["reciter", "quran-tajweed"]
        assert [r.id for r in ranked] == ["quran-tajweed", "reciter"]

    def test_by_recency(self, ranker):
        early = record("surah-2", Category.SURAH, "Al-Baqarah", number=2)
        late = record("surah-114", Category.SURAH, "An-Nas", number=114)
        ranked = ranker.rank([result(early, 0.9), result(late, 0.5), result(RECITER, 0.2)], "query")
        reranked = ranker.rerank_by_recency(ranked)
        assert [r.id for r in reranked] == ["reciter", "surah-114", "surah-2"]
        assert reranked[0].factors.recency_bonus == pytest.approx(0.7)
        assert all(r.factors.recency_bonus == 0.0 for r in ranked)

    def test_recency_score(self):
        assert recency_score(result(RECITER)) == 0.7
        assert recency_score(result(SURAH)) == 0.4
        assert recency_score(result(TERM)) == 0.5

    def test_diversify(self, ranker):
        reciters = [result(record(f"r{i}", Category.RECITER)) for i in range(5)]
        ranked = ranker.rank(reciters + [result(SURAH)], "query")
        diverse = SearchRanker.diversify(ranked, max_per_category=3)
        assert [r.category for r in diverse].count(Category.RECITER) == 3
        assert any(r.category == Category.SURAH for r in diverse)
        assert len(ranked) == 6

    def test_filter_by_min_score(self, ranker):
        ranked = ranker.rank([result(TERM, 0.1), result(RECITER, 0.9)], "query")
        kept = SearchRanker.filter_by_min_score(ranked, 0.5)
        assert [r.id for r in kept] == ["reciter"]
