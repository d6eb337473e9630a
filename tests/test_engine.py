"""Tests for the SearchEngine facade."""

import logging

import pytest

from bahith import SearchEngine
from bahith.config import BahithSettings
from bahith.exceptions import DuplicateRecordError
from bahith.models import Category, MatchKind, RankingWeights, Script, SearchOptions


class TestSearch:
    @pytest.mark.parametrize("query", ["", "   ", "\n"])
    def test_empty_query(self, engine, query):
        assert engine.search(query) == []

    def test_empty_catalog(self):
        engine = SearchEngine()
        assert engine.search("Afasy") == []
        assert engine.suggest("Afasy") == []
        assert engine.get_by_id("mishary-al-afasy") is None

    @pytest.mark.parametrize("query", ["Mohamed Jibril", "Mohammed Jibril", "Muhammad Jibril"])
    def test_transliteration_variants(self, engine, query):
        top = engine.search(query)[0]
        assert top.id == "muhammad-al-jibril"
        assert top.score == 1.0

    def test_variant_spelling(self, engine):
        top = engine.search("Mohamed Ayub")[0]
        assert top.id == "muhammad-ayyub"
        assert top.kind == MatchKind.VARIANT

    def test_arabic_with_diacritics(self, engine):
        voweled = engine.search("الفَاتِحَة")
        plain = engine.search("الفاتحة")
        assert voweled[0].id == "surah-1"
        assert voweled[0].kind == MatchKind.EXACT
        assert [r.id for r in voweled] == [r.id for r in plain]

    def test_arabic_alias(self, engine):
        assert engine.search("العفاسي")[0].id == "mishary-al-afasy"

    def test_typo_in_one_word(self, engine):
        top = engine.search("Mishary Afasi")[0]
        assert top.id == "mishary-al-afasy"
        assert top.kind == MatchKind.FUZZY

    def test_typo_in_last_word(self, engine):
        ids = [r.id for r in engine.search("Abdul Rahman Sudays")]
        assert "abdul-rahman-al-sudais" in ids

    def test_surah_number(self, engine):
        top = engine.search("18")[0]
        assert top.id == "surah-18"
        assert top.matched_field == "number"

    def test_initials(self, engine):
        results = engine.search("MA", SearchOptions(limit=50))
        assert results[0].kind == MatchKind.VARIANT
        afasy = [r for r in results if r.id == "mishary-al-afasy"]
        assert afasy and afasy[0].kind == MatchKind.VARIANT
        assert afasy[0].score > 0

    def test_strict_substring(self, sample_engine):
        results = sample_engine.search("shura")
        assert len(results) == 1
        assert results[0].id == "saud-al-shuraim"
        assert results[0].kind == MatchKind.PARTIAL
        assert 0.0 < results[0].score < 1.0

    @pytest.mark.parametrize("query", ["Muhammad", "sura", "al", "الف", "Saud"])
    def test_ranked_and_unique(self, engine, query):
        results = engine.search(query, SearchOptions(limit=30, min_score=0.2))
        ids = [r.id for r in results]
        assert len(ids) == len(set(ids))
        finals = [r.final_score for r in results]
        assert finals == sorted(finals, reverse=True)

    def test_limit(self, engine):
        assert len(engine.search("Muhammad", SearchOptions(limit=3))) == 3

    def test_limit_from_settings(self, bundled_snapshot):
        engine = SearchEngine(snapshot=bundled_snapshot, settings=BahithSettings(default_limit=2))
        assert len(engine.search("Muhammad")) == 2

    def test_weights_override(self, engine):
        weights = RankingWeights(boost_reciters=0.0, language_weight=0.0, popularity_weight=0.0)
        top = engine.search("Afasy", weights=weights)[0]
        assert top.factors.category_bonus == 0.0
        assert top.final_score == pytest.approx(top.score)

    def test_logs_search(self, engine, caplog):
        with caplog.at_level(logging.DEBUG, logger="bahith"):
            engine.search("Afasy")
        assert "Searching: 'Afasy'" in caplog.text
        assert "Search complete" in caplog.text


class TestSuggest:
    def test_too_short(self, engine):
        assert engine.suggest("A") == []
        assert engine.suggest(" A ") == []

    def test_prefix(self, engine):
        suggestions = engine.suggest("Afa")
        assert suggestions[0].id == "mishary-al-afasy"
        assert suggestions[0].name_en == "Mishary Al-Afasy"
        assert len(suggestions) <= 5

    def test_limit(self, engine):
        assert len(engine.suggest("al", limit=3)) <= 3


class TestCatalog:
    def test_get_by_id(self, engine):
        assert engine.get_by_id("surah-112").name_en == "Al-Ikhlas"
        assert engine.get_by_id("missing") is None

    def test_load_catalog_swaps_snapshot(self, sample_records, caplog):
        engine = SearchEngine()
        before = engine.snapshot
        with caplog.at_level(logging.INFO, logger="bahith"):
            after = engine.load_catalog(**sample_records)
        assert engine.snapshot is after
        assert before.is_empty
        assert engine.search("Afasy")[0].id == "mishary-al-afasy"
        assert "Catalog loaded: 3 reciters, 2 surahs, 1 terms" in caplog.text

    def test_failed_load_keeps_current_catalog(self, sample_engine):
        current = sample_engine.snapshot
        with pytest.raises(DuplicateRecordError):
            sample_engine.load_catalog(reciters=[{"id": "a", "name_en": "A"}, {"id": "a", "name_en": "B"}])
        assert sample_engine.snapshot is current

    def test_load_prepared_snapshot(self, sample_snapshot):
        engine = SearchEngine()
        engine.load_catalog(sample_snapshot)
        assert engine.snapshot is sample_snapshot


class TestFilteredSearch:
    def test_search_by_category(self, engine):
        results = engine.search_by_category("Muhammad", Category.SURAH)
        assert results[0].id == "surah-47"
        assert all(r.category == Category.SURAH for r in results)

    def test_language_filter(self, engine):
        assert engine.search_with_filters("Afasy", language=Script.ARABIC) == []
        assert engine.search_with_filters("Afasy", language=Script.LATIN)[0].id == "mishary-al-afasy"

    def test_exact_match_filter(self, engine):
        assert engine.search_with_filters("Mishar", exact_match=True) == []
        results = engine.search_with_filters("Mishary Al-Afasy", exact_match=True)
        assert [r.id for r in results] == ["mishary-al-afasy"]


class TestRelatedAndSimilar:
    def test_find_similar(self, sample_engine):
        similar = sample_engine.find_similar("Shuraym")
        assert similar[0].id == "saud-al-shuraim"
        assert similar[0].kind == MatchKind.FUZZY
        assert all(0.4 <= r.score < 1.0 for r in similar)

    def test_find_similar_excludes_exact_name(self, sample_engine):
        ids = [r.id for r in sample_engine.find_similar("Saud Al-Shuraim")]
        assert "saud-al-shuraim" not in ids

    def test_find_similar_empty(self, sample_engine):
        assert sample_engine.find_similar("") == []

    def test_related(self, engine):
        related = engine.related("muhammad-ayyub")
        ids = [r.id for r in related]
        assert "muhammad-ayyub" not in ids
        assert "surah-47" in ids
        assert all(r.kind == MatchKind.RELATED for r in related)
        assert len(related) <= 5

    def test_related_unknown(self, engine):
        assert engine.related("missing") == []


class TestHelpers:
    def test_lookup_exact(self, engine):
        assert [r.id for r in engine.lookup_exact("mohamed ayub")] == ["muhammad-ayyub"]
        assert engine.lookup_exact("") == []

    def test_matches_entity(self, engine):
        assert engine.matches_entity("Afasy", "mishary-al-afasy")
        assert not engine.matches_entity("Afasy", "surah-1")

    def test_match_score(self, engine):
        assert engine.match_score("Mishary Al-Afasy", "mishary-al-afasy") == 1.0
        assert engine.match_score("Mishary", "missing") == 0.0

    def test_top_result(self, engine):
        assert engine.top_result("Al-Kahf").id == "surah-18"
        assert engine.top_result("") is None

    def test_batch_search(self, engine):
        results = engine.batch_search(["Afasy", ""])
        assert set(results) == {"Afasy", ""}
        assert results[""] == []
        assert results["Afasy"][0].id == "mishary-al-afasy"

    def test_format_result(self, engine):
        top = engine.search("Al-Kahf")[0]
        assert SearchEngine.format_result(top) == "Al-Kahf"
        assert SearchEngine.format_result(top, "ar") == "الكهف"
