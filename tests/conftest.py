"""Shared pytest fixtures for Bahith tests."""

import os

import pytest

from bahith.config import reset_settings
from bahith.data import build_snapshot, default_snapshot
from bahith.engine import SearchEngine


SAMPLE_RECITERS = [
    {
        "id": "mishary-al-afasy",
        "name_ar": "مشاري العفاسي",
        "name_en": "Mishary Al-Afasy",
        "variants_en": ["Mishary Rashid Alafasy"],
        "aliases": ["afasy"],
    },
    {
        "id": "muhammad-ayyub",
        "name_ar": "محمد أيوب",
        "name_en": "Muhammad Ayyub",
        "variants_en": ["Mohammed Ayub"],
    },
    {
        "id": "saud-al-shuraim",
        "name_ar": "سعود الشريم",
        "name_en": "Saud Al-Shuraim",
    },
]

SAMPLE_SURAHS = [
    {"id": "surah-1", "name_ar": "الفاتحة", "name_en": "Al-Fatihah", "number": 1, "verses": 7},
    {"id": "surah-18", "name_ar": "الكهف", "name_en": "Al-Kahf", "number": 18, "verses": 110},
]

SAMPLE_TERMS = [
    {"id": "quran-tajweed", "name_ar": "تجويد", "name_en": "Tajweed"},
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from BAHITH_* environment variables and configured settings."""
    for name in list(os.environ):
        if name.startswith("BAHITH_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_snapshot():
    """Small hand-written catalog with one of each kind of record."""
    return build_snapshot(
        reciters=SAMPLE_RECITERS,
        surahs=SAMPLE_SURAHS,
        terms=SAMPLE_TERMS,
    )


@pytest.fixture
def sample_engine(sample_snapshot):
    return SearchEngine(snapshot=sample_snapshot)


@pytest.fixture(scope="session")
def bundled_snapshot():
    return default_snapshot()


@pytest.fixture
def engine(bundled_snapshot):
    """Engine over the bundled catalogs."""
    return SearchEngine(snapshot=bundled_snapshot)


@pytest.fixture
def sample_records():
    """Sample records as plain mappings, keyed by catalog."""
    return {"reciters": SAMPLE_RECITERS, "surahs": SAMPLE_SURAHS, "terms": SAMPLE_TERMS}
