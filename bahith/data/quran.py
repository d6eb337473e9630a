"""
Bundled catalog data loader.

Provides functions to load the reciter, surah and Quranic term records
that ship with the library, and the default snapshot built from them.
"""

from functools import lru_cache

from bahith.data.catalog import CatalogSnapshot, build_snapshot
from bahith.data.reciters import RECITERS
from bahith.data.surahs import EXTRA_VARIANTS_AR, EXTRA_VARIANTS_EN, SURAHS
from bahith.data.terms import QURAN_TERMS
from bahith.exceptions import CatalogError
from bahith.models import Category, EntityRecord, RevelationType


SURAH_COUNT = 114


def _check_surah_id(surah_id: int) -> None:
    if surah_id < 1 or surah_id > SURAH_COUNT:
        raise ValueError(f"Invalid surah_id: {surah_id}. Must be 1-{SURAH_COUNT}.")


@lru_cache(maxsize=1)
def load_reciters() -> tuple[EntityRecord, ...]:
    """
    Load the bundled reciter records.

    Returns:
        Tuple of reciter EntityRecords, in catalog order
    """
    return tuple(
        EntityRecord(
            id=item["id"],
            category=Category.RECITER,
            name_ar=item["name_ar"],
            name_en=item["name_en"],
            variants_ar=tuple(item.get("variants_ar", ())),
            variants_en=tuple(item.get("variants_en", ())),
            aliases=tuple(item.get("aliases", ())),
            description_ar=f"الشيخ {item['name_ar']}",
            description_en=f"Sheikh {item['name_en']}",
        )
        for item in RECITERS
    )


@lru_cache(maxsize=1)
def load_surahs() -> tuple[EntityRecord, ...]:
    """
    Load metadata records for all 114 surahs.

    Each surah can be found by its Arabic name, its transliteration, its
    English meaning, "سورة ..." / "Surah ..." forms and its number.

    Returns:
        Tuple of surah EntityRecords ordered by surah number

    Raises:
        CatalogError: If the bundled table is incomplete
    """
    if len(SURAHS) != SURAH_COUNT:
        raise CatalogError(
            f"Expected {SURAH_COUNT} surahs, found {len(SURAHS)}",
            category=Category.SURAH.value,
        )

    records = []
    for number, name_ar, name_en, meaning, verses, revelation in SURAHS:
        variants_ar = [f"سورة {name_ar}"] + EXTRA_VARIANTS_AR.get(number, [])
        variants_en = [f"Surah {name_en}"]
        if meaning != name_en:
            variants_en.append(meaning)
        variants_en += EXTRA_VARIANTS_EN.get(number, [])

        records.append(
            EntityRecord(
                id=f"surah-{number}",
                category=Category.SURAH,
                name_ar=name_ar,
                name_en=name_en,
                variants_ar=tuple(variants_ar),
                variants_en=tuple(variants_en),
                description_ar=f"سورة {name_ar}",
                description_en=f"Surah {name_en}",
                number=number,
                verses=verses,
                revelation_type=RevelationType[revelation.upper()],
                meaning=meaning,
            )
        )
    return tuple(records)


@lru_cache(maxsize=1)
def load_terms() -> tuple[EntityRecord, ...]:
    """
    Load the bundled Quranic glossary terms.

    Returns:
        Tuple of term EntityRecords
    """
    return tuple(
        EntityRecord(
            id=f"quran-{item['id']}",
            category=Category.QURAN_TERM,
            name_ar=item["name_ar"],
            name_en=item["name_en"],
            variants_ar=tuple(item.get("variants_ar", ())),
            variants_en=tuple(item.get("variants_en", ())),
            description_ar=f"مصطلح قرآني: {item['name_ar']}",
            description_en=f"Quranic term: {item['name_en']}",
        )
        for item in QURAN_TERMS
    )


def get_surah(surah_id: int) -> EntityRecord:
    """
    Get the record for a specific surah.

    Args:
        surah_id: Surah number (1-114)

    Returns:
        Surah EntityRecord
    """
    _check_surah_id(surah_id)
    return load_surahs()[surah_id - 1]


def get_surah_name(surah_id: int, locale: str = "ar") -> str:
    """
    Get the name of a surah.

    Args:
        surah_id: Surah number (1-114)
        locale: "ar" for the Arabic name, anything else for the transliteration

    Returns:
        Name of the surah
    """
    return get_surah(surah_id).title(locale)


@lru_cache(maxsize=1)
def default_snapshot() -> CatalogSnapshot:
    """Snapshot of all bundled catalogs, built once per process."""
    return build_snapshot(
        reciters=load_reciters(),
        surahs=load_surahs(),
        terms=load_terms(),
    )
