"""
Entity record data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class Category(str, Enum):
    """Catalog a record belongs to."""

    RECITER = "reciter"
    SURAH = "surah"
    QURAN_TERM = "quran-term"


class RevelationType(str, Enum):
    """Where a surah was revealed."""

    MAKKI = "Makki"
    MADANI = "Madani"


class EntityRecord(BaseModel):
    """
    A searchable entity: a reciter, a surah, or a Quranic glossary term.

    Records are immutable for the lifetime of a catalog snapshot. Empty
    names are allowed; such a record simply never matches.

    Attributes:
        id: Opaque identifier, unique within a snapshot and stable across reloads
        category: Catalog the record belongs to
        name_ar: Primary Arabic name
        name_en: Primary English (transliterated) name
        variants_ar: Alternative Arabic spellings
        variants_en: Alternative English spellings and transliterations
        aliases: Short, script-agnostic nicknames
        description_ar: Arabic display description
        description_en: English display description
        number: Surah number (1-114) for surahs, None otherwise
        verses: Number of ayahs for surahs
        revelation_type: Makki or Madani for surahs
        meaning: English meaning of a surah name
    """

    id: str = Field(
        ...,
        description="Opaque identifier, unique within a snapshot",
        min_length=1,
    )
    category: Category = Field(
        ...,
        description="Catalog the record belongs to",
    )
    name_ar: str = Field(
        default="",
        description="Primary Arabic name",
    )
    name_en: str = Field(
        default="",
        description="Primary English name",
    )
    variants_ar: tuple[str, ...] = Field(
        default=(),
        description="Alternative Arabic spellings",
    )
    variants_en: tuple[str, ...] = Field(
        default=(),
        description="Alternative English spellings",
    )
    aliases: tuple[str, ...] = Field(
        default=(),
        description="Script-agnostic nicknames",
    )
    description_ar: str = Field(
        default="",
        description="Arabic display description",
    )
    description_en: str = Field(
        default="",
        description="English display description",
    )
    number: Optional[int] = Field(
        default=None,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    verses: Optional[int] = Field(
        default=None,
        description="Number of ayahs in the surah",
        ge=1,
    )
    revelation_type: Optional[RevelationType] = Field(
        default=None,
        description="Makki or Madani",
    )
    meaning: Optional[str] = Field(
        default=None,
        description="English meaning of the surah name",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "mishary-al-afasy",
                    "category": "reciter",
                    "name_ar": "مشاري العفاسي",
                    "name_en": "Mishary Al-Afasy",
                    "variants_ar": ["مشاري راشد العفاسي"],
                    "variants_en": ["Mishary Rashid Alafasy", "Afasy"],
                    "aliases": ["afasy", "العفاسي"],
                }
            ]
        },
    }

    @computed_field
    @property
    def identifier(self) -> Optional[str]:
        """Identifier text matched against numeric queries (the surah number)."""
        return str(self.number) if self.number is not None else None

    @property
    def display_text(self) -> str:
        """Both titles and descriptions, used to estimate the record's display script."""
        return " ".join(
            part
            for part in (self.name_ar, self.description_ar, self.name_en, self.description_en)
            if part
        )

    def title(self, locale: str = "en") -> str:
        """Display name in ``locale`` ("ar" or "en"), falling back to the other script."""
        if locale == "ar":
            return self.name_ar or self.name_en
        return self.name_en or self.name_ar

    def __str__(self) -> str:
        return f"EntityRecord({self.category.value}:{self.id}, {self.name_en or self.name_ar})"
