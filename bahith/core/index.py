"""
Pre-normalized views of entity records.

Each record is indexed once, when a catalog snapshot is built, so that
queries compare against cached canonical forms instead of re-normalizing
catalog text on every keystroke.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bahith.core.normalization import detect_script, normalize_arabic, normalize_latin
from bahith.models import EntityRecord, Script


class FieldRole(str, Enum):
    """What a searchable field is to its record."""

    PRIMARY = "primary"
    VARIANT = "variant"
    ALIAS = "alias"
    IDENTIFIER = "identifier"


@dataclass(frozen=True)
class IndexedField:
    """One searchable field of a record."""
    name: str  # Record attribute the text came from
    role: FieldRole
    script: Script  # ARABIC or LATIN, never MIXED
    surface: str
    normalized: str


@dataclass(frozen=True)
class IndexedRecord:
    """A record together with its searchable fields, in match-priority order."""
    record: EntityRecord
    fields: tuple[IndexedField, ...]

    @property
    def id(self) -> str:
        return self.record.id

    def fields_for(self, scripts: frozenset[Script]) -> tuple[IndexedField, ...]:
        return tuple(f for f in self.fields if f.script in scripts)


def _field(name: str, role: FieldRole, surface: str, script: Script) -> Optional[IndexedField]:
    if script == Script.ARABIC:
        normalized = normalize_arabic(surface)
    else:
        normalized = normalize_latin(surface)
        script = Script.LATIN

    if not normalized:
        return None
    return IndexedField(name=name, role=role, script=script, surface=surface, normalized=normalized)


def index_record(record: EntityRecord) -> IndexedRecord:
    """
    Build the searchable fields of a record.

    Order: primary names, variants, aliases, identifier. Fields that
    normalize to an empty string are skipped.
    """
    candidates = [
        ("name_ar", FieldRole.PRIMARY, record.name_ar, Script.ARABIC),
        ("name_en", FieldRole.PRIMARY, record.name_en, Script.LATIN),
    ]
    candidates += [("variants_ar", FieldRole.VARIANT, v, Script.ARABIC) for v in record.variants_ar]
    candidates += [("variants_en", FieldRole.VARIANT, v, Script.LATIN) for v in record.variants_en]
    # Aliases carry no script of their own
    candidates += [("aliases", FieldRole.ALIAS, a, detect_script(a)) for a in record.aliases]
    if record.identifier is not None:
        candidates.append(("number", FieldRole.IDENTIFIER, record.identifier, Script.LATIN))

    fields = []
    for name, role, surface, script in candidates:
        field = _field(name, role, surface, script)
        if field is not None:
            fields.append(field)

    return IndexedRecord(record=record, fields=tuple(fields))
