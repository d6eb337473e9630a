"""
Immutable catalog snapshots.

A snapshot holds every searchable record, already indexed. Snapshots are
never modified: refreshing the catalog means building a new snapshot and
swapping the reference, so searches that are already running keep a
consistent view.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from pydantic import ValidationError

from bahith._logging import log_warning
from bahith.core.index import IndexedRecord, index_record
from bahith.exceptions import CatalogError, DuplicateRecordError
from bahith.models import Category, EntityRecord


RecordLike = Union[EntityRecord, Mapping[str, Any]]

CATALOG_ORDER = (Category.RECITER, Category.QURAN_TERM, Category.SURAH)


@dataclass(frozen=True)
class CatalogSnapshot:
    """
    One consistent, read-only view of all catalogs.

    Attributes:
        reciters: Indexed reciter records, in catalog order
        terms: Indexed Quranic term records
        surahs: Indexed surah records
    """

    reciters: tuple[IndexedRecord, ...] = ()
    terms: tuple[IndexedRecord, ...] = ()
    surahs: tuple[IndexedRecord, ...] = ()
    _by_id: Mapping[str, EntityRecord] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )
    _exact: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )

    def collections(self) -> Iterator[tuple[Category, tuple[IndexedRecord, ...]]]:
        """Yield (category, records) for each catalog, reciters first."""
        yield Category.RECITER, self.reciters
        yield Category.QURAN_TERM, self.terms
        yield Category.SURAH, self.surahs

    def records(self, category: Optional[Category] = None) -> list[EntityRecord]:
        """All records, or those of one category, in catalog order."""
        return [
            indexed.record
            for cat, records in self.collections()
            if category is None or cat == category
            for indexed in records
        ]

    def indexed(self, category: Category) -> tuple[IndexedRecord, ...]:
        return dict(self.collections())[category]

    def get(self, record_id: str) -> Optional[EntityRecord]:
        """Record with this id, or None."""
        return self._by_id.get(record_id)

    def lookup(self, normalized: str) -> list[EntityRecord]:
        """Records having a field whose canonical form equals ``normalized``."""
        return [self._by_id[record_id] for record_id in self._exact.get(normalized, ())]

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id

    @property
    def is_empty(self) -> bool:
        return len(self._by_id) == 0

    def counts(self) -> dict[Category, int]:
        return {category: len(records) for category, records in self.collections()}


EMPTY_SNAPSHOT = CatalogSnapshot()


def _coerce(item: RecordLike, category: Category) -> EntityRecord:
    if isinstance(item, EntityRecord):
        record = item
    else:
        data = dict(item)
        data.setdefault("category", category)
        try:
            record = EntityRecord.model_validate(data)
        except ValidationError as e:
            raise CatalogError(
                f"Invalid {category.value} record: {e}",
                record_id=str(data.get("id") or ""),
                category=category.value,
            ) from e

    if record.category != category:
        raise CatalogError(
            f"Record supplied as {category.value} has category {record.category.value}",
            record_id=record.id,
            category=category.value,
        )
    return record


def build_snapshot(
    reciters: Iterable[RecordLike] = (),
    surahs: Iterable[RecordLike] = (),
    terms: Iterable[RecordLike] = (),
) -> CatalogSnapshot:
    """
    Build a snapshot from records or plain mappings.

    Mappings are validated as EntityRecord; a missing ``category`` is
    filled in from the argument they were passed in.

    Args:
        reciters: Reciter records
        surahs: Surah records
        terms: Quranic term records

    Returns:
        A new, immutable CatalogSnapshot

    Raises:
        CatalogError: If a record is invalid or sits in the wrong catalog
        DuplicateRecordError: If two records share an id
    """
    by_id: dict[str, EntityRecord] = {}
    exact: dict[str, list[str]] = {}
    indexed: dict[Category, list[IndexedRecord]] = {c: [] for c in CATALOG_ORDER}

    supplied = {
        Category.RECITER: reciters,
        Category.QURAN_TERM: terms,
        Category.SURAH: surahs,
    }

    for category in CATALOG_ORDER:
        for item in supplied[category]:
            record = _coerce(item, category)
            if record.id in by_id:
                raise DuplicateRecordError(record.id)
            by_id[record.id] = record

            entry = index_record(record)
            if not entry.fields:
                log_warning("Record has no searchable names", record_id=record.id)
            indexed[category].append(entry)

            for f in entry.fields:
                ids = exact.setdefault(f.normalized, [])
                if record.id not in ids:
                    ids.append(record.id)

    return CatalogSnapshot(
        reciters=tuple(indexed[Category.RECITER]),
        terms=tuple(indexed[Category.QURAN_TERM]),
        surahs=tuple(indexed[Category.SURAH]),
        _by_id=MappingProxyType(by_id),
        _exact=MappingProxyType({k: tuple(v) for k, v in exact.items()}),
    )
