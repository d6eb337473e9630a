"""
Query-to-record matching.

A query is compared with every searchable field of a record using a fixed
ladder of strategies, most specific first:

1. Exact         normalized query equals the primary name (or surah number)
2. Variant       normalized query equals a variant spelling or alias
3. Prefix        field starts with the query
4. Contains      field contains the query, or the query contains the field
5. Tokens        some or all query words occur in the field
6. Fuzzy         edit-distance similarity if it clears the score floor,
                 otherwise bigram overlap
7. Initials      short acronym queries against Latin name initials

Strategies 1-4 stop at the first one that fires for a field. A token match
competes with the fuzzy score, so a typo in one word of a longer query
still scores by edit distance. Below an exact match, an initials match
replaces the ladder's result when it scores higher. The record's score is
the best score over all its fields.

Scores use a 0-1 scale.
"""

import re
from dataclasses import dataclass
from typing import Optional

from bahith.core.index import FieldRole, IndexedField, IndexedRecord
from bahith.core.normalization import (
    detect_script,
    matches_initials,
    normalize_arabic,
    normalize_latin,
    normalize_text,
)
from bahith.core.similarity import bigram_similarity, edit_distance
from bahith.models import MatchKind, MatchResult, Script, SearchOptions


EXACT_SCORE = 1.0
VARIANT_SCORE = 0.95
ALIAS_SCORE = 0.9

PREFIX_BASE = 0.75
PREFIX_RATIO_WEIGHT = 0.15
CONTAINS_SCORE = 0.7

ALL_TOKENS_SCORE = 0.6
SOME_TOKENS_WEIGHT = 0.5

FUZZY_WEIGHT = 0.8
BIGRAM_WEIGHT = 0.4

INITIALS_PRIMARY_SCORE = 0.88
INITIALS_VARIANT_SCORE = 0.85
INITIALS_MAX_LENGTH = 5
INITIALS_MIN_LETTERS = 2

_ACRONYM_RE = re.compile(r"^[^\W\d_]+(?: +[^\W\d_]+)*$")

BOTH_SCRIPTS = frozenset({Script.ARABIC, Script.LATIN})


@dataclass(frozen=True)
class PreparedQuery:
    """A query normalized once for every script it will be compared in."""
    raw: str
    script: Script
    arabic: str
    latin: str
    acronym: Optional[str]  # Set only when the query looks like initials

    def normalized_for(self, script: Script) -> str:
        return self.arabic if script == Script.ARABIC else self.latin

    @property
    def is_empty(self) -> bool:
        return not self.arabic and not self.latin


@dataclass(frozen=True)
class FieldMatch:
    """Score of one query against one field."""
    score: float
    kind: MatchKind
    field: Optional[IndexedField] = None


NO_MATCH = FieldMatch(score=0.0, kind=MatchKind.FUZZY)


def _acronym(raw: str) -> Optional[str]:
    if len(raw) > INITIALS_MAX_LENGTH or not _ACRONYM_RE.match(raw):
        return None
    letters = raw.replace(" ", "")
    if len(letters) < INITIALS_MIN_LETTERS or detect_script(letters) != Script.LATIN:
        return None
    return letters.lower()


def prepare_query(query: str) -> PreparedQuery:
    """
    Normalize a raw query for matching.

    Whitespace-only and empty queries produce an empty PreparedQuery,
    which matches nothing.
    """
    raw = (query or "").strip()
    return PreparedQuery(
        raw=raw,
        script=detect_script(raw),
        arabic=normalize_arabic(raw),
        latin=normalize_latin(raw),
        acronym=_acronym(raw),
    )


def searchable_scripts(query: PreparedQuery, bilingual: bool) -> frozenset[Script]:
    """
    Scripts whose fields a query is compared against.

    Bilingual search covers both; otherwise Arabic queries search Arabic
    fields and Latin or mixed queries search Latin fields.
    """
    if bilingual:
        return BOTH_SCRIPTS
    if query.script == Script.ARABIC:
        return frozenset({Script.ARABIC})
    return frozenset({Script.LATIN})


def _edit_similarity(s1: str, s2: str) -> float:
    if s1 == s2:
        return 1.0 if s1 else 0.0
    if not s1 or not s2:
        return 0.0
    max_len = max(len(s1), len(s2))
    return (max_len - edit_distance(s1, s2)) / max_len


def _exact_score(role: FieldRole) -> FieldMatch:
    if role == FieldRole.VARIANT:
        return FieldMatch(VARIANT_SCORE, MatchKind.VARIANT)
    if role == FieldRole.ALIAS:
        return FieldMatch(ALIAS_SCORE, MatchKind.VARIANT)
    return FieldMatch(EXACT_SCORE, MatchKind.EXACT)


def _prefix_score(q: str, c: str) -> FieldMatch:
    return FieldMatch(PREFIX_BASE + PREFIX_RATIO_WEIGHT * len(q) / len(c), MatchKind.PARTIAL)


def _substring_score(q: str, c: str) -> Optional[FieldMatch]:
    if c.startswith(q):
        return _prefix_score(q, c)
    if q in c or c in q:
        return FieldMatch(CONTAINS_SCORE, MatchKind.PARTIAL)
    return None


def _token_score(q: str, c: str) -> Optional[FieldMatch]:
    tokens = q.split()
    matched = sum(1 for token in tokens if token in c)
    if matched == 0:
        return None
    if matched == len(tokens) and len(tokens) > 1:
        return FieldMatch(ALL_TOKENS_SCORE, MatchKind.PARTIAL)
    return FieldMatch(SOME_TOKENS_WEIGHT * matched / len(tokens), MatchKind.PARTIAL)


def _fuzzy_score(q: str, c: str, min_score: float) -> FieldMatch:
    sim = _edit_similarity(q, c)
    bigram = bigram_similarity(q, c) * BIGRAM_WEIGHT
    # Never below the bigram score, so a higher floor cannot raise a score
    if sim >= min_score:
        return FieldMatch(max(sim * FUZZY_WEIGHT, bigram), MatchKind.FUZZY)
    return FieldMatch(bigram, MatchKind.FUZZY)


def _initials_score(acronym: str, field: IndexedField) -> Optional[FieldMatch]:
    if field.script != Script.LATIN or field.role not in (FieldRole.PRIMARY, FieldRole.VARIANT):
        return None
    if not matches_initials(acronym, field.surface):
        return None
    score = INITIALS_PRIMARY_SCORE if field.role == FieldRole.PRIMARY else INITIALS_VARIANT_SCORE
    return FieldMatch(score, MatchKind.VARIANT)


def score_field(
    query: PreparedQuery,
    field: IndexedField,
    options: SearchOptions,
) -> FieldMatch:
    """
    Score one prepared query against one indexed field.

    Returns:
        The field's FieldMatch; a zero score when nothing matched
    """
    q = query.normalized_for(field.script)
    c = field.normalized
    if not q or not c:
        return NO_MATCH

    if q == c:
        match = _exact_score(field.role)
        return FieldMatch(match.score, match.kind, field)

    # Surah numbers only match exactly or by prefix ("11" -> 110-114)
    if field.role == FieldRole.IDENTIFIER:
        if options.include_partial and c.startswith(q):
            match = _prefix_score(q, c)
            return FieldMatch(match.score, match.kind, field)
        return NO_MATCH

    best = _substring_score(q, c) if options.include_partial else None
    if best is None:
        best = _fuzzy_score(q, c, options.min_score)
        tokens = _token_score(q, c) if options.include_partial else None
        if tokens is not None and tokens.score >= best.score:
            best = tokens

    if options.include_initials and query.acronym:
        initials = _initials_score(query.acronym, field)
        if initials is not None and initials.score > best.score:
            best = initials

    return FieldMatch(best.score, best.kind, field)


def match_field(
    query: str,
    candidate: str,
    min_score: float = 0.3,
    include_partial: bool = True,
) -> tuple[float, MatchKind]:
    """
    Score a raw query against a raw candidate name.

    Both strings are normalized with their own detected script. The
    candidate is treated as a primary name.

    Examples:
        >>> match_field("Mohamed", "Muhammad")
        (1.0, <MatchKind.EXACT: 'exact'>)
    """
    normalized = normalize_text(candidate)
    script = Script.ARABIC if normalized.script == Script.ARABIC else Script.LATIN
    field = IndexedField(
        name="candidate",
        role=FieldRole.PRIMARY,
        script=script,
        surface=candidate,
        normalized=normalized.text,
    )
    options = SearchOptions(
        min_score=min_score,
        include_partial=include_partial,
        include_initials=False,
    )
    match = score_field(prepare_query(query), field, options)
    return match.score, match.kind


def match_record(
    query: PreparedQuery,
    indexed: IndexedRecord,
    options: SearchOptions,
    scripts: Optional[frozenset[Script]] = None,
) -> Optional[MatchResult]:
    """
    Best match of a query over all fields of one record.

    Args:
        query: Prepared query
        indexed: Indexed record to score
        options: Search options (strategy switches and fuzzy floor)
        scripts: Restrict matching to fields of these scripts
            (default: from ``options.bilingual``)

    Returns:
        MatchResult for the best-scoring field, or None if nothing scored
    """
    if query.is_empty:
        return None

    allowed = scripts if scripts is not None else searchable_scripts(query, options.bilingual)

    best = NO_MATCH
    for field in indexed.fields_for(allowed):
        match = score_field(query, field, options)
        if match.score > best.score:
            best = match
            if best.score >= EXACT_SCORE:
                break

    if best.score <= 0.0 or best.field is None:
        return None

    return MatchResult(
        record=indexed.record,
        score=min(best.score, 1.0),
        kind=best.kind,
        matched_field=best.field.name,
        matched_text=best.field.surface,
    )
