"""
Arabic and English text normalization.

Canonicalizes names written in Arabic script or in Latin transliteration so
that spelling variants compare equal, and classifies the script of a string.

All tables are module-level constants and are never mutated.
"""

import re
import unicodedata
from types import MappingProxyType

from bahith.models import NormalizedString, Script


# Letter variants folded onto one canonical letter
ARABIC_LETTER_MAP = MappingProxyType({
    # Alef variants
    "إ": "ا",
    "أ": "ا",
    "آ": "ا",
    "ٱ": "ا",
    "ٲ": "ا",
    "ٳ": "ا",
    # Standalone high hamza
    "ٴ": "ء",
    # Ta marbuta and ha
    "ة": "ه",
    "ۀ": "ه",
    "ە": "ه",
    # Ya and alef maqsura
    "ى": "ي",
    "ئ": "ي",
    "ۓ": "ي",
    "ے": "ي",
    "ۍ": "ي",
    "ێ": "ي",
    # Kaf
    "ڪ": "ك",
    "ک": "ك",
    "گ": "ك",
    "ڭ": "ك",
    # Waw
    "ۆ": "و",
    "ؤ": "و",
    "ۈ": "و",
    "ۋ": "و",
    "ۊ": "و",
    # Dad and dhal
    "ڎ": "ض",
    "ڍ": "ض",
    "ڌ": "ض",
    "ذ": "د",
    # Ghain
    "غ": "ع",
    "ڠ": "ع",
    # Qaf
    "ڨ": "ق",
})

TATWEEL = "ـ"

# Tashkeel: tanween, harakat, shadda, sukun, maddah, hamza marks, superscript alef
ARABIC_DIACRITICS = frozenset(
    [chr(c) for c in range(0x064B, 0x0660)] + ["ٰ"]
)

LATIN_PREFIXES = ("al", "el", "ul", "ar", "as", "ad", "an")

# canonical spelling -> common transliterations
TRANSLITERATION_VARIANTS = MappingProxyType({
    "abdul": ("abd", "abdel", "abdal", "abdol"),
    "muhammad": ("mohammed", "mohamed", "muhammed", "muhamad", "mohammad"),
    "ahmed": ("ahmad", "achmed", "ahmet"),
    "khalid": ("khaled", "chalid"),
    "omar": ("umer", "umar", "oumar"),
    "ibrahim": ("abraheem", "ibraheem"),
    "ismail": ("ismael", "ismaeel"),
    "yusuf": ("youssef", "yousef", "yosef", "joseph"),
    "quran": ("koran", "alquran"),
    "sheikh": ("sheik", "shaykh", "shaikh", "cheikh"),
    "imam": ("imaam", "emam"),
    "rahman": ("rehman", "rahmann"),
    "hassan": ("hasan", "hassane"),
    "saad": ("sad",),
    "tariq": ("tarik", "tarek"),
    "salim": ("saleem",),
    "karim": ("kareem",),
    "amin": ("ameen",),
    "fadel": ("fadal", "fadl"),
    "hakim": ("hakeem",),
    "jalil": ("jaleel",),
    "nabil": ("nabeele",),
    "qadir": ("kadir", "kader"),
    "rashid": ("rasheed",),
    "latif": ("lateef",),
    "shakur": ("shakoor",),
    "wahid": ("waheed",),
    "majid": ("majeed",),
    "baqi": ("baqee",),
    "muttalib": ("mutallib",),
})

_VARIANT_TO_CANONICAL = MappingProxyType({
    variant: canonical
    for canonical, variants in TRANSLITERATION_VARIANTS.items()
    for variant in variants
})

_ARABIC_RANGES = (
    (0x0600, 0x06FF),
    (0x0750, 0x077F),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
)
_LATIN_RANGE = (0x0041, 0x024F)

SCRIPT_THRESHOLD = 0.7

_APOSTROPHES_RE = re.compile(r"['‘’ʼʻ`´]")
_NON_WORD_RE = re.compile(r"[^\w\s-]")
_PREFIX_RE = re.compile(r"\b(?:%s)-+" % "|".join(LATIN_PREFIXES))
_VARIANT_RE = re.compile(
    r"\b(%s)\b" % "|".join(sorted(map(re.escape, _VARIANT_TO_CANONICAL), key=len, reverse=True))
)
_WHITESPACE_RE = re.compile(r"\s+")


def _is_arabic_letter(ch: str) -> bool:
    if ch == TATWEEL or not ch.isalpha():
        return False
    code = ord(ch)
    return any(lo <= code <= hi for lo, hi in _ARABIC_RANGES)


def _is_latin_letter(ch: str) -> bool:
    return ch.isalpha() and _LATIN_RANGE[0] <= ord(ch) <= _LATIN_RANGE[1]


def count_letters(text: str) -> tuple[int, int]:
    """
    Count Arabic and Latin letters in ``text``.

    Counting is done on the compatibility decomposition, so presentation
    forms and ligatures count as the letters they stand for.

    Returns:
        Tuple of (arabic_count, latin_count)
    """
    arabic = latin = 0
    for ch in unicodedata.normalize("NFKD", text):
        if _is_arabic_letter(ch):
            arabic += 1
        elif _is_latin_letter(ch):
            latin += 1
    return arabic, latin


def detect_script(text: str) -> Script:
    """
    Classify the dominant script of ``text``.

    A script wins when it holds more than 70% of the letters; text without
    letters counts as Latin; anything else is mixed.

    Examples:
        >>> detect_script("سعود الشريم")
        <Script.ARABIC: 'arabic'>
        >>> detect_script("Saud Al-Shuraim")
        <Script.LATIN: 'latin'>
    """
    if not text:
        return Script.LATIN

    arabic, latin = count_letters(text)
    total = arabic + latin
    if total == 0:
        return Script.LATIN
    if arabic / total > SCRIPT_THRESHOLD:
        return Script.ARABIC
    if latin / total > SCRIPT_THRESHOLD:
        return Script.LATIN
    return Script.MIXED


def dominant_script(text: str) -> Script:
    """Majority script of ``text``: Arabic if it has more Arabic letters, else Latin."""
    arabic, latin = count_letters(text)
    return Script.ARABIC if arabic > latin else Script.LATIN


def is_arabic(text: str) -> bool:
    """Whether ``text`` contains any Arabic letter."""
    return count_letters(text)[0] > 0


def _fold_arabic_letters(text: str) -> str:
    return "".join(ARABIC_LETTER_MAP.get(ch, ch) for ch in text)


def _strip_marks(text: str) -> str:
    """Fold letters, decompose, drop combining marks and tatweel, fold again."""
    text = _fold_arabic_letters(text)
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(
        ch
        for ch in decomposed
        if ch != TATWEEL
        and ch not in ARABIC_DIACRITICS
        and unicodedata.category(ch) != "Mn"
    )
    return _fold_arabic_letters(stripped)


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_arabic(text: str) -> str:
    """
    Normalize Arabic text for comparison.

    Steps: fold letter variants → remove diacritics and tatweel → collapse spaces.

    Examples:
        >>> normalize_arabic("الفَاتِحَة")
        'الفاتحه'
    """
    if not text:
        return ""
    return _collapse(_strip_marks(text))


def strip_latin_prefixes(text: str) -> str:
    """Remove word-leading particles such as ``al-`` and ``as-`` from lowercased text."""
    previous = None
    while previous != text:
        previous = text
        text = _PREFIX_RE.sub("", text)
    return text


def fold_transliterations(text: str) -> str:
    """Replace known transliteration variants with their canonical spelling (whole words)."""
    return _VARIANT_RE.sub(lambda m: _VARIANT_TO_CANONICAL[m.group(1)], text)


def normalize_latin(text: str) -> str:
    """
    Normalize English/transliterated text for comparison.

    Steps: drop accents → lowercase → drop apostrophes → punctuation to spaces →
    strip ``al-``-style particles → fold transliteration variants →
    hyphens to spaces → collapse spaces.

    Examples:
        >>> normalize_latin("Mohamed Al-Minshawi")
        'muhammad minshawi'
        >>> normalize_latin("Qur'an")
        'quran'
    """
    if not text:
        return ""
    # Decompose before lowercasing so compatibility capitals fold too
    text = _strip_marks(text).lower()
    text = _APOSTROPHES_RE.sub("", text)
    text = _NON_WORD_RE.sub(" ", text)
    text = strip_latin_prefixes(text)
    text = fold_transliterations(text)
    text = text.replace("-", " ")
    return _collapse(text)


def normalize(text: str, script: Script) -> NormalizedString:
    """
    Normalize ``text`` with the rules of ``script``.

    Mixed text gets the Latin rules; Arabic letters in it are still folded
    and stripped of diacritics.
    """
    if script == Script.ARABIC:
        return NormalizedString(text=normalize_arabic(text), script=Script.ARABIC)
    return NormalizedString(text=normalize_latin(text), script=script)


def normalize_text(text: str) -> NormalizedString:
    """
    Normalize ``text`` using its detected script.

    Latin and mixed text is tagged with the script detected on the
    normalized result, so normalizing the result again is a no-op.
    """
    text = text or ""
    script = detect_script(text)
    if script == Script.ARABIC:
        return normalize(text, script)
    normalized = normalize_latin(text)
    return NormalizedString(text=normalized, script=detect_script(normalized))


def tokenize(text: str) -> list[str]:
    """Split text into normalized tokens."""
    normalized = normalize_text(text).text
    return normalized.split() if normalized else []


def transliteration_variants(word: str) -> list[str]:
    """
    All known spellings of ``word``, canonical first.

    Returns ``[word]`` (lowercased) when the word has no known variants.
    """
    word = word.lower().strip()
    canonical = _VARIANT_TO_CANONICAL.get(word, word)
    if canonical in TRANSLITERATION_VARIANTS:
        return [canonical, *TRANSLITERATION_VARIANTS[canonical]]
    return [word]


def extract_initials(text: str) -> str:
    """
    Initial letters of each whitespace-separated word, upper-cased.

    Examples:
        >>> extract_initials("Mishary Al-Afasy")
        'MA'
    """
    return "".join(word[0].upper() for word in text.split() if word)


def matches_initials(query: str, full_name: str) -> bool:
    """Whether ``query`` (spaces ignored) is a prefix of the initials of ``full_name``."""
    compact = "".join(query.split()).lower()
    if not compact:
        return False
    return extract_initials(full_name).lower().startswith(compact)
