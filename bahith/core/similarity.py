"""
String similarity measures.

Edit-distance similarity is the primary fuzzy signal; bigram overlap is a
coarser fallback for strings that are too far apart for edit distance.
"""

from collections import Counter

from bahith.core.normalization import normalize_text


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Unit cost for insertion, deletion and substitution; fills the full
    dynamic-programming table.

    Examples:
        >>> edit_distance("kitten", "sitting")
        3
    """
    m, n = len(a), len(b)

    # dp[i][j] = distance between a[:i] and b[:j]
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,         # deletion
                dp[i][j - 1] + 1,         # insertion
                dp[i - 1][j - 1] + cost,  # substitution
            )

    return dp[m][n]


def similarity(a: str, b: str) -> float:
    """
    Edit-distance similarity between two strings (0.0-1.0).

    Both strings are normalized first, so already-normalized input is
    accepted as well.

    Returns:
        ``(max_len - distance) / max_len``; 1.0 for identical input and 0.0
        when either side normalizes to nothing
    """
    if a == b:
        return 1.0

    s1 = normalize_text(a).text
    s2 = normalize_text(b).text

    if s1 == s2:
        return 1.0 if s1 else 0.0
    if not s1 or not s2:
        return 0.0

    max_len = max(len(s1), len(s2))
    return (max_len - edit_distance(s1, s2)) / max_len


def bigrams(text: str) -> list[str]:
    """Contiguous two-character substrings of ``text`` (empty for fewer than 2 chars)."""
    return [text[i:i + 2] for i in range(len(text) - 1)]


def bigram_similarity(a: str, b: str) -> float:
    """
    Dice coefficient over character bigrams (0.0-1.0).

    ``2 * |common| / (|bigrams(a)| + |bigrams(b)|)``, counting repeated
    bigrams as many times as they occur on both sides.
    """
    grams_a = bigrams(a)
    grams_b = bigrams(b)
    total = len(grams_a) + len(grams_b)
    if total == 0:
        return 0.0

    common = Counter(grams_a) & Counter(grams_b)
    return 2 * sum(common.values()) / total
