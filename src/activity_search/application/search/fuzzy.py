"""Application search – Levenshtein-based fuzzy matching."""
from __future__ import annotations

import dataclasses

from activity_search.application.search.errors import InvalidThresholdError

__all__ = [
    "DEFAULT_THRESHOLD",
    "FUZZY_MIN_QUERY_LENGTH",
    "FuzzyMatcher",
    "fuzzy_match",
    "levenshtein_distance",
    "similarity",
]

DEFAULT_THRESHOLD = 0.6

# Shorter queries only match by substring containment.
FUZZY_MIN_QUERY_LENGTH = 3


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance between *a* and *b* using the full DP matrix."""
    rows, cols = len(b) + 1, len(a) + 1
    matrix = [[0] * cols for _ in range(rows)]
    for i in range(cols):
        matrix[0][i] = i
    for j in range(rows):
        matrix[j][0] = j

    for j in range(1, rows):
        for i in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,
                matrix[j - 1][i] + 1,
                matrix[j - 1][i - 1] + cost,
            )
    return matrix[-1][-1]


def similarity(a: str, b: str) -> float:
    """``1 - distance / max(len)``; two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def _check_threshold(threshold: float) -> None:
    if not 0.0 <= threshold <= 1.0:
        raise InvalidThresholdError(threshold)


def fuzzy_match(
    query: str,
    candidate: str,
    *,
    case_sensitive: bool = False,
    threshold: float = DEFAULT_THRESHOLD,
) -> bool:
    """Return True when *candidate* contains *query* or is similar enough to it.

    Similarity is only consulted for queries of at least
    :data:`FUZZY_MIN_QUERY_LENGTH` characters. It is measured against the whole
    candidate and, for multi-word candidates, against each word, so a typo of
    one word in a title still matches that title.
    """
    _check_threshold(threshold)
    if not query or not candidate:
        return False
    if not case_sensitive:
        query = query.lower()
        candidate = candidate.lower()
    if query in candidate:
        return True
    if len(query) < FUZZY_MIN_QUERY_LENGTH:
        return False
    if similarity(query, candidate) >= threshold:
        return True
    words = candidate.split()
    if len(words) < 2:
        return False
    return any(similarity(query, word) >= threshold for word in words)


@dataclasses.dataclass(frozen=True)
class FuzzyMatcher:
    """Configured :func:`fuzzy_match` usable as a plain callable."""

    case_sensitive: bool = False
    threshold: float = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        _check_threshold(self.threshold)

    def __call__(self, query: str, candidate: str) -> bool:
        return fuzzy_match(
            query,
            candidate,
            case_sensitive=self.case_sensitive,
            threshold=self.threshold,
        )
