"""Application search – bounded search history."""
from __future__ import annotations

from typing import Iterator

__all__ = ["DEFAULT_HISTORY_LIMIT", "SearchHistory"]

DEFAULT_HISTORY_LIMIT = 10


class SearchHistory:
    """Most-recent-first list of committed terms, without duplicates.

    Re-adding a term that is already present leaves the list untouched; it is
    not moved to the front.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self._limit = limit
        self._terms: list[str] = []

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def terms(self) -> list[str]:
        return list(self._terms)

    def add(self, term: str) -> bool:
        """Commit *term* (stripped). Returns True if the history changed."""
        term = term.strip()
        if not term or term in self._terms:
            return False
        self._terms.insert(0, term)
        del self._terms[self._limit:]
        return True

    def clear(self) -> None:
        self._terms.clear()

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._terms))

    def __contains__(self, term: object) -> bool:
        return term in self._terms
