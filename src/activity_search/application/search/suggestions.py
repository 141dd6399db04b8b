"""Application search – autocomplete suggestions derived from the corpus."""
from __future__ import annotations

from typing import Any, Iterable, Sequence

from activity_search.application.records import field_value

__all__ = ["DEFAULT_MAX_SUGGESTIONS", "SUGGESTION_MIN_TERM_LENGTH", "generate_suggestions"]

DEFAULT_MAX_SUGGESTIONS = 8
SUGGESTION_MIN_TERM_LENGTH = 2


def generate_suggestions(
    corpus: Iterable[Any],
    search_fields: Sequence[str],
    term: str,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> list[str]:
    """Collect whole field values and single words that contain *term*.

    Matching is case-insensitive. Results keep first-seen order, are
    de-duplicated and truncated to *max_suggestions*.
    """
    if len(term) < SUGGESTION_MIN_TERM_LENGTH or max_suggestions <= 0:
        return []

    needle = term.lower()
    # dict preserves insertion order
    seen: dict[str, None] = {}
    for record in corpus:
        for field in search_fields:
            value = field_value(record, field)
            if not isinstance(value, str):
                continue
            if needle in value.lower():
                seen.setdefault(value, None)
            for word in value.split():
                if needle in word.lower():
                    seen.setdefault(word, None)
    return list(seen)[:max_suggestions]
