"""Application search – SearchEngine: the debounced search stage.

``term`` follows every keystroke; ``debounced_term`` only moves once the
debouncer settles, and everything derived (``filtered_items``,
``suggestions``) is recomputed from ``debounced_term`` alone.
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any, Callable, Generic, Sequence, TypeVar

from activity_search.application.records import field_value
from activity_search.application.search.debounce import Debouncer
from activity_search.application.search.errors import DebouncerClosedError
from activity_search.application.search.fuzzy import FuzzyMatcher
from activity_search.application.search.history import SearchHistory
from activity_search.application.search.suggestions import generate_suggestions
from activity_search.config.settings.search import SearchSettings
from activity_search.observability.logging import Logger, get_logger

T = TypeVar("T")

#: Called with the engine after each recompute.
SearchListener = Callable[["SearchEngine[Any]"], None]

__all__ = ["SearchEngine", "SearchListener", "create_search_engine"]

_log: Logger = get_logger(__name__)


def _resolve_settings(settings: SearchSettings | None, **overrides: Any) -> SearchSettings:
    """Apply non-``None`` keyword overrides on top of *settings* (re-validated)."""
    base = settings or SearchSettings()
    changes = {k: v for k, v in overrides.items() if v is not None}
    if "search_fields" in changes:
        changes["search_fields"] = list(changes["search_fields"])
    return dataclasses.replace(base, **changes) if changes else base


class SearchEngine(Generic[T]):
    """Debounced fuzzy search over an in-memory corpus.

    Example::

        engine = SearchEngine(activities, search_fields=["title", "description"])
        engine.set_term("workshp")
        ...                       # after debounce_ms on the running loop
        engine.filtered_items     # records whose title or description match
    """

    def __init__(
        self,
        corpus: Sequence[T],
        *,
        search_fields: Sequence[str] | None = None,
        debounce_ms: int | None = None,
        case_sensitive: bool | None = None,
        fuzzy_threshold: float | None = None,
        max_suggestions: int | None = None,
        history_limit: int | None = None,
        settings: SearchSettings | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._settings = _resolve_settings(
            settings,
            search_fields=search_fields,
            debounce_ms=debounce_ms,
            case_sensitive=case_sensitive,
            fuzzy_threshold=fuzzy_threshold,
            max_suggestions=max_suggestions,
            history_limit=history_limit,
        )
        self._search_fields: tuple[str, ...] = tuple(self._settings.search_fields)
        self._matcher = FuzzyMatcher(
            case_sensitive=self._settings.case_sensitive,
            threshold=self._settings.fuzzy_threshold,
        )
        self._debouncer: Debouncer[str] = Debouncer(loop)
        self._history = SearchHistory(self._settings.history_limit)
        self._listeners: list[SearchListener] = []

        self._corpus: list[T] = list(corpus)
        self._term = ""
        self._debounced_term = ""
        self._filtered: list[T] = list(self._corpus)
        self._suggestions: list[str] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    @property
    def search_fields(self) -> tuple[str, ...]:
        return self._search_fields

    @property
    def corpus(self) -> list[T]:
        return list(self._corpus)

    @property
    def term(self) -> str:
        return self._term

    @property
    def debounced_term(self) -> str:
        return self._debounced_term

    @property
    def filtered_items(self) -> list[T]:
        return list(self._filtered)

    @property
    def suggestions(self) -> list[str]:
        return list(self._suggestions)

    @property
    def history(self) -> list[str]:
        return self._history.terms

    @property
    def has_active_search(self) -> bool:
        return bool(self._debounced_term)

    @property
    def pending(self) -> bool:
        """True while a term is waiting for the debounce to settle."""
        return self._debouncer.pending

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_term(self, value: str) -> None:
        """Record a keystroke; non-blank values are committed to history."""
        if self._debouncer.closed:
            raise DebouncerClosedError()
        self._term = value
        if value.strip():
            self.add_to_history(value)
        self._debouncer.schedule(value, self._settings.debounce_ms, self._settle)

    def clear_search(self) -> None:
        self.set_term("")

    def add_to_history(self, term: str) -> bool:
        return self._history.add(term)

    def clear_history(self) -> None:
        self._history.clear()

    def set_corpus(self, corpus: Sequence[T]) -> None:
        """Replace the corpus and recompute against the current ``debounced_term``."""
        self._corpus = list(corpus)
        self._recompute()

    def flush(self) -> bool:
        """Settle a pending term immediately (e.g. the user pressed Enter)."""
        return self._debouncer.flush()

    def subscribe(self, listener: SearchListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Teardown: no debounced emission may land after this returns."""
        self._debouncer.close()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def matches(self, record: T) -> bool:
        """True when *record* passes the search stage for ``debounced_term``."""
        if not self._debounced_term:
            return True
        for field in self._search_fields:
            value = field_value(record, field)
            if isinstance(value, str) and self._matcher(self._debounced_term, value):
                return True
        return False

    def _settle(self, value: str) -> None:
        self._debounced_term = value
        _log.debug("search.settled", term=value)
        self._recompute()

    def _recompute(self) -> None:
        self._filtered = [record for record in self._corpus if self.matches(record)]
        self._suggestions = generate_suggestions(
            self._corpus,
            self._search_fields,
            self._debounced_term,
            self._settings.max_suggestions,
        )
        _log.debug(
            "search.recomputed",
            term=self._debounced_term,
            matched=len(self._filtered),
            total=len(self._corpus),
        )
        for listener in list(self._listeners):
            listener(self)


def create_search_engine(
    corpus: Sequence[T],
    search_fields: Sequence[str] | None = None,
    debounce_ms: int | None = None,
    case_sensitive: bool | None = None,
    fuzzy_threshold: float | None = None,
    **kwargs: Any,
) -> SearchEngine[T]:
    """Functional constructor mirroring the keyword contract of the dashboard views."""
    return SearchEngine(
        corpus,
        search_fields=search_fields,
        debounce_ms=debounce_ms,
        case_sensitive=case_sensitive,
        fuzzy_threshold=fuzzy_threshold,
        **kwargs,
    )
