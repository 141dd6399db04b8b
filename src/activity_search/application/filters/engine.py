"""Application filters – FilterEngine: the typed multi-facet filter stage.

State is one :data:`FilterValue` per configured filter id. Every mutating call
recomputes ``filtered_items``, ``active_filters`` and the facet counts in
``enhanced_configs`` before returning.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from activity_search.application.filters.config import FACETED_TYPES, FilterConfig, build_configs
from activity_search.application.filters.saved import SavedFilter, SavedFilterStore
from activity_search.application.filters.values import ALL, FilterValue, inactive_value
from activity_search.application.records import field_value, is_collection
from activity_search.config.settings.search import FACET_SCOPES, SearchSettings
from activity_search.config.validation import InvalidSettingValueError
from activity_search.kernel.time import Clock
from activity_search.observability.logging import Logger, get_logger

T = TypeVar("T")

#: Custom replacement for the built-in conjunction of filter predicates.
FilterPredicate = Callable[[Any, Mapping[str, FilterValue]], bool]
FilterListener = Callable[["FilterEngine[Any]"], None]

__all__ = [
    "ActiveFilter",
    "FilterEngine",
    "FilterListener",
    "FilterPredicate",
    "create_filter_engine",
]

_log: Logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ActiveFilter:
    """A filter currently restricting the result, ready to render as a chip."""
    id: str
    label: str
    value: FilterValue
    display_value: str


class FilterEngine(Generic[T]):
    """Conjunctive filtering with live facet counts and saved filter sets.

    ``facet_scope`` selects how option counts are computed:

    * ``"search"`` – over the engine's whole input corpus (the records that
      survived the upstream search stage);
    * ``"cross"`` – over the input corpus narrowed by every *other* filter. With a
      custom ``predicate`` the narrowing runs through that predicate, called with
      the counted filter reset to its inactive value.
    """

    def __init__(
        self,
        corpus: Sequence[T],
        filter_configs: Iterable[FilterConfig | Mapping[str, Any]],
        *,
        predicate: FilterPredicate | None = None,
        facet_scope: str | None = None,
        settings: SearchSettings | None = None,
        saved_store: SavedFilterStore | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._configs = build_configs(filter_configs)
        self._by_id: dict[str, FilterConfig] = {c.id: c for c in self._configs}
        self._predicate = predicate
        self._facet_scope = facet_scope or (settings.facet_scope if settings else "search")
        if self._facet_scope not in FACET_SCOPES:
            raise InvalidSettingValueError(
                "facet_scope", self._facet_scope, f"must be one of {sorted(FACET_SCOPES)}"
            )
        self._saved = saved_store or SavedFilterStore(clock)
        self._listeners: list[FilterListener] = []

        self._corpus: list[T] = list(corpus)
        self._state: dict[str, FilterValue] = self._initial_state()
        self._filtered: list[T] = []
        self._active: list[ActiveFilter] = []
        self._enhanced: tuple[FilterConfig, ...] = self._configs
        self._recompute()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def filter_configs(self) -> tuple[FilterConfig, ...]:
        return self._configs

    @property
    def facet_scope(self) -> str:
        return self._facet_scope

    @property
    def corpus(self) -> list[T]:
        return list(self._corpus)

    @property
    def filter_state(self) -> dict[str, FilterValue]:
        return dict(self._state)

    @property
    def filtered_items(self) -> list[T]:
        return list(self._filtered)

    @property
    def active_filters(self) -> list[ActiveFilter]:
        return list(self._active)

    @property
    def has_active_filters(self) -> bool:
        return bool(self._active)

    @property
    def enhanced_configs(self) -> tuple[FilterConfig, ...]:
        return self._enhanced

    @property
    def saved_filters(self) -> list[SavedFilter]:
        return self._saved.entries

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def update_filter(self, filter_id: str, value: Any) -> None:
        """Store *value* (raw or typed) for *filter_id*; unknown ids are ignored."""
        config = self._config_or_warn(filter_id, "update")
        if config is None:
            return
        self._state[filter_id] = config.coerce(value)
        _log.debug("filters.updated", filter_id=filter_id, value=self._state[filter_id].to_raw())
        self._recompute()

    def clear_filter(self, filter_id: str) -> None:
        config = self._config_or_warn(filter_id, "clear")
        if config is None:
            return
        self._state[filter_id] = config.initial_value()
        self._recompute()

    def clear_all_filters(self) -> None:
        self._state = self._initial_state()
        self._recompute()

    def save_current_filters(self, name: str) -> str:
        """Snapshot every filter (active or not) under *name*; returns the new id."""
        entry = self._saved.save(name, self._state)
        _log.info("filters.saved", saved_id=entry.id, name=name)
        return entry.id

    def load_saved_filter(self, saved_id: str) -> None:
        """Replace the whole filter state with a snapshot; unknown ids are ignored."""
        entry = self._saved.get(saved_id)
        if entry is None:
            _log.warning("filters.unknown_saved_id", saved_id=saved_id)
            return
        self._state = {c.id: entry.filters.get(c.id, c.initial_value()) for c in self._configs}
        _log.info("filters.loaded", saved_id=saved_id, name=entry.name)
        self._recompute()

    def delete_saved_filter(self, saved_id: str) -> None:
        if self._saved.delete(saved_id):
            _log.info("filters.deleted", saved_id=saved_id)

    def set_corpus(self, corpus: Sequence[T]) -> None:
        """Replace the input corpus (typically the search stage output)."""
        self._corpus = list(corpus)
        self._recompute()

    def subscribe(self, listener: FilterListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def matches(self, record: T) -> bool:
        """True when *record* passes every configured filter."""
        if self._predicate is not None:
            return self._predicate(record, dict(self._state))
        return self._passes(record, self._configs)

    def facet_counts(self, filter_id: str) -> dict[str, int]:
        """Per-option record counts for a select / multiselect filter."""
        config = self._by_id.get(filter_id)
        if config is None or config.type not in FACETED_TYPES:
            return {}
        pool: list[T] = self._corpus
        if self._facet_scope == "cross":
            pool = [record for record in self._corpus if self._passes_others(record, config)]
        field = config.record_field
        return {
            option.value: sum(1 for record in pool if _holds(field_value(record, field), option.value))
            for option in config.options
            if option.value != ALL
        }

    def _passes(self, record: T, configs: Iterable[FilterConfig]) -> bool:
        return all(self._state[c.id].matches(field_value(record, c.record_field)) for c in configs)

    def _passes_others(self, record: T, config: FilterConfig) -> bool:
        if self._predicate is not None:
            # own filter neutralised so the custom predicate ignores it
            state = {**self._state, config.id: inactive_value(config.type)}
            return self._predicate(record, state)
        return self._passes(record, (c for c in self._configs if c.id != config.id))

    def _initial_state(self) -> dict[str, FilterValue]:
        return {c.id: c.initial_value() for c in self._configs}

    def _config_or_warn(self, filter_id: str, action: str) -> FilterConfig | None:
        config = self._by_id.get(filter_id)
        if config is None:
            _log.warning("filters.unknown_id", filter_id=filter_id, action=action)
        return config

    def _recompute(self) -> None:
        self._filtered = [record for record in self._corpus if self.matches(record)]
        self._active = [
            ActiveFilter(
                id=c.id,
                label=c.label,
                value=self._state[c.id],
                display_value=self._state[c.id].display(c.options),
            )
            for c in self._configs
            if self._state[c.id].is_active
        ]
        self._enhanced = tuple(
            c.with_counts(self.facet_counts(c.id)) if c.type in FACETED_TYPES else c
            for c in self._configs
        )
        _log.debug(
            "filters.recomputed",
            matched=len(self._filtered),
            total=len(self._corpus),
            active=len(self._active),
        )
        for listener in list(self._listeners):
            listener(self)


def _holds(item_value: Any, option_value: str) -> bool:
    if is_collection(item_value):
        return option_value in item_value
    return item_value == option_value


def create_filter_engine(
    corpus: Sequence[T],
    filter_configs: Iterable[FilterConfig | Mapping[str, Any]],
    **kwargs: Any,
) -> FilterEngine[T]:
    """Functional constructor mirroring the dashboard views' contract."""
    return FilterEngine(corpus, filter_configs, **kwargs)
