"""Application pipeline – SearchFilterPipeline."""
from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any, Generic, Iterable, Sequence, TypeVar

from activity_search.application.filters import FilterConfig, FilterEngine
from activity_search.application.filters.engine import FilterPredicate
from activity_search.application.search import SearchEngine
from activity_search.config.settings.search import SearchSettings
from activity_search.kernel.time import Clock

T = TypeVar("T")

__all__ = ["SearchFilterPipeline", "create_pipeline"]


class SearchFilterPipeline(Generic[T]):
    """corpus → search stage → filter stage → consumer.

    The filter stage never sees the full corpus: each search recompute pushes
    the search output into it, so its predicates and facet counts work on the
    search-narrowed set.

    Example::

        pipeline = SearchFilterPipeline(activities, [status_filter, type_filter],
                                        search_fields=["title"])
        pipeline.search.set_term("workshop")
        pipeline.filters.update_filter("status", "pending")
        pipeline.filtered_items
    """

    def __init__(
        self,
        corpus: Sequence[T],
        filter_configs: Iterable[FilterConfig | Mapping[str, Any]],
        *,
        settings: SearchSettings | None = None,
        predicate: FilterPredicate | None = None,
        clock: Clock | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
        **search_options: Any,
    ) -> None:
        self.search: SearchEngine[T] = SearchEngine(corpus, settings=settings, loop=loop, **search_options)
        self.filters: FilterEngine[T] = FilterEngine(
            self.search.filtered_items,
            filter_configs,
            predicate=predicate,
            settings=self.search.settings,
            clock=clock,
        )
        self._unsubscribe = self.search.subscribe(self._on_search_recomputed)

    @property
    def filtered_items(self) -> list[T]:
        return self.filters.filtered_items

    def set_term(self, value: str) -> None:
        self.search.set_term(value)

    def update_filter(self, filter_id: str, value: Any) -> None:
        self.filters.update_filter(filter_id, value)

    def set_corpus(self, corpus: Sequence[T]) -> None:
        self.search.set_corpus(corpus)

    def close(self) -> None:
        self._unsubscribe()
        self.search.close()

    def _on_search_recomputed(self, engine: SearchEngine[Any]) -> None:
        self.filters.set_corpus(engine.filtered_items)


def create_pipeline(
    corpus: Sequence[T],
    filter_configs: Iterable[FilterConfig | Mapping[str, Any]],
    **kwargs: Any,
) -> SearchFilterPipeline[T]:
    return SearchFilterPipeline(corpus, filter_configs, **kwargs)
