"""Unit tests for the search → filter pipeline."""

from __future__ import annotations

import asyncio
from typing import Any

from activity_search.application.filters import FilterConfig, FilterOption, FilterType
from activity_search.application.pipeline import SearchFilterPipeline, create_pipeline

ACTIVITIES = [
    {"id": 1, "title": "React Workshop", "type": "Workshop", "status": "pending"},
    {"id": 2, "title": "Vue Workshop", "type": "Workshop", "status": "approved"},
    {"id": 3, "title": "Coding Competition", "type": "Competition", "status": "pending"},
    {"id": 4, "title": "Robotics Competition", "type": "Competition", "status": "approved"},
]

CONFIGS = [
    FilterConfig(
        id="type",
        label="Type",
        type=FilterType.SELECT,
        options=(FilterOption("all", "All"), FilterOption("Workshop", "Workshop"),
                 FilterOption("Competition", "Competition")),
    ),
    FilterConfig(id="status", label="Status", type=FilterType.SELECT),
]


def _pipeline(**kwargs: Any) -> SearchFilterPipeline[dict[str, Any]]:
    kwargs.setdefault("search_fields", ["title"])
    kwargs.setdefault("debounce_ms", 0)
    return SearchFilterPipeline(ACTIVITIES, CONFIGS, **kwargs)


def _ids(items: list[dict[str, Any]]) -> list[int]:
    return [i["id"] for i in items]


def _type_counts(p: SearchFilterPipeline[Any]) -> dict[str, int | None]:
    return {o.value: o.count for o in p.filters.enhanced_configs[0].options}


class TestPipeline:
    def test_unfiltered(self) -> None:
        assert _pipeline().filtered_items == ACTIVITIES

    def test_search_then_filter(self) -> None:
        p = _pipeline()
        p.set_term("workshop")
        p.update_filter("status", "pending")
        assert _ids(p.filtered_items) == [1]

    def test_filter_stage_sees_search_output(self) -> None:
        p = _pipeline()
        p.set_term("competition")
        assert p.filters.corpus == ACTIVITIES[2:]
        assert _type_counts(p) == {"all": None, "Workshop": 0, "Competition": 2}

    def test_filters_survive_new_search(self) -> None:
        p = _pipeline()
        p.update_filter("type", "Workshop")
        p.set_term("react")
        assert _ids(p.filtered_items) == [1]
        p.set_term("")
        assert _ids(p.filtered_items) == [1, 2]

    def test_clear_all_and_empty_term_is_whole_corpus(self) -> None:
        p = _pipeline()
        p.set_term("robotics")
        p.update_filter("type", "Competition")
        p.filters.clear_all_filters()
        p.search.clear_search()
        assert p.filtered_items == ACTIVITIES

    def test_set_corpus(self) -> None:
        p = _pipeline()
        p.set_term("workshop")
        p.set_corpus(ACTIVITIES[1:])
        assert _ids(p.filtered_items) == [2]

    def test_debounced_push(self) -> None:
        async def _run() -> tuple[list[int], list[int]]:
            p = _pipeline(debounce_ms=20)
            p.set_term("robotics")
            before = _ids(p.filtered_items)
            await asyncio.sleep(0.06)
            after = _ids(p.filtered_items)
            p.close()
            return before, after

        before, after = asyncio.run(_run())
        assert before == [1, 2, 3, 4]
        assert after == [4]

    def test_close_detaches_stages(self) -> None:
        p = _pipeline()
        p.close()
        p.search.set_corpus(ACTIVITIES[:1])
        assert len(p.filters.corpus) == 4

    def test_create_pipeline(self) -> None:
        p = create_pipeline(ACTIVITIES, CONFIGS, search_fields=["title"], debounce_ms=0)
        p.set_term("vue")
        assert _ids(p.filtered_items) == [2]
