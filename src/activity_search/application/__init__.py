"""Application – search stage, filter stage and their composition."""

from activity_search.application.filters import (
    ActiveFilter,
    FilterConfig,
    FilterEngine,
    FilterOption,
    FilterType,
    SavedFilter,
    SavedFilterStore,
    create_filter_engine,
)
from activity_search.application.pipeline import SearchFilterPipeline, create_pipeline
from activity_search.application.search import (
    Debouncer,
    FuzzyMatcher,
    SearchEngine,
    SearchHistory,
    create_search_engine,
    fuzzy_match,
    generate_suggestions,
)

__all__ = [
    "ActiveFilter",
    "Debouncer",
    "FilterConfig",
    "FilterEngine",
    "FilterOption",
    "FilterType",
    "FuzzyMatcher",
    "SavedFilter",
    "SavedFilterStore",
    "SearchEngine",
    "SearchFilterPipeline",
    "SearchHistory",
    "create_filter_engine",
    "create_pipeline",
    "create_search_engine",
    "fuzzy_match",
    "generate_suggestions",
]
