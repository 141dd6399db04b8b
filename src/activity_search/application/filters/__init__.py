"""Application filters – typed multi-facet filtering with saved filter sets."""
from activity_search.application.filters.config import FilterConfig, FilterOption
from activity_search.application.filters.engine import ActiveFilter, FilterEngine, create_filter_engine
from activity_search.application.filters.errors import InvalidFilterConfigError, InvalidFilterValueError
from activity_search.application.filters.saved import SavedFilter, SavedFilterStore
from activity_search.application.filters.values import (
    ALL,
    BooleanValue,
    DateValue,
    FilterType,
    FilterValue,
    MultiSelectValue,
    RangeValue,
    SelectValue,
    coerce_value,
    inactive_value,
)

__all__ = [
    "ALL",
    "ActiveFilter",
    "BooleanValue",
    "DateValue",
    "FilterConfig",
    "FilterEngine",
    "FilterOption",
    "FilterType",
    "FilterValue",
    "InvalidFilterConfigError",
    "InvalidFilterValueError",
    "MultiSelectValue",
    "RangeValue",
    "SavedFilter",
    "SavedFilterStore",
    "SelectValue",
    "coerce_value",
    "create_filter_engine",
    "inactive_value",
]
