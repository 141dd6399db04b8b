"""Application search – debounced fuzzy search over an in-memory corpus."""
from activity_search.application.search.debounce import Debouncer
from activity_search.application.search.engine import SearchEngine, create_search_engine
from activity_search.application.search.errors import (
    DebouncerClosedError,
    DebouncerError,
    InvalidThresholdError,
)
from activity_search.application.search.fuzzy import (
    FuzzyMatcher,
    fuzzy_match,
    levenshtein_distance,
    similarity,
)
from activity_search.application.search.history import SearchHistory
from activity_search.application.search.suggestions import generate_suggestions

__all__ = [
    "Debouncer",
    "DebouncerClosedError",
    "DebouncerError",
    "FuzzyMatcher",
    "InvalidThresholdError",
    "SearchEngine",
    "SearchHistory",
    "create_search_engine",
    "fuzzy_match",
    "generate_suggestions",
    "levenshtein_distance",
    "similarity",
]
