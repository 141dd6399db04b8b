"""
activity_search – search-and-filter core for activity dashboards.

Import path convention::

    from activity_search.application.search import SearchEngine, fuzzy_match
    from activity_search.application.filters import FilterConfig, FilterEngine
    from activity_search.application.pipeline import SearchFilterPipeline
    from activity_search.config import SearchSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
