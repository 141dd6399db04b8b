"""Application pipeline – search stage feeding the filter stage."""
from activity_search.application.pipeline.pipeline import SearchFilterPipeline, create_pipeline

__all__ = ["SearchFilterPipeline", "create_pipeline"]
