"""Observability – structured logging ports and helpers."""
from activity_search.observability.logging.factory import JsonLoggerFactory
from activity_search.observability.logging.processors import EngineContextProcessor, get_logger
from activity_search.observability.logging.protocol import Logger

__all__ = [
    "EngineContextProcessor",
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
