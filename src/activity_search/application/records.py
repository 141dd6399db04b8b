"""Application – uniform field access over dict-like and attribute records."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["field_value", "is_collection"]


def field_value(record: Any, field: str) -> Any:
    """Return ``record[field]`` for mappings, ``record.field`` otherwise, or ``None``."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def is_collection(value: Any) -> bool:
    """True for list-like field values (tags, roles); strings are scalars."""
    return isinstance(value, (list, tuple, set, frozenset))
