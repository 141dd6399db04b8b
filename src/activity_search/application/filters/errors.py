"""Application filters – errors."""
from __future__ import annotations

from typing import Any

from activity_search.kernel.errors import ValidationError


class InvalidFilterConfigError(ValidationError):
    """A filter declaration is malformed (duplicate id, unknown type, ...)."""

    default_code = "invalid_filter_config"


class InvalidFilterValueError(ValidationError):
    """A raw value cannot be stored under the filter's type."""

    default_code = "invalid_filter_value"

    def __init__(self, filter_type: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Cannot use {value!r} as a {filter_type} filter value: {reason}",
            errors=[{"type": filter_type, "value": repr(value), "reason": reason}],
        )
        self.filter_type = filter_type
        self.value = value
        self.reason = reason


__all__ = ["InvalidFilterConfigError", "InvalidFilterValueError"]
