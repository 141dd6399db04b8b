"""Application search – errors."""
from __future__ import annotations

from activity_search.kernel.errors import ApplicationError, ValidationError


class InvalidThresholdError(ValidationError):
    """Fuzzy similarity threshold outside ``[0, 1]``."""

    default_code = "invalid_threshold"

    def __init__(self, threshold: float) -> None:
        super().__init__(
            f"Fuzzy threshold must be within [0, 1], got {threshold!r}",
            errors=[{"field": "threshold", "value": threshold}],
        )
        self.threshold = threshold


class DebouncerError(ApplicationError):
    """The debouncer cannot schedule the requested emission."""

    default_code = "debouncer_error"


class DebouncerClosedError(DebouncerError):
    """``schedule`` was called after ``close``."""

    default_code = "debouncer_closed"

    def __init__(self) -> None:
        super().__init__("Debouncer is closed")


__all__ = ["DebouncerClosedError", "DebouncerError", "InvalidThresholdError"]
