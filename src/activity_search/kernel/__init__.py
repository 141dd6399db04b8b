"""Kernel – framework-agnostic building blocks."""

from activity_search.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
