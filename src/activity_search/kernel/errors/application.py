"""Application-layer errors — misuse of engine objects and configuration."""

from __future__ import annotations

from activity_search.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
