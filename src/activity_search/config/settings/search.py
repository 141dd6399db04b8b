"""Config settings – SearchSettings."""
from __future__ import annotations

import dataclasses

from activity_search.config.settings.base import Settings
from activity_search.config.validation.errors import InvalidSettingValueError

DEFAULT_SEARCH_FIELDS: tuple[str, ...] = ("title", "name", "description")

FACET_SCOPES = frozenset({"search", "cross"})


@dataclasses.dataclass
class SearchSettings(Settings):
    """Tunables shared by the search stage and the filter stage.

    Loaded from ``ACTIVITY_SEARCH_*`` environment variables by
    :class:`~activity_search.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "ACTIVITY_SEARCH"

    debounce_ms: int = 300
    case_sensitive: bool = False
    fuzzy_threshold: float = 0.6
    max_suggestions: int = 8
    history_limit: int = 10
    search_fields: list[str] = dataclasses.field(default_factory=lambda: list(DEFAULT_SEARCH_FIELDS))
    facet_scope: str = "search"

    def _validate(self) -> None:
        if self.debounce_ms < 0:
            raise InvalidSettingValueError("debounce_ms", self.debounce_ms, "must be >= 0")
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise InvalidSettingValueError("fuzzy_threshold", self.fuzzy_threshold, "must be within [0, 1]")
        if self.max_suggestions < 0:
            raise InvalidSettingValueError("max_suggestions", self.max_suggestions, "must be >= 0")
        if self.history_limit < 1:
            raise InvalidSettingValueError("history_limit", self.history_limit, "must be >= 1")
        if not self.search_fields:
            raise InvalidSettingValueError("search_fields", self.search_fields, "must name at least one field")
        if self.facet_scope not in FACET_SCOPES:
            raise InvalidSettingValueError(
                "facet_scope", self.facet_scope, f"must be one of {sorted(FACET_SCOPES)}"
            )


__all__ = ["DEFAULT_SEARCH_FIELDS", "FACET_SCOPES", "SearchSettings"]
