"""Application filters – FilterConfig and FilterOption declarations."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Iterable

from activity_search.application.filters.errors import InvalidFilterConfigError, InvalidFilterValueError
from activity_search.application.filters.values import (
    FilterType,
    FilterValue,
    coerce_value,
    inactive_value,
)

__all__ = ["FilterConfig", "FilterOption", "FACETED_TYPES"]

#: Types whose options carry live facet counts.
FACETED_TYPES = frozenset({FilterType.SELECT, FilterType.MULTISELECT})


@dataclasses.dataclass(frozen=True)
class FilterOption:
    """One choice of a select / multiselect filter."""
    value: str
    label: str
    count: int | None = None

    @classmethod
    def from_any(cls, raw: FilterOption | Mapping[str, Any]) -> FilterOption:
        if isinstance(raw, FilterOption):
            return raw
        try:
            return cls(value=raw["value"], label=raw.get("label", raw["value"]), count=raw.get("count"))
        except (KeyError, TypeError, AttributeError) as exc:
            raise InvalidFilterConfigError(f"Malformed filter option {raw!r}", cause=exc) from exc


@dataclasses.dataclass(frozen=True)
class FilterConfig:
    """Declaration of one filter.

    ``field`` names the record attribute the filter inspects and defaults to
    ``id``. ``default_value`` is the value the filter starts from and returns
    to on clear; activeness is always judged against the type's inactive value.
    """

    id: str
    label: str
    type: FilterType
    options: tuple[FilterOption, ...] = ()
    default_value: Any = None
    field: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidFilterConfigError("Filter id must not be empty")
        try:
            object.__setattr__(self, "type", FilterType(self.type))
        except ValueError as exc:
            raise InvalidFilterConfigError(
                f"Filter '{self.id}' has unknown type {self.type!r}", cause=exc
            ) from exc
        options = tuple(FilterOption.from_any(o) for o in self.options or ())
        if options and self.type not in FACETED_TYPES:
            raise InvalidFilterConfigError(f"Filter '{self.id}' of type {self.type.value} cannot declare options")
        object.__setattr__(self, "options", options)
        try:
            self.initial_value()
        except InvalidFilterValueError as exc:
            raise InvalidFilterConfigError(
                f"Filter '{self.id}' has an invalid default value", cause=exc
            ) from exc

    @property
    def record_field(self) -> str:
        return self.field or self.id

    def initial_value(self) -> FilterValue:
        if self.default_value is None:
            return inactive_value(self.type)
        return coerce_value(self.type, self.default_value)

    def coerce(self, raw: Any) -> FilterValue:
        return coerce_value(self.type, raw)

    def with_counts(self, counts: Mapping[str, int]) -> FilterConfig:
        """Copy with each option's ``count`` taken from *counts* (``"all"`` untouched)."""
        options = tuple(
            dataclasses.replace(o, count=counts[o.value]) if o.value in counts else o
            for o in self.options
        )
        return dataclasses.replace(self, options=options)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> FilterConfig:
        """Build from the camelCase / snake_case dicts the views declare."""
        try:
            filter_id, filter_type = raw["id"], raw["type"]
        except (KeyError, TypeError) as exc:
            raise InvalidFilterConfigError(f"Malformed filter config {raw!r}", cause=exc) from exc
        return cls(
            id=filter_id,
            label=raw.get("label", filter_id),
            type=filter_type,
            options=tuple(raw.get("options") or ()),
            default_value=raw.get("default_value", raw.get("defaultValue")),
            field=raw.get("field"),
        )


def build_configs(configs: Iterable[FilterConfig | Mapping[str, Any]]) -> tuple[FilterConfig, ...]:
    """Normalise *configs* and reject duplicate ids."""
    built = tuple(c if isinstance(c, FilterConfig) else FilterConfig.from_dict(c) for c in configs)
    seen: set[str] = set()
    for config in built:
        if config.id in seen:
            raise InvalidFilterConfigError(f"Duplicate filter id '{config.id}'")
        seen.add(config.id)
    return built
