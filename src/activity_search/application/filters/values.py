"""Application filters – typed filter values.

Each filter type stores exactly one variant of :data:`FilterValue`. A variant
knows whether it is active, how to test a record's field value and how to
render itself for a chip.
"""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from activity_search.application.filters.errors import InvalidFilterValueError
from activity_search.application.records import is_collection

if TYPE_CHECKING:
    from activity_search.application.filters.config import FilterOption

__all__ = [
    "ALL",
    "BooleanValue",
    "DateValue",
    "FilterType",
    "FilterValue",
    "MultiSelectValue",
    "RangeValue",
    "SelectValue",
    "coerce_value",
    "inactive_value",
]

#: Select sentinel meaning "no restriction".
ALL = "all"


class FilterType(str, Enum):
    SELECT = "select"
    MULTISELECT = "multiselect"
    BOOLEAN = "boolean"
    DATE = "date"
    RANGE = "range"


def _option_label(options: tuple[FilterOption, ...], value: str) -> str:
    for option in options:
        if option.value == value:
            return option.label
    return value


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _to_number(value: Any) -> float | None:
    """Numeric reading of a record value; ``None`` when it has none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def _to_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


@dataclasses.dataclass(frozen=True)
class SelectValue:
    """Single choice. ``"all"`` and ``""`` are both inactive and so match every record."""

    value: str = ALL

    @property
    def is_active(self) -> bool:
        return self.value not in (ALL, "")

    def matches(self, item_value: Any) -> bool:
        return not self.is_active or item_value == self.value

    def display(self, options: tuple[FilterOption, ...] = ()) -> str:
        return _option_label(options, self.value)

    def to_raw(self) -> str:
        return self.value


def _selected(item_value: Any, selected: frozenset[str]) -> bool:
    # equality scan: record values may be unhashable
    return any(item_value == s for s in selected)


@dataclasses.dataclass(frozen=True)
class MultiSelectValue:
    values: frozenset[str] = frozenset()

    @property
    def is_active(self) -> bool:
        return bool(self.values)

    def matches(self, item_value: Any) -> bool:
        if not self.values:
            return True
        if is_collection(item_value):
            return any(_selected(v, self.values) for v in item_value)
        return _selected(item_value, self.values)

    def display(self, options: tuple[FilterOption, ...] = ()) -> str:
        if not self.values:
            return ""
        if len(self.values) == 1:
            return _option_label(options, next(iter(self.values)))
        return f"{len(self.values)} selected"

    def to_raw(self) -> list[str]:
        return sorted(self.values)


@dataclasses.dataclass(frozen=True)
class BooleanValue:
    value: bool = False

    @property
    def is_active(self) -> bool:
        return self.value

    def matches(self, item_value: Any) -> bool:
        return not self.value or item_value is True

    def display(self, options: tuple[FilterOption, ...] = ()) -> str:  # noqa: ARG002
        return "Yes" if self.value else "No"

    def to_raw(self) -> bool:
        return self.value


@dataclasses.dataclass(frozen=True)
class DateValue:
    value: date | None = None

    @property
    def is_active(self) -> bool:
        return self.value is not None

    def matches(self, item_value: Any) -> bool:
        if self.value is None:
            return True
        return _to_date(item_value) == self.value

    def display(self, options: tuple[FilterOption, ...] = ()) -> str:  # noqa: ARG002
        if self.value is None:
            return ""
        return f"{self.value:%b} {self.value.day}, {self.value.year}"

    def to_raw(self) -> str | None:
        return self.value.isoformat() if self.value is not None else None


@dataclasses.dataclass(frozen=True)
class RangeValue:
    min: float | None = None
    max: float | None = None

    @property
    def is_active(self) -> bool:
        return self.min is not None or self.max is not None

    def matches(self, item_value: Any) -> bool:
        if not self.is_active:
            return True
        number = _to_number(item_value)
        if number is None:
            return True
        if self.min is not None and number < self.min:
            return False
        if self.max is not None and number > self.max:
            return False
        return True

    def display(self, options: tuple[FilterOption, ...] = ()) -> str:  # noqa: ARG002
        if self.min is not None and self.max is not None:
            return f"{_format_number(self.min)} - {_format_number(self.max)}"
        if self.min is not None:
            return f"≥ {_format_number(self.min)}"
        if self.max is not None:
            return f"≤ {_format_number(self.max)}"
        return ""

    def to_raw(self) -> dict[str, float | None]:
        return {"min": self.min, "max": self.max}


FilterValue = Union[SelectValue, MultiSelectValue, BooleanValue, DateValue, RangeValue]

_VARIANTS: dict[FilterType, type] = {
    FilterType.SELECT: SelectValue,
    FilterType.MULTISELECT: MultiSelectValue,
    FilterType.BOOLEAN: BooleanValue,
    FilterType.DATE: DateValue,
    FilterType.RANGE: RangeValue,
}


def inactive_value(filter_type: FilterType) -> FilterValue:
    """The value under which a filter of *filter_type* restricts nothing."""
    return _VARIANTS[filter_type]()


def _range_bound(filter_type: FilterType, raw: Any, bound: Any) -> float | None:
    if bound is None:
        return None
    number = _to_number(bound)
    if number is None:
        raise InvalidFilterValueError(filter_type.value, raw, f"range bound {bound!r} is not numeric")
    return number


def coerce_value(filter_type: FilterType, raw: Any) -> FilterValue:  # noqa: PLR0911, PLR0912
    """Turn *raw* into the variant for *filter_type*.

    Already-typed values pass through; a variant of another type is rejected.
    """
    expected = _VARIANTS[filter_type]
    if isinstance(raw, expected):
        return raw
    if isinstance(raw, tuple(_VARIANTS.values())):
        raise InvalidFilterValueError(filter_type.value, raw, f"expected {expected.__name__}")

    match filter_type:
        case FilterType.SELECT:
            if raw is None:
                return SelectValue()
            if isinstance(raw, str):
                return SelectValue(raw)
            raise InvalidFilterValueError(filter_type.value, raw, "expected a string")

        case FilterType.MULTISELECT:
            if raw is None:
                return MultiSelectValue()
            if isinstance(raw, str):
                return MultiSelectValue(frozenset({raw}))
            if is_collection(raw) and all(isinstance(v, str) for v in raw):
                return MultiSelectValue(frozenset(raw))
            raise InvalidFilterValueError(filter_type.value, raw, "expected a string or a collection of strings")

        case FilterType.BOOLEAN:
            if raw is None:
                return BooleanValue()
            if isinstance(raw, bool):
                return BooleanValue(raw)
            raise InvalidFilterValueError(filter_type.value, raw, "expected a bool")

        case FilterType.DATE:
            if raw is None or raw == "":
                return DateValue()
            parsed = _to_date(raw)
            if parsed is None:
                raise InvalidFilterValueError(filter_type.value, raw, "expected a date or ISO-8601 string")
            return DateValue(parsed)

        case FilterType.RANGE:
            if raw is None:
                return RangeValue()
            if isinstance(raw, Mapping):
                low, high = raw.get("min"), raw.get("max")
            elif isinstance(raw, (tuple, list)) and len(raw) == 2:
                low, high = raw
            else:
                raise InvalidFilterValueError(filter_type.value, raw, "expected {'min', 'max'} or a (min, max) pair")
            return RangeValue(
                _range_bound(filter_type, raw, low),
                _range_bound(filter_type, raw, high),
            )

    raise InvalidFilterValueError(str(filter_type), raw, "unknown filter type")
