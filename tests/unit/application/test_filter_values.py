"""Unit tests for typed filter values and coercion."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from activity_search.application.filters import (
    BooleanValue,
    DateValue,
    FilterOption,
    FilterType,
    InvalidFilterValueError,
    MultiSelectValue,
    RangeValue,
    SelectValue,
    coerce_value,
    inactive_value,
)

OPTIONS = (
    FilterOption("all", "All"),
    FilterOption("Workshop", "Workshops"),
    FilterOption("Competition", "Competitions"),
)


class TestInactiveDefaults:
    @pytest.mark.parametrize(
        ("filter_type", "expected"),
        [
            (FilterType.SELECT, SelectValue("all")),
            (FilterType.MULTISELECT, MultiSelectValue(frozenset())),
            (FilterType.BOOLEAN, BooleanValue(False)),
            (FilterType.DATE, DateValue(None)),
            (FilterType.RANGE, RangeValue(None, None)),
        ],
    )
    def test_inactive(self, filter_type: FilterType, expected: object) -> None:
        value = inactive_value(filter_type)
        assert value == expected
        assert value.is_active is False


class TestSelectValue:
    def test_all_matches_everything(self) -> None:
        assert SelectValue().matches("anything") is True
        assert SelectValue().matches(None) is True

    def test_empty_string_is_inactive(self) -> None:
        assert SelectValue("").is_active is False
        assert SelectValue("").matches("Workshop") is True

    def test_exact_match(self) -> None:
        v = SelectValue("Workshop")
        assert v.matches("Workshop") is True
        assert v.matches("workshop") is False

    def test_display_uses_option_label(self) -> None:
        assert SelectValue("Workshop").display(OPTIONS) == "Workshops"
        assert SelectValue("Seminar").display(OPTIONS) == "Seminar"


class TestMultiSelectValue:
    def test_scalar_item(self) -> None:
        v = MultiSelectValue(frozenset({"pending", "approved"}))
        assert v.matches("pending") is True
        assert v.matches("rejected") is False

    def test_list_item_intersection(self) -> None:
        v = MultiSelectValue(frozenset({"ai", "web"}))
        assert v.matches(["web", "mobile"]) is True
        assert v.matches(["mobile"]) is False
        assert v.matches([]) is False

    def test_empty_matches_everything(self) -> None:
        assert MultiSelectValue().matches("x") is True

    @pytest.mark.parametrize("item", [{"k": "v"}, [["a"]], [{"a": 1}]])
    def test_unhashable_item_is_a_non_match(self, item: object) -> None:
        assert MultiSelectValue(frozenset({"a"})).matches(item) is False

    def test_display(self) -> None:
        assert MultiSelectValue(frozenset({"Workshop"})).display(OPTIONS) == "Workshops"
        assert MultiSelectValue(frozenset({"a", "b", "c"})).display(OPTIONS) == "3 selected"
        assert MultiSelectValue().display(OPTIONS) == ""


class TestBooleanValue:
    def test_false_matches_everything(self) -> None:
        assert BooleanValue(False).matches(False) is True
        assert BooleanValue(False).matches(None) is True

    def test_true_requires_true(self) -> None:
        assert BooleanValue(True).matches(True) is True
        assert BooleanValue(True).matches(False) is False
        assert BooleanValue(True).matches(1) is False

    def test_display(self) -> None:
        assert BooleanValue(True).display() == "Yes"
        assert BooleanValue(False).display() == "No"


class TestDateValue:
    def test_same_calendar_day(self) -> None:
        v = DateValue(date(2024, 3, 5))
        assert v.matches(date(2024, 3, 5)) is True
        assert v.matches(datetime(2024, 3, 5, 23, 59)) is True
        assert v.matches("2024-03-05T10:15:00") is True
        assert v.matches("2024-03-05T10:15:00Z") is True
        assert v.matches("2024-03-06") is False

    def test_unparseable_item_does_not_match(self) -> None:
        v = DateValue(date(2024, 3, 5))
        assert v.matches("not a date") is False
        assert v.matches(None) is False
        assert v.matches(12345) is False

    def test_none_matches_everything(self) -> None:
        assert DateValue().matches("garbage") is True

    def test_display(self) -> None:
        assert DateValue(date(2024, 3, 5)).display() == "Mar 5, 2024"


class TestRangeValue:
    def test_bounds_inclusive(self) -> None:
        v = RangeValue(10, 20)
        assert v.matches(10) is True
        assert v.matches(20) is True
        assert v.matches(9.99) is False
        assert v.matches(20.5) is False

    def test_open_ended(self) -> None:
        assert RangeValue(min=5).matches(100) is True
        assert RangeValue(max=5).matches(100) is False

    def test_zero_bound_is_a_real_bound(self) -> None:
        assert RangeValue(min=0).is_active is True
        assert RangeValue(min=0).matches(-1) is False

    def test_numeric_strings(self) -> None:
        assert RangeValue(1, 3).matches("2.5") is True
        assert RangeValue(1, 3).matches("7") is False

    @pytest.mark.parametrize("item", ["n/a", None, [], {"credits": 4}, True, float("nan")])
    def test_non_numeric_always_passes(self, item: object) -> None:
        assert RangeValue(1, 3).matches(item) is True

    def test_display(self) -> None:
        assert RangeValue(10, 20).display() == "10 - 20"
        assert RangeValue(min=2.5).display() == "≥ 2.5"
        assert RangeValue(max=4).display() == "≤ 4"
        assert RangeValue().display() == ""


class TestCoerceValue:
    def test_passthrough(self) -> None:
        v = SelectValue("x")
        assert coerce_value(FilterType.SELECT, v) is v

    def test_wrong_variant_rejected(self) -> None:
        with pytest.raises(InvalidFilterValueError):
            coerce_value(FilterType.SELECT, BooleanValue(True))

    def test_select(self) -> None:
        assert coerce_value(FilterType.SELECT, "pending") == SelectValue("pending")
        assert coerce_value(FilterType.SELECT, None) == SelectValue("all")
        with pytest.raises(InvalidFilterValueError):
            coerce_value(FilterType.SELECT, 3)

    def test_multiselect(self) -> None:
        assert coerce_value(FilterType.MULTISELECT, ["a", "b", "a"]) == MultiSelectValue(frozenset({"a", "b"}))
        assert coerce_value(FilterType.MULTISELECT, "a") == MultiSelectValue(frozenset({"a"}))
        assert coerce_value(FilterType.MULTISELECT, []) == MultiSelectValue()
        with pytest.raises(InvalidFilterValueError):
            coerce_value(FilterType.MULTISELECT, [1, 2])

    def test_boolean(self) -> None:
        assert coerce_value(FilterType.BOOLEAN, True) == BooleanValue(True)
        with pytest.raises(InvalidFilterValueError):
            coerce_value(FilterType.BOOLEAN, "yes")

    def test_date(self) -> None:
        assert coerce_value(FilterType.DATE, "2024-01-15") == DateValue(date(2024, 1, 15))
        assert coerce_value(FilterType.DATE, datetime(2024, 1, 15, 8)) == DateValue(date(2024, 1, 15))
        assert coerce_value(FilterType.DATE, None) == DateValue()
        assert coerce_value(FilterType.DATE, "") == DateValue()
        with pytest.raises(InvalidFilterValueError):
            coerce_value(FilterType.DATE, "someday")

    def test_range(self) -> None:
        assert coerce_value(FilterType.RANGE, {"min": 1, "max": None}) == RangeValue(1.0, None)
        assert coerce_value(FilterType.RANGE, (None, "4")) == RangeValue(None, 4.0)
        assert coerce_value(FilterType.RANGE, None) == RangeValue()
        with pytest.raises(InvalidFilterValueError):
            coerce_value(FilterType.RANGE, {"min": "low"})
        with pytest.raises(InvalidFilterValueError):
            coerce_value(FilterType.RANGE, 5)


class TestToRaw:
    def test_round_trip_shapes(self) -> None:
        assert SelectValue("x").to_raw() == "x"
        assert MultiSelectValue(frozenset({"b", "a"})).to_raw() == ["a", "b"]
        assert BooleanValue(True).to_raw() is True
        assert DateValue(date(2024, 1, 2)).to_raw() == "2024-01-02"
        assert RangeValue(1, None).to_raw() == {"min": 1, "max": None}
