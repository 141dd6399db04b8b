"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from activity_search.application.filters import InvalidFilterConfigError, InvalidFilterValueError
from activity_search.application.search import DebouncerClosedError, InvalidThresholdError
from activity_search.config.validation import ConfigError, InvalidSettingValueError
from activity_search.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestValidationError:
    def test_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []

    def test_to_dict_includes_errors(self) -> None:
        err = ValidationError("bad", errors=[{"field": "x"}])
        assert err.to_dict()["errors"] == [{"field": "x"}]

    def test_is_domain_error(self) -> None:
        assert issubclass(ValidationError, DomainError)


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (InvalidFilterValueError, ValidationError),
            (InvalidFilterConfigError, ValidationError),
            (InvalidThresholdError, ValidationError),
            (DebouncerClosedError, ApplicationError),
            (ConfigError, ApplicationError),
            (InvalidSettingValueError, ConfigError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)
        assert issubclass(cls, BaseError)

    def test_invalid_filter_value_code_and_fields(self) -> None:
        err = InvalidFilterValueError("boolean", "yes", "expected a bool")
        assert err.code == "invalid_filter_value"
        assert err.filter_type == "boolean"
        assert err.value == "yes"
        assert "expected a bool" in err.message

    def test_invalid_threshold_code(self) -> None:
        err = InvalidThresholdError(1.5)
        assert err.code == "invalid_threshold"
        assert err.threshold == 1.5
