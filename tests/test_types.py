"""
Tests for runval.types: results, errors and runtime kinds.
"""

from collections import OrderedDict
from types import MappingProxyType

import pytest

from runval import UNDEFINED, Failure, SchemaError, Success, failure, kind_of, success


class TestResults:
    def test_success_wraps_value_unchanged(self):
        payload = {"a": [1, 2]}
        result = success(payload)
        assert isinstance(result, Success)
        assert result.value is payload
        assert result.is_ok()
        assert not result.is_err()

    def test_failure_wraps_error_unchanged(self):
        err = SchemaError("boom")
        result = failure(err)
        assert isinstance(result, Failure)
        assert result.error is err
        assert result.is_err()
        assert not result.is_ok()

    def test_results_compare_by_value(self):
        assert success(1) == Success(1)
        assert failure(SchemaError("x")) == Failure(SchemaError("x"))
        assert success(1) != failure(SchemaError("1"))

    def test_results_are_frozen(self):
        result = success(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]


class TestSchemaError:
    def test_str_is_message(self):
        assert str(SchemaError("bad value")) == "bad value"

    def test_default_path_is_empty(self):
        assert SchemaError("x").path == ()

    def test_wrap_prepends_key(self):
        inner = SchemaError("leaf", ("b",))
        outer = inner.wrap("a", "outer")
        assert outer.message == "outer"
        assert outer.path == ("a", "b")
        assert inner.path == ("b",)


class TestKindOf:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (UNDEFINED, "undefined"),
            (None, "null"),
            (True, "boolean"),
            (False, "boolean"),
            (0, "number"),
            (10**40, "number"),
            (1.5, "number"),
            (float("nan"), "number"),
            (float("-inf"), "number"),
            ("", "string"),
            ([], "array"),
            ((1, 2), "array"),
            ({}, "object"),
            (OrderedDict(a=1), "object"),
            (MappingProxyType({"a": 1}), "object"),
            (b"raw", "bytes"),
            ({1, 2}, "set"),
        ],
    )
    def test_kinds(self, value, kind):
        assert kind_of(value) == kind

    def test_undefined_is_not_none(self):
        assert UNDEFINED is not None
        assert repr(UNDEFINED) == "UNDEFINED"
