"""
Core schema classes for runval.

Provides the Schema base and the immutable node dataclasses that every
constructor returns, plus to_schema() for coercing shorthand into nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeGuard, TypeVar

from .context import index_paths_enabled
from .types import (
    UNDEFINED,
    Failure,
    SchemaError,
    ValidationResult,
    failure,
    kind_of,
    success,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Schema(Generic[T]):
    """
    Base class of every schema node.

    Subclasses implement validate(); everything else is derived from it.
    Schemas are immutable and may be shared by any number of parents, but
    must not reference themselves, directly or transitively.
    """

    __slots__ = ()

    def validate(self, value: Any) -> ValidationResult[T]:
        raise NotImplementedError

    def is_valid(self, value: Any) -> TypeGuard[T]:
        """Boolean view of validate(): True iff the value is accepted."""
        return self.validate(value).is_ok()

    def __or__(self, other: Schema | type | Any) -> OrSchema:
        """
        Accept values matching either side.

        Usage:
            String() | Number()
            str | Number()
        """
        return OrSchema(left=self, right=to_schema(other))

    def __ror__(self, other: type | Any) -> OrSchema:
        return OrSchema(left=to_schema(other), right=self)

    def __and__(self, other: Schema | type | Any) -> AndSchema:
        """
        Accept values matching both sides.

        Usage:
            Object({"id": Number()}) & Object({"name": String()})
        """
        return AndSchema(left=self, right=to_schema(other))

    def __rand__(self, other: type | Any) -> AndSchema:
        return AndSchema(left=to_schema(other), right=self)


@dataclass(frozen=True, slots=True)
class PrimitiveSchema(Schema[Any]):
    """Leaf schema accepting exactly one runtime kind (number, string, boolean)."""

    kind: str

    def validate(self, value: Any) -> ValidationResult[Any]:
        actual = kind_of(value)
        if actual != self.kind:
            return failure(
                SchemaError(
                    f"Invalid primitive. Expected {self.kind}, but got {actual}"
                )
            )
        return success(value)


@dataclass(frozen=True, slots=True)
class ObjectSchema(Schema[Any]):
    """
    Schema for mappings with declared fields.

    Fields are checked in declaration order and the first failing field is
    reported. Undeclared keys are allowed and kept in the result.
    """

    fields: Mapping[str, Schema]

    def __post_init__(self) -> None:
        # Read-only copy of the caller's mapping
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash(tuple(self.fields.items()))

    def validate(self, value: Any) -> ValidationResult[Any]:
        actual = kind_of(value)
        if actual != "object":
            return failure(SchemaError(f"Expected an object, got: '{actual}'"))

        for key, schema in self.fields.items():
            result = schema.validate(value.get(key, UNDEFINED))
            if isinstance(result, Failure):
                err = result.error
                logger.debug("field %r failed: %s", key, err.message)
                return failure(
                    err.wrap(
                        key, f"Got invalid type for field '{key}': '{err.message}'"
                    )
                )

        return success(value)


def _element_failure(index: int, err: SchemaError) -> Failure:
    if not index_paths_enabled():
        return failure(err)
    return failure(
        err.wrap(index, f"Got invalid type for index {index}: '{err.message}'")
    )


@dataclass(frozen=True, slots=True)
class ArraySchema(Schema[Any]):
    """Schema for homogeneous sequences (list or tuple)."""

    items: Schema

    def validate(self, value: Any) -> ValidationResult[Any]:
        actual = kind_of(value)
        if actual != "array":
            return failure(SchemaError(f"Expected an array, got: '{actual}'"))

        for i, item in enumerate(value):
            result = self.items.validate(item)
            if isinstance(result, Failure):
                return _element_failure(i, result.error)

        return success(value)


@dataclass(frozen=True, slots=True)
class TupleSchema(Schema[Any]):
    """Schema for fixed-length sequences with one schema per position."""

    items: tuple[Schema, ...]

    def validate(self, value: Any) -> ValidationResult[Any]:
        actual = kind_of(value)
        if actual != "array":
            return failure(SchemaError(f"Expected a tuple, got: '{actual}'"))

        if len(value) != len(self.items):
            return failure(
                SchemaError(
                    f"Tuple does not have expected length {len(self.items)}, "
                    f"got: '{len(value)}'"
                )
            )

        for i, (schema, item) in enumerate(zip(self.items, value)):
            result = schema.validate(item)
            if isinstance(result, Failure):
                return _element_failure(i, result.error)

        return success(value)


@dataclass(frozen=True, slots=True)
class OptionalSchema(Schema[Any]):
    """Accepts UNDEFINED and None as-is; everything else goes to `inner`."""

    inner: Schema

    def validate(self, value: Any) -> ValidationResult[Any]:
        if value is UNDEFINED or value is None:
            return success(value)
        return self.inner.validate(value)


@dataclass(frozen=True, slots=True)
class OrSchema(Schema[Any]):
    """Union: left is tried first, then right."""

    left: Schema
    right: Schema

    def validate(self, value: Any) -> ValidationResult[Any]:
        left = self.left.validate(value)
        if not isinstance(left, Failure):
            return success(value)

        right = self.right.validate(value)
        if not isinstance(right, Failure):
            return success(value)

        message = (
            f"Failed or case. Left: {left.error.message}, "
            f"Right: {right.error.message}"
        )
        logger.debug(message)
        return failure(SchemaError(message))


@dataclass(frozen=True, slots=True)
class AndSchema(Schema[Any]):
    """Intersection: both sides always run so every violation is reported."""

    left: Schema
    right: Schema

    def validate(self, value: Any) -> ValidationResult[Any]:
        results = (self.left.validate(value), self.right.validate(value))
        errors = [r.error for r in results if isinstance(r, Failure)]
        if not errors:
            return success(value)

        message = "Failed and case. " + ", ".join(e.message for e in errors)
        logger.debug(message)
        return failure(SchemaError(message, errors[0].path))


def to_schema(v: Any) -> Schema:
    """
    Coerce a value to a schema.

    Conversion rules:
        Schema -> pass through
        bool -> boolean primitive
        int | float -> number primitive
        str -> string primitive
        dict -> ObjectSchema with recursive conversion
        [x] -> ArraySchema with item schema from x
        (a, b, ...) -> TupleSchema with one schema per element
    """
    if isinstance(v, Schema):
        return v

    if isinstance(v, type):
        # bool first: bool subclasses int
        if issubclass(v, bool):
            return PrimitiveSchema("boolean")
        if issubclass(v, (int, float)):
            return PrimitiveSchema("number")
        if issubclass(v, str):
            return PrimitiveSchema("string")
        raise TypeError(f"No primitive schema for type {v.__name__}")

    if isinstance(v, dict):
        fields: dict[str, Schema] = {}
        for key, val in v.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"Object field names must be str, got {type(key).__name__}"
                )
            fields[key] = to_schema(val)
        return ObjectSchema(fields=fields)

    if isinstance(v, list):
        if len(v) != 1:
            raise ValueError("List shorthand takes exactly one item schema")
        return ArraySchema(items=to_schema(v[0]))

    if isinstance(v, tuple):
        if len(v) == 0:
            raise ValueError("Tuple schema needs at least one element schema")
        return TupleSchema(items=tuple(to_schema(s) for s in v))

    raise TypeError(f"Cannot convert {type(v).__name__} to schema")
