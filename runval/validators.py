"""
Schema constructors for runval.

Provides factory functions that return immutable schema nodes.
"""

from __future__ import annotations

from typing import Any

from .core import (
    AndSchema,
    ArraySchema,
    ObjectSchema,
    OptionalSchema,
    OrSchema,
    PrimitiveSchema,
    Schema,
    TupleSchema,
    to_schema,
)


def Number() -> PrimitiveSchema:
    """
    Accept any int or float (bool excluded), including nan and inf.

    Usage:
        Number().validate(3.5)       # Success(3.5)
        Number().validate("3.5")     # Failure(... Expected number, but got string)
    """
    return PrimitiveSchema("number")


def String() -> PrimitiveSchema:
    """Accept any str."""
    return PrimitiveSchema("string")


def Boolean() -> PrimitiveSchema:
    """Accept True or False."""
    return PrimitiveSchema("boolean")


def Object(fields: dict[str, Schema | Any]) -> ObjectSchema:
    """
    Validate a mapping field by field.

    Missing keys are handed to the field schema as UNDEFINED, so only
    Optional(...) fields may be absent. Extra keys are ignored and kept.

    Usage:
        Object({
            "name": String(),
            "email": Optional(String()),
            "tags": Array(String()),
        })
    """
    if not isinstance(fields, dict):
        raise TypeError(
            f"Object() expects a dict of fields, got {type(fields).__name__}"
        )
    return to_schema(fields)  # type: ignore[return-value]


def Array(items: Schema | Any) -> ArraySchema:
    """
    Validate every element of a list or tuple against one schema.

    Usage:
        Array(Number())
        Array(Object({"id": Number()}))
    """
    return ArraySchema(items=to_schema(items))


def Tuple(*items: Schema | Any) -> TupleSchema:
    """
    Validate a fixed-length sequence position by position.

    Usage:
        Tuple(Number(), String())    # accepts [1, "a"], rejects [1] and [1, "a", 2]
    """
    if not items:
        raise ValueError("Tuple() requires at least one element schema")
    return TupleSchema(items=tuple(to_schema(s) for s in items))


def Optional(inner: Schema | Any) -> OptionalSchema:
    """
    Allow UNDEFINED or None, validate if present.

    Usage:
        Optional(String())           # absent, None or a string
    """
    return OptionalSchema(inner=to_schema(inner))


def Or(left: Schema | Any, right: Schema | Any) -> OrSchema:
    """Accept values matching `left` or `right` (same as `left | right`)."""
    return OrSchema(left=to_schema(left), right=to_schema(right))


def And(left: Schema | Any, right: Schema | Any) -> AndSchema:
    """Accept values matching both `left` and `right` (same as `left & right`)."""
    return AndSchema(left=to_schema(left), right=to_schema(right))
