"""
Schema operations for runval.

Provides validate(), infer_type() and to_pydantic() functions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from typing import Optional as TypingOptional
from typing import Union

from pydantic import create_model
from typing_extensions import NotRequired, TypedDict, get_type_hints, is_typeddict

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
from .types import ValidationResult

_PRIMITIVE_TYPES: dict[str, type] = {
    "number": float,
    "string": str,
    "boolean": bool,
}


def validate(data: Any, schema: Schema | Any) -> ValidationResult[Any]:
    """
    Validate data against a schema.

    Args:
        data: The value to validate
        schema: A Schema, or shorthand accepted by to_schema()

    Returns:
        Success(data) if validation passes
        Failure(SchemaError) describing the first violation otherwise

    Usage:
        schema = {
            "name": str,
            "email": Optional(str),
            "scores": [float],
        }
        result = validate({"name": "Alice", "scores": [1, 2.5]}, schema)
    """
    return to_schema(schema).validate(data)


def infer_type(schema: Schema | Any, name: str = "Object") -> Any:
    """
    Derive the Python type of the values a schema accepts.

    Args:
        schema: A Schema, or shorthand accepted by to_schema()
        name: Name for the generated TypedDict of an object schema; nested
              objects are named "<name>_<field>"

    Returns:
        A typing annotation usable in signatures or with pydantic.TypeAdapter

    Mapping:
        Number() -> float, String() -> str, Boolean() -> bool
        Object({...}) -> TypedDict (Optional fields are NotRequired[T | None])
        Array(s) -> list[T]
        Tuple(a, b) -> tuple[A, B]
        Optional(s) -> T | None
        Or(a, b) -> A | B
        And(a, b) -> merged TypedDict for two objects, otherwise A
    """
    schema = to_schema(schema)

    match schema:
        case PrimitiveSchema(kind=kind):
            return _PRIMITIVE_TYPES[kind]
        case ObjectSchema(fields=fields):
            return _typed_dict(name, fields)
        case ArraySchema(items=items):
            return list[infer_type(items, name)]  # type: ignore[misc]
        case TupleSchema(items=items):
            return tuple[tuple(infer_type(s, name) for s in items)]  # type: ignore[misc]
        case OptionalSchema(inner=inner):
            return TypingOptional[infer_type(inner, name)]
        case OrSchema(left=left, right=right):
            return Union[
                infer_type(left, f"{name}_left"), infer_type(right, f"{name}_right")
            ]
        case AndSchema(left=left, right=right):
            left_t = infer_type(left, f"{name}_left")
            right_t = infer_type(right, f"{name}_right")
            if is_typeddict(left_t) and is_typeddict(right_t):
                return _merge_typed_dicts(name, left_t, right_t)
            # No general intersection in Python typing
            return left_t

    raise TypeError(f"Cannot infer a type for {type(schema).__name__}")


def _typed_dict(name: str, fields: Mapping[str, Schema]) -> Any:
    annotations: dict[str, Any] = {}
    for key, field in fields.items():
        field_t = infer_type(field, f"{name}_{key}")
        if isinstance(field, OptionalSchema):
            field_t = NotRequired[field_t]
        annotations[key] = field_t
    return TypedDict(name, annotations)  # type: ignore[operator]


def _merge_typed_dicts(name: str, left: Any, right: Any) -> Any:
    annotations: dict[str, Any] = {}
    for td in (left, right):
        for key, field_t in get_type_hints(td).items():
            if key in annotations:
                continue
            if key in td.__optional_keys__:
                field_t = NotRequired[field_t]
            annotations[key] = field_t
    return TypedDict(name, annotations)  # type: ignore[operator]


def to_pydantic(name: str, schema: Schema | dict[str, Any]) -> type:
    """
    Compile an object schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: An Object schema, or a dict of field schemas

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", Object({
            "name": String(),
            "email": Optional(String()),
        }))
        user = User(name="Alice")
    """
    validator = to_schema(schema)
    if not isinstance(validator, ObjectSchema):
        raise TypeError("Schema must be an object schema")

    fields: dict[str, Any] = {}

    for key, field in validator.fields.items():
        fields[key] = _extract_pydantic_field(field, f"{name}_{key}")

    return create_model(name, **fields)


def _extract_pydantic_field(field: Schema, name: str) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a field schema."""
    if isinstance(field, OptionalSchema):
        return (TypingOptional[infer_type(field.inner, name)], None)
    return (infer_type(field, name), ...)
