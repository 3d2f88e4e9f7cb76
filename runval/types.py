"""
Type definitions for runval.

Provides the Success/Failure result model, the SchemaError value, the
UNDEFINED sentinel for absent values, and runtime kind inspection.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class _Undefined(Enum):
    """Sentinel type for a value that is absent (e.g. a missing dict key)."""

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined.UNDEFINED


# Type aliases
Path = tuple[str | int, ...]


@dataclass(frozen=True, slots=True)
class SchemaError:
    """
    A single validation failure.

    `message` is the full composed message; `path` locates the offending
    value and grows as the failure is re-wrapped by enclosing schemas.
    """

    message: str
    path: Path = ()

    def __str__(self) -> str:
        return self.message

    def wrap(self, key: str | int, message: str) -> SchemaError:
        """Return a new error one level up, under `key`."""
        return SchemaError(message=message, path=(key, *self.path))


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful validation carrying the validated value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed validation carrying a single error."""

    error: SchemaError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


ValidationResult = Union[Success[T], Failure]


def success(value: T) -> Success[T]:
    return Success(value)


def failure(error: SchemaError) -> Failure:
    return Failure(error)


def kind_of(value: Any) -> str:
    """
    Name the runtime kind of a value.

    Kinds: undefined, null, boolean, number, string, array, object.
    Anything else reports its lowercased Python type name.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    # bool before number: bool subclasses int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__.lower()
