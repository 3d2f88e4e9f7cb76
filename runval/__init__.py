"""
runval - Composable runtime schema validation.

Usage:
    from runval import Array, Number, Object, Optional, String, validate

    schema = Object({
        "name": String(),
        "email": Optional(String()),
        "scores": Array(Number()),
    })

    result = schema.validate(data)
    if result.is_ok():
        user = result.value
    else:
        print(result.error.message)
"""

from .context import index_paths_enabled, validation_context
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
from .schema import infer_type, to_pydantic, validate
from .types import (
    UNDEFINED,
    Failure,
    SchemaError,
    Success,
    ValidationResult,
    failure,
    kind_of,
    success,
)
from .validators import (
    And,
    Array,
    Boolean,
    Number,
    Object,
    Optional,
    Or,
    String,
    Tuple,
)

__all__ = [
    # Result types
    "Success",
    "Failure",
    "ValidationResult",
    "success",
    "failure",
    "SchemaError",
    "UNDEFINED",
    "kind_of",
    # Core
    "Schema",
    "PrimitiveSchema",
    "ObjectSchema",
    "ArraySchema",
    "TupleSchema",
    "OptionalSchema",
    "OrSchema",
    "AndSchema",
    "to_schema",
    # Constructors
    "Number",
    "String",
    "Boolean",
    "Object",
    "Array",
    "Tuple",
    "Optional",
    "Or",
    "And",
    # Schema
    "validate",
    "infer_type",
    "to_pydantic",
    # Context
    "validation_context",
    "index_paths_enabled",
]
