"""Built-in validators usable anywhere in an expectation tree."""

from assertjson.models.validator import And, Validator
from assertjson.validators.array import array, array_empty, array_for_each, array_size
from assertjson.validators.base import (
    ExpectationValidator,
    FunctionValidator,
    any_,
    custom,
    eq,
)
from assertjson.validators.object import object, object_strict  # noqa: A004
from assertjson.validators.primitive import (
    PrimitiveValidator,
    bool_false,
    bool_true,
    boolean,
    f64,
    i64,
    null,
    number,
    string,
    u64,
)

__all__ = [
    "And",
    "ExpectationValidator",
    "FunctionValidator",
    "PrimitiveValidator",
    "Validator",
    "any_",
    "array",
    "array_empty",
    "array_for_each",
    "array_size",
    "bool_false",
    "bool_true",
    "boolean",
    "custom",
    "eq",
    "f64",
    "i64",
    "null",
    "number",
    "object",
    "object_strict",
    "string",
    "u64",
]
