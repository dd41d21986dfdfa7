"""Domain models: spanned JSON values, expectations, and located errors."""

from assertjson.models.errors import (
    ErrorKind,
    ParseError,
    Span,
    ValidationError,
    ValidationResult,
)
from assertjson.models.expectation import (
    ArrayExpectation,
    Expectation,
    LiteralExpectation,
    ObjectExpectation,
    ValidatorExpectation,
    expect,
)
from assertjson.models.validator import Validator
from assertjson.models.value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    ObjectMember,
    SpannedValue,
)

__all__ = [
    "ArrayExpectation",
    "ErrorKind",
    "Expectation",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "LiteralExpectation",
    "ObjectExpectation",
    "ObjectMember",
    "ParseError",
    "Span",
    "SpannedValue",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "ValidatorExpectation",
    "expect",
]
