"""assertjson: check JSON text against declared expectations with located diagnostics."""

from assertjson.assertion import CheckOutcome, assert_json, check_json
from assertjson.diagnostics import DiagnosticRenderer, render
from assertjson.matcher import Matcher, validate
from assertjson.models import (
    ArrayExpectation,
    ErrorKind,
    Expectation,
    LiteralExpectation,
    ObjectExpectation,
    ParseError,
    Span,
    SpannedValue,
    ValidationError,
    ValidationResult,
    Validator,
    ValidatorExpectation,
    expect,
)
from assertjson.parser import JsonParser, parse

__version__ = "0.1.0"

__all__ = [
    "ArrayExpectation",
    "CheckOutcome",
    "DiagnosticRenderer",
    "ErrorKind",
    "Expectation",
    "JsonParser",
    "LiteralExpectation",
    "Matcher",
    "ObjectExpectation",
    "ParseError",
    "Span",
    "SpannedValue",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "ValidatorExpectation",
    "__version__",
    "assert_json",
    "check_json",
    "expect",
    "parse",
    "render",
    "validate",
]
