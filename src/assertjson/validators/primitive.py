"""Type-and-predicate validators for scalar JSON values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from assertjson.models.errors import ValidationError
from assertjson.models.validator import Validator
from assertjson.models.value import (
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonString,
    SpannedValue,
)
from assertjson.validators.base import Predicate

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

# Returned by an extractor when the value is not of the wanted kind.
_NO_MATCH = object()


def _accept(_: Any) -> str | None:
    return None


class PrimitiveValidator(Validator):
    """Extracts a typed value, then applies a predicate to it.

    A value the extractor rejects is an invalid type; a predicate message is
    reported as a custom error on the same span.
    """

    def __init__(
        self,
        typename: str,
        extract: Callable[[SpannedValue], Any],
        predicate: Predicate | None = None,
    ) -> None:
        self.typename = typename
        self.extract = extract
        self.predicate = predicate or _accept

    def validate(self, value: SpannedValue) -> ValidationError | None:
        extracted = self.extract(value)
        if extracted is _NO_MATCH:
            return ValidationError.invalid_type(value.span, self.typename, value.kind)
        message = self.predicate(extracted)
        if message is not None:
            return ValidationError.custom(value.span, message)
        return None


def _as_string(value: SpannedValue) -> Any:
    return value.value if isinstance(value, JsonString) else _NO_MATCH


def _as_null(value: SpannedValue) -> Any:
    return None if isinstance(value, JsonNull) else _NO_MATCH


def _as_bool(value: SpannedValue) -> Any:
    return value.value if isinstance(value, JsonBool) else _NO_MATCH


def _as_number(value: SpannedValue) -> Any:
    return value.value if isinstance(value, JsonNumber) else _NO_MATCH


def _as_float(value: SpannedValue) -> Any:
    # Parsed from the spelling, so out-of-range literals become inf.
    return float(value.raw) if isinstance(value, JsonNumber) else _NO_MATCH


def _integer_in(low: int, high: int) -> Callable[[SpannedValue], Any]:
    def extract(value: SpannedValue) -> Any:
        if isinstance(value, JsonNumber) and value.is_integer and low <= value.value <= high:
            return value.value
        return _NO_MATCH

    return extract


def string(predicate: Predicate | None = None) -> Validator:
    return PrimitiveValidator("string", _as_string, predicate)


def null() -> Validator:
    return PrimitiveValidator("null", _as_null)


def boolean(predicate: Predicate | None = None) -> Validator:
    return PrimitiveValidator("bool", _as_bool, predicate)


def bool_true() -> Validator:
    return boolean(lambda v: None if v else "value not true")


def bool_false() -> Validator:
    return boolean(lambda v: None if not v else "value not false")


def number(predicate: Predicate | None = None) -> Validator:
    """Any number, integral or not, passed to ``predicate`` as written."""
    return PrimitiveValidator("number", _as_number, predicate)


def u64(predicate: Predicate | None = None) -> Validator:
    """An integer literal in ``[0, 2**64)``. ``5.0`` does not qualify."""
    return PrimitiveValidator("unsigned integer", _integer_in(0, _U64_MAX), predicate)


def i64(predicate: Predicate | None = None) -> Validator:
    """An integer literal in the signed 64-bit range."""
    return PrimitiveValidator("integer", _integer_in(_I64_MIN, _I64_MAX), predicate)


def f64(predicate: Predicate | None = None) -> Validator:
    """Any number, passed to ``predicate`` as a float."""
    return PrimitiveValidator("number", _as_float, predicate)
