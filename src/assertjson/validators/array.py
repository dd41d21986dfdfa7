"""Validators for JSON arrays."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from assertjson.matcher.matcher import Matcher
from assertjson.models.errors import ValidationError
from assertjson.models.expectation import ArrayExpectation, Expectation, expect
from assertjson.models.validator import Validator
from assertjson.models.value import JsonArray, SpannedValue
from assertjson.validators.base import ExpectationValidator


def array(items: Iterable[Any], strict: bool | None = None) -> Validator:
    """Exactly these elements, in order. Items may be values or validators."""
    expected = ArrayExpectation(items=tuple(expect(item) for item in items))
    return ExpectationValidator(expected, strict=strict)


def array_size(expected_size: int) -> Validator:
    """An array of ``expected_size`` elements of any kind."""
    return ArraySizeValidator(expected_size)


def array_empty() -> Validator:
    return ArraySizeValidator(0)


def array_for_each(item: Any, strict: bool | None = None) -> Validator:
    """Every element must satisfy ``item``; the first failing element is reported."""
    return ArrayForEachValidator(expect(item), strict=strict)


class ArraySizeValidator(Validator):
    def __init__(self, expected_size: int) -> None:
        self.expected_size = expected_size

    def validate(self, value: SpannedValue) -> ValidationError | None:
        if not isinstance(value, JsonArray):
            return ValidationError.invalid_type(value.span, "array", value.kind)
        if len(value) != self.expected_size:
            return ValidationError.length_mismatch(value.span, self.expected_size, len(value))
        return None


class ArrayForEachValidator(Validator):
    def __init__(self, item: Expectation, strict: bool | None = None) -> None:
        self.item = item
        self.strict = strict

    def validate(self, value: SpannedValue) -> ValidationError | None:
        if not isinstance(value, JsonArray):
            return ValidationError.invalid_type(value.span, "array", value.kind)
        matcher = Matcher(strict=self.strict)
        for index, element in enumerate(value.items):
            errors: list[ValidationError] = []
            matcher.visit(self.item, element, f"[{index}]", errors)
            if errors:
                return errors[0]
        return None
