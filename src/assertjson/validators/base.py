"""Validator adapters shared by the built-in validators."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from assertjson.matcher.matcher import Matcher
from assertjson.models.errors import ValidationError
from assertjson.models.expectation import Expectation, LiteralExpectation, expect
from assertjson.models.validator import Validator
from assertjson.models.value import SpannedValue

# A predicate returns None when the value is acceptable, else a failure message.
Predicate = Callable[[Any], str | None]


class FunctionValidator(Validator):
    """Adapts a plain callable to the ``Validator`` contract."""

    def __init__(self, func: Callable[[SpannedValue], ValidationError | None]) -> None:
        self.func = func

    def validate(self, value: SpannedValue) -> ValidationError | None:
        return self.func(value)


class ExpectationValidator(Validator):
    """Runs a nested expectation tree and reports its first mismatch."""

    def __init__(self, expected: Any, strict: bool | None = None) -> None:
        self.expected: Expectation = expect(expected)
        self.strict = strict

    def validate(self, value: SpannedValue) -> ValidationError | None:
        errors = Matcher(strict=self.strict).validate(value, self.expected)
        return errors[0] if errors else None


class AnyValidator(Validator):
    def validate(self, value: SpannedValue) -> ValidationError | None:
        return None


def any_() -> Validator:
    """Accept any value."""
    return AnyValidator()


def custom(func: Callable[[SpannedValue], ValidationError | None]) -> Validator:
    return FunctionValidator(func)


def eq(expected: Any) -> Validator:
    """Require a value exactly equal to ``expected`` (containers included)."""
    return ExpectationValidator(LiteralExpectation(value=expected))
