"""Lockstep comparison of a spanned JSON tree against an expectation tree."""

from __future__ import annotations

import logging
from typing import Any

from assertjson.models.errors import ValidationError
from assertjson.models.expectation import (
    ArrayExpectation,
    Expectation,
    LiteralExpectation,
    ObjectExpectation,
    ValidatorExpectation,
    expect,
)
from assertjson.models.value import (
    JsonArray,
    JsonObject,
    SpannedValue,
    describe,
    to_json_text,
)
from assertjson.settings import get_settings

logger = logging.getLogger("assertjson.matcher")


def _key_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


class Matcher:
    """Walks an expectation tree and the actual value tree together.

    Errors are collected, never raised. A type mismatch on a node stops
    descent into that node; sibling mismatches are all reported.
    ``strict`` controls whether object keys absent from the expectation are
    reported; ``None`` uses the configured default.
    """

    def __init__(self, strict: bool | None = None) -> None:
        self.strict = get_settings().strict_objects if strict is None else strict

    def validate(self, actual: SpannedValue, expected: Any) -> list[ValidationError]:
        """Return every mismatch between ``actual`` and ``expected`` (empty = pass)."""
        errors: list[ValidationError] = []
        self.visit(expect(expected), actual, "", errors)
        logger.debug("validate finished with %d error(s)", len(errors))
        return errors

    def visit(
        self,
        expected: Expectation,
        actual: SpannedValue,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        """Dispatch to the appropriate visit_* method."""
        name = type(expected).__name__.removesuffix("Expectation").lower()
        method = getattr(self, f"visit_{name}", self.generic_visit)
        method(expected, actual, path, errors)

    def generic_visit(
        self,
        expected: Any,
        actual: SpannedValue,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        raise TypeError(f"Unsupported expectation node: {type(expected).__name__}")

    @staticmethod
    def _report(errors: list[ValidationError], error: ValidationError, path: str) -> None:
        if error.path is None and path:
            error = error.model_copy(update={"path": path})
        errors.append(error)

    def visit_literal(
        self,
        expected: LiteralExpectation,
        actual: SpannedValue,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        kind = expected.kind
        if actual.kind != kind:
            self._report(errors, ValidationError.invalid_type(actual.span, kind, actual.kind), path)
            return
        value = expected.value
        if kind == "array":
            items = tuple(LiteralExpectation(value=item) for item in value)
            self.visit_array(ArrayExpectation(items=items), actual, path, errors)
        elif kind == "object":
            entries = {key: LiteralExpectation(value=item) for key, item in value.items()}
            self.visit_object(ObjectExpectation(entries=entries, strict=True), actual, path, errors)
        elif actual.to_python() != value:
            self._report(
                errors,
                ValidationError.invalid_value(actual.span, to_json_text(value), describe(actual)),
                path,
            )

    def visit_array(
        self,
        expected: ArrayExpectation,
        actual: SpannedValue,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        if not isinstance(actual, JsonArray):
            self._report(errors, ValidationError.invalid_type(actual.span, "array", actual.kind), path)
            return
        if len(actual) != len(expected.items):
            self._report(
                errors,
                ValidationError.length_mismatch(actual.span, len(expected.items), len(actual)),
                path,
            )
            return
        for index, (item_expected, item) in enumerate(zip(expected.items, actual.items)):
            self.visit(item_expected, item, _index_path(path, index), errors)

    def visit_object(
        self,
        expected: ObjectExpectation,
        actual: SpannedValue,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        if not isinstance(actual, JsonObject):
            self._report(errors, ValidationError.invalid_type(actual.span, "object", actual.kind), path)
            return
        for key, entry in expected.entries.items():
            value = actual.get(key)
            if value is None:
                self._report(errors, ValidationError.missing_key(actual.span, key), path)
            else:
                self.visit(entry, value, _key_path(path, key), errors)

        strict = self.strict if expected.strict is None else expected.strict
        if strict:
            for member in actual.members:
                if member.key not in expected.entries:
                    self._report(
                        errors,
                        ValidationError.unexpected_key(member.key_span, member.key),
                        _key_path(path, member.key),
                    )

    def visit_validator(
        self,
        expected: ValidatorExpectation,
        actual: SpannedValue,
        path: str,
        errors: list[ValidationError],
    ) -> None:
        error = expected.validator.validate(actual)
        if error is None:
            return
        if not actual.span.contains(error.span):
            logger.warning(
                "%s returned an error at %s outside the validated value at %s",
                type(expected.validator).__name__,
                error.span.as_tuple(),
                actual.span.as_tuple(),
            )
        if error.path is not None and path:
            # Paths from nested matching are relative to the validated node.
            sep = "" if error.path.startswith("[") else "."
            error = error.model_copy(update={"path": f"{path}{sep}{error.path}"})
        self._report(errors, error, path)


def validate(
    actual: SpannedValue,
    expected: Any,
    *,
    strict: bool | None = None,
) -> list[ValidationError]:
    """Compare ``actual`` with ``expected``; an empty list means it matches.

    ``expected`` may be an expectation tree or plain Python values, which
    are converted with ``expect``.
    """
    return Matcher(strict=strict).validate(actual, expected)
