"""Validators for JSON objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from assertjson.models.expectation import ObjectExpectation, expect
from assertjson.models.validator import Validator
from assertjson.validators.base import ExpectationValidator


def _entries(entries: Mapping[str, Any]) -> dict[str, Any]:
    return {key: expect(value) for key, value in entries.items()}


def object(entries: Mapping[str, Any]) -> Validator:  # noqa: A001
    """Named members must match; other members are ignored."""
    return ExpectationValidator(ObjectExpectation(entries=_entries(entries), strict=False))


def object_strict(entries: Mapping[str, Any]) -> Validator:
    """Named members must match and no other member may be present."""
    return ExpectationValidator(ObjectExpectation(entries=_entries(entries), strict=True))
