"""Expectation tree: what a JSON document is declared to look like."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from assertjson.models.validator import Validator
from assertjson.models.value import type_name


@dataclass(frozen=True)
class LiteralExpectation:
    """An exact value: None, bool, int, float, str, or a list/dict of those.

    Container literals mean exact equality, including no extra object keys.
    """

    value: Any

    def __post_init__(self) -> None:
        _check_literal(self.value)

    @property
    def kind(self) -> str:
        return type_name(self.value)


@dataclass(frozen=True)
class ArrayExpectation:
    """An array of exactly ``len(items)`` elements, matched positionally."""

    items: tuple[Expectation, ...] = ()


@dataclass(frozen=True)
class ObjectExpectation:
    """Named expectations for object members.

    ``strict=None`` defers to the matcher's configured default.
    """

    entries: Mapping[str, Expectation] = field(default_factory=dict)
    strict: bool | None = None


@dataclass(frozen=True)
class ValidatorExpectation:
    """Delegates the check for one node to a pluggable ``Validator``."""

    validator: Validator


# The union of all expectation node types.
Expectation = LiteralExpectation | ArrayExpectation | ObjectExpectation | ValidatorExpectation

_EXPECTATION_TYPES = (LiteralExpectation, ArrayExpectation, ObjectExpectation, ValidatorExpectation)


def _check_literal(value: Any) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, got {type(key).__name__}")
            _check_literal(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_literal(item)
    else:
        type_name(value)


def expect(value: Any) -> Expectation:
    """Build an expectation tree from plain Python values.

    Dicts become non-strict object expectations, lists and tuples become
    array expectations, validators are wrapped, and scalars become literals.
    Existing expectation nodes pass through unchanged.
    """
    if isinstance(value, _EXPECTATION_TYPES):
        return value
    if isinstance(value, Validator):
        return ValidatorExpectation(validator=value)
    if isinstance(value, Mapping):
        entries: dict[str, Expectation] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, got {type(key).__name__}")
            entries[key] = expect(item)
        return ObjectExpectation(entries=entries)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return ArrayExpectation(items=tuple(expect(item) for item in value))
    return LiteralExpectation(value=value)
