"""The pluggable validator contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from assertjson.models.errors import ValidationError
from assertjson.models.value import SpannedValue


class Validator(ABC):
    """Checks one JSON value where a literal or container cannot.

    ``validate`` returns ``None`` on success or a ``ValidationError`` whose
    span lies within ``value.span``. Implementations must not inspect
    anything outside the subtree rooted at ``value``.
    """

    @abstractmethod
    def validate(self, value: SpannedValue) -> ValidationError | None: ...

    def and_(self, other: Validator) -> Validator:
        """Chain two validators; the first failure wins."""
        return And(self, other)

    def __and__(self, other: Validator) -> Validator:
        return self.and_(other)


class And(Validator):
    def __init__(self, first: Validator, second: Validator) -> None:
        self.first = first
        self.second = second

    def validate(self, value: SpannedValue) -> ValidationError | None:
        error = self.first.validate(value)
        if error is not None:
            return error
        return self.second.validate(value)
