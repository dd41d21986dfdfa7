"""Structured validation errors with source span tracking."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator


class Span(BaseModel):
    """Half-open ``[start, end)`` offset range into the parsed source text."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @model_validator(mode="after")
    def _check_bounds(self) -> Span:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span ({self.start}, {self.end})")
        return self

    @property
    def width(self) -> int:
        return self.end - self.start

    def contains(self, other: Span) -> bool:
        return self.start <= other.start and other.end <= self.end

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


class ErrorKind(StrEnum):
    PARSE_ERROR = "parse_error"
    INVALID_TYPE = "invalid_type"
    INVALID_VALUE = "invalid_value"
    LENGTH_MISMATCH = "length_mismatch"
    MISSING_KEY = "missing_key"
    UNEXPECTED_KEY = "unexpected_key"
    CUSTOM = "custom"


class ValidationError(BaseModel):
    """A single located failure: what went wrong and where in the source."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    span: Span
    path: str | None = None
    expected: str | None = None
    actual: str | None = None

    @classmethod
    def invalid_type(cls, span: Span, expected: str, actual: str) -> ValidationError:
        return cls(
            kind=ErrorKind.INVALID_TYPE,
            message=f"Invalid type. Expected {expected} but got {actual}.",
            span=span,
            expected=expected,
            actual=actual,
        )

    @classmethod
    def invalid_value(cls, span: Span, expected: str, actual: str) -> ValidationError:
        return cls(
            kind=ErrorKind.INVALID_VALUE,
            message=f"Invalid value. Expected {expected} but got {actual}.",
            span=span,
            expected=expected,
            actual=actual,
        )

    @classmethod
    def length_mismatch(cls, span: Span, expected: int, actual: int) -> ValidationError:
        return cls(
            kind=ErrorKind.LENGTH_MISMATCH,
            message=f"Invalid length. Expected {expected} elements but got {actual}.",
            span=span,
            expected=str(expected),
            actual=str(actual),
        )

    @classmethod
    def missing_key(cls, span: Span, key: str) -> ValidationError:
        return cls(
            kind=ErrorKind.MISSING_KEY,
            message=f"Missing key '{key}' in object",
            span=span,
            expected=key,
        )

    @classmethod
    def unexpected_key(cls, span: Span, key: str) -> ValidationError:
        return cls(
            kind=ErrorKind.UNEXPECTED_KEY,
            message=f"Key '{key}' is not expected in object",
            span=span,
            actual=key,
        )

    @classmethod
    def custom(cls, span: Span, message: str) -> ValidationError:
        return cls(kind=ErrorKind.CUSTOM, message=message, span=span)


class ValidationResult(BaseModel):
    """Result of checking one JSON document against an expectation."""

    valid: bool
    errors: list[ValidationError] = []


class ParseError(Exception):
    """Raised when the source text is not well-formed JSON.

    Carries the offset of the first unexpected character together with a
    description of what the parser expected there.
    """

    def __init__(self, offset: int, expected: str, found: str, end: int | None = None) -> None:
        self.offset = offset
        self.expected = expected
        self.found = found
        self.span = Span(start=offset, end=offset if end is None else end)
        super().__init__(f"Expected {expected}, found {found}.")

    @property
    def message(self) -> str:
        return str(self)

    def to_error(self) -> ValidationError:
        """Return the equivalent renderable ``ValidationError``."""
        return ValidationError(
            kind=ErrorKind.PARSE_ERROR,
            message=self.message,
            span=self.span,
            expected=self.expected,
            actual=self.found,
        )
