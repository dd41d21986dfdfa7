"""Test-harness front end: parse, match, and render in one call."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from assertjson.diagnostics.renderer import DiagnosticRenderer
from assertjson.matcher.matcher import validate
from assertjson.models.errors import ParseError, ValidationResult
from assertjson.parser.parser import JsonParser

logger = logging.getLogger("assertjson.assertion")


@dataclass
class CheckOutcome:
    """The result of one check plus its rendered diagnostics ("" when valid)."""

    result: ValidationResult
    report: str

    @property
    def valid(self) -> bool:
        return self.result.valid


def _decode(source: bytes) -> str:
    """Decode UTF-8, raising ``ParseError`` at the first undecodable byte."""
    try:
        return source.decode("utf-8")
    except UnicodeDecodeError as exc:
        # Everything before the bad byte decodes, so this is its character offset.
        offset = len(source[: exc.start].decode("utf-8"))
        raise ParseError(
            offset, "UTF-8 text", f"byte 0x{source[exc.start]:02x}", end=offset + 1
        ) from exc


def _parse_failure(renderer: DiagnosticRenderer, text: str, exc: ParseError) -> CheckOutcome:
    error = exc.to_error()
    return CheckOutcome(
        result=ValidationResult(valid=False, errors=[error]),
        report=renderer.render(text, error),
    )


def check_json(
    source: str | bytes,
    expected: Any,
    *,
    filename: str | None = None,
    strict: bool | None = None,
) -> CheckOutcome:
    """Check JSON text against an expectation without raising.

    A parse failure yields a single ``parse_error``. Bytes are decoded as
    UTF-8; bytes that do not decode are a parse failure too.
    """
    renderer = DiagnosticRenderer(filename=filename)
    if isinstance(source, bytes):
        try:
            source = _decode(source)
        except ParseError as exc:
            return _parse_failure(renderer, source.decode("utf-8", errors="replace"), exc)
    try:
        actual = JsonParser().parse(source)
    except ParseError as exc:
        return _parse_failure(renderer, source, exc)
    errors = validate(actual, expected, strict=strict)
    return CheckOutcome(
        result=ValidationResult(valid=not errors, errors=errors),
        report=renderer.render_all(source, errors),
    )


def assert_json(
    source: str | bytes,
    expected: Any,
    *,
    filename: str | None = None,
    strict: bool | None = None,
) -> None:
    """Raise ``AssertionError`` with rendered diagnostics unless ``source`` matches."""
    outcome = check_json(source, expected, filename=filename, strict=strict)
    if not outcome.valid:
        logger.info("JSON assertion failed with %d error(s)", len(outcome.result.errors))
        raise AssertionError(f"assertion failed: json:\n{outcome.report}")
