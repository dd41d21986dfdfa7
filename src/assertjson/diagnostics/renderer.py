"""Turns located errors into human-readable diagnostics with source context."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from assertjson.models.errors import ParseError, ValidationError
from assertjson.settings import get_settings

BANNER = "Invalid JSON"


@dataclass(frozen=True)
class Location:
    """1-based line/column of an offset plus the bounds of its line."""

    line: int
    column: int
    line_start: int
    line_end: int


@dataclass(frozen=True)
class Diagnostic:
    """Everything needed to print one error against its source line."""

    filename: str
    line: int
    column: int
    line_text: str
    underline_start: int  # 0-based index into line_text
    underline_width: int
    message: str

    def format(self, banner: str = BANNER) -> str:
        number = str(self.line)
        gutter = " " * len(number)
        # Keep tabs so the carets line up with the source text.
        pad = "".join("\t" if ch == "\t" else " " for ch in self.line_text[: self.underline_start])
        carets = "^" * self.underline_width
        return "\n".join(
            [
                f"error: {banner}",
                f"  at {self.filename}:{self.line}:{self.column}",
                f"{gutter} │",
                f"{number} │ {self.line_text}",
                f"{gutter} │ {pad}{carets} {self.message}",
            ]
        )


def locate(source: str, offset: int) -> Location | None:
    """Map an offset to its line and column; ``None`` when out of range.

    Lines are separated by ``\\n``; a trailing ``\\r`` is not part of the line.
    """
    if not 0 <= offset <= len(source):
        return None
    line_start = source.rfind("\n", 0, offset) + 1
    line_end = source.find("\n", offset)
    if line_end == -1:
        line_end = len(source)
    if line_end > line_start and source[line_end - 1] == "\r":
        line_end -= 1
    return Location(
        line=source.count("\n", 0, offset) + 1,
        column=offset - line_start + 1,
        line_start=line_start,
        line_end=line_end,
    )


class DiagnosticRenderer:
    """Renders errors against the source text they were produced from.

    Spans covering several lines are underlined to the end of their first
    line only.
    """

    def __init__(self, filename: str | None = None, banner: str = BANNER) -> None:
        self.filename = get_settings().default_filename if filename is None else filename
        self.banner = banner

    def diagnose(self, source: str, error: ValidationError | ParseError) -> Diagnostic | None:
        if isinstance(error, ParseError):
            error = error.to_error()
        span = error.span
        location = locate(source, span.start)
        if location is None or span.end > len(source):
            return None
        underline_start = span.start - location.line_start
        visible_end = min(span.end, location.line_end)
        return Diagnostic(
            filename=self.filename,
            line=location.line,
            column=location.column,
            line_text=source[location.line_start : location.line_end],
            underline_start=underline_start,
            underline_width=max(visible_end - span.start, 1),
            message=error.message,
        )

    def render(self, source: str, error: ValidationError | ParseError) -> str:
        """Format one error; never raises for a bad span."""
        diagnostic = self.diagnose(source, error)
        if diagnostic is None:
            message = error.message
            return f"error: {self.banner}\n  at {self.filename}\n  = {message}"
        return diagnostic.format(self.banner)

    def render_all(self, source: str, errors: Iterable[ValidationError | ParseError]) -> str:
        """Format several errors in order, separated by blank lines."""
        return "\n\n".join(self.render(source, error) for error in errors)


def render(
    source: str,
    error: ValidationError | ParseError,
    filename: str | None = None,
) -> str:
    """Render ``error`` against ``source`` with the default layout."""
    return DiagnosticRenderer(filename=filename).render(source, error)
