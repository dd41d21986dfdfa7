"""Diagnostic rendering with line/column and caret underlines."""

from assertjson.diagnostics.renderer import (
    Diagnostic,
    DiagnosticRenderer,
    Location,
    locate,
    render,
)

__all__ = [
    "Diagnostic",
    "DiagnosticRenderer",
    "Location",
    "locate",
    "render",
]
