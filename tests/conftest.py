"""Shared test fixtures for assertjson."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from assertjson.diagnostics.renderer import DiagnosticRenderer
from assertjson.matcher.matcher import Matcher
from assertjson.models.value import SpannedValue
from assertjson.parser.parser import JsonParser
from assertjson.settings import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from ASSERTJSON_* variables in the environment."""
    for name in list(os.environ):
        if name.startswith("ASSERTJSON_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def parser() -> JsonParser:
    return JsonParser()


@pytest.fixture
def matcher() -> Matcher:
    return Matcher()


@pytest.fixture
def renderer() -> DiagnosticRenderer:
    return DiagnosticRenderer()


@pytest.fixture
def sample_document(parser: JsonParser) -> SpannedValue:
    return parser.parse(SAMPLE_JSON)


SAMPLE_JSON = """\
{
    "status": "success",
    "result": {
        "id": 5,
        "name": "incorrect name",
        "tags": ["a", "b"],
        "active": true,
        "score": 2.5,
        "parent": null
    }
}
"""

# The sample with a duplicated key: the second "id" must win.
DUPLICATE_KEY_JSON = '{"id": 1, "name": "x", "id": 2}'
