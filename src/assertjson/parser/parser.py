"""JSON parser that records the source span of every value, key, and container."""

from __future__ import annotations

import logging
import re

from assertjson.models.errors import ParseError, Span
from assertjson.models.value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    ObjectMember,
    SpannedValue,
)
from assertjson.settings import get_settings

logger = logging.getLogger("assertjson.parser")

_WHITESPACE_RE = re.compile(r"[ \t\n\r]*")
_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")
# Run of string characters needing no special handling.
_STRING_CHUNK_RE = re.compile(r'[^"\\\x00-\x1f]*')
_HEX4_RE = re.compile(r"[0-9a-fA-F]{4}")

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_KEYWORDS: tuple[tuple[str, bool | None], ...] = (
    ("null", None),
    ("true", True),
    ("false", False),
)


class JsonParser:
    """Recursive-descent JSON parser producing a spanned value tree.

    Limits default to the process settings. Duplicate object keys resolve
    to the last occurrence.
    """

    def __init__(
        self,
        max_depth: int | None = None,
        max_document_size: int | None = None,
    ) -> None:
        settings = get_settings()
        self.max_depth = settings.max_depth if max_depth is None else max_depth
        self.max_document_size = (
            settings.max_document_size if max_document_size is None else max_document_size
        )

    def parse(self, source: str) -> SpannedValue:
        """Parse a complete JSON document.

        Raises ``ParseError`` at the first unexpected character.
        """
        logger.debug("parse called (source length=%d)", len(source))
        if len(source) > self.max_document_size:
            raise ParseError(
                0,
                f"document of at most {self.max_document_size:,} characters",
                f"{len(source):,} characters",
            )
        return _Scanner(source, self.max_depth).document()


def parse(source: str) -> SpannedValue:
    """Parse ``source`` with the default limits."""
    return JsonParser().parse(source)


def _found(text: str, pos: int) -> str:
    if pos >= len(text):
        return "end of input"
    return repr(text[pos])


class _Scanner:
    """Single-use cursor over one source string."""

    def __init__(self, text: str, max_depth: int) -> None:
        self.text = text
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    # -- helpers -------------------------------------------------------------

    def _error(self, expected: str, pos: int | None = None) -> ParseError:
        at = self.pos if pos is None else pos
        end = at if at >= len(self.text) else at + 1
        return ParseError(at, expected, _found(self.text, at), end=end)

    def _skip_whitespace(self) -> None:
        self.pos = _WHITESPACE_RE.match(self.text, self.pos).end()

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _enter(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise self._error(f"nesting depth <= {self.max_depth}")

    # -- grammar -------------------------------------------------------------

    def document(self) -> SpannedValue:
        self._skip_whitespace()
        value = self.value()
        self._skip_whitespace()
        if self.pos != len(self.text):
            raise self._error("end of input")
        return value

    def value(self) -> SpannedValue:
        ch = self._peek()
        if ch == "{":
            return self.object()
        if ch == "[":
            return self.array()
        if ch == '"':
            start = self.pos
            text = self.string()
            return JsonString(value=text, span=Span(start=start, end=self.pos))
        if ch == "-" or "0" <= ch <= "9":
            return self.number()
        for word, literal in _KEYWORDS:
            if self.text.startswith(word, self.pos):
                start = self.pos
                self.pos += len(word)
                span = Span(start=start, end=self.pos)
                if literal is None:
                    return JsonNull(span=span)
                return JsonBool(value=literal, span=span)
        raise self._error("value")

    def number(self) -> JsonNumber:
        start = self.pos
        match = _NUMBER_RE.match(self.text, start)
        if match is None:
            # Only a lone '-' (or '-' followed by a non-digit) gets here.
            raise self._error("digit", start + 1)
        raw = match.group()
        self.pos = match.end()
        fraction, exponent = match.group(1), match.group(2)
        value: int | float
        if fraction or exponent:
            value = float(raw)
        else:
            try:
                value = int(raw)
            except ValueError:
                # Longer than the int digit limit; keep the magnitude only.
                value = float(raw)
        return JsonNumber(raw=raw, value=value, span=Span(start=start, end=self.pos))

    def string(self) -> str:
        """Consume a double-quoted string starting at the cursor; return its text."""
        text = self.text
        self.pos += 1
        chunks: list[str] = []
        while True:
            match = _STRING_CHUNK_RE.match(text, self.pos)
            chunks.append(match.group())
            self.pos = match.end()
            ch = self._peek()
            if ch == '"':
                self.pos += 1
                return "".join(chunks)
            if ch == "\\":
                chunks.append(self._escape())
            elif ch == "":
                raise self._error("closing quote '\"'")
            else:
                raise self._error("string character")

    def _escape(self) -> str:
        esc_pos = self.pos + 1
        esc = self.text[esc_pos] if esc_pos < len(self.text) else ""
        if esc in _ESCAPES:
            self.pos += 2
            return _ESCAPES[esc]
        if esc != "u":
            raise self._error("escape character", esc_pos)
        code = self._hex4(self.pos + 2)
        self.pos += 6
        if 0xD800 <= code <= 0xDBFF and self.text.startswith("\\u", self.pos):
            low_match = _HEX4_RE.match(self.text, self.pos + 2)
            if low_match is not None:
                low = int(low_match.group(), 16)
                if 0xDC00 <= low <= 0xDFFF:
                    self.pos += 6
                    code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
        return chr(code)

    def _hex4(self, pos: int) -> int:
        match = _HEX4_RE.match(self.text, pos)
        if match is None:
            bad = pos
            while bad < len(self.text) and self.text[bad] in "0123456789abcdefABCDEF":
                bad += 1
            raise self._error("hex digit", bad)
        return int(match.group(), 16)

    def array(self) -> JsonArray:
        start = self.pos
        self._enter()
        self.pos += 1
        items: list[SpannedValue] = []
        self._skip_whitespace()
        if self._peek() == "]":
            self.pos += 1
        else:
            while True:
                self._skip_whitespace()
                items.append(self.value())
                self._skip_whitespace()
                ch = self._peek()
                self.pos += 1
                if ch == ",":
                    continue
                if ch == "]":
                    break
                raise self._error("',' or ']'", self.pos - 1)
        self.depth -= 1
        return JsonArray(items=tuple(items), span=Span(start=start, end=self.pos))

    def object(self) -> JsonObject:
        start = self.pos
        self._enter()
        self.pos += 1
        members: dict[str, ObjectMember] = {}
        self._skip_whitespace()
        if self._peek() == "}":
            self.pos += 1
        else:
            while True:
                self._skip_whitespace()
                if self._peek() != '"':
                    raise self._error("object key string")
                key_start = self.pos
                key = self.string()
                key_span = Span(start=key_start, end=self.pos)
                self._skip_whitespace()
                if self._peek() != ":":
                    raise self._error("':'")
                self.pos += 1
                self._skip_whitespace()
                value = self.value()
                # Last occurrence wins and takes its own place in source order.
                members.pop(key, None)
                members[key] = ObjectMember(key=key, key_span=key_span, value=value)
                self._skip_whitespace()
                ch = self._peek()
                self.pos += 1
                if ch == ",":
                    continue
                if ch == "}":
                    break
                raise self._error("',' or '}'", self.pos - 1)
        self.depth -= 1
        return JsonObject(members=tuple(members.values()), span=Span(start=start, end=self.pos))
