"""Immutable JSON value nodes. Every node knows where it came from in the source."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from assertjson.models.errors import Span


@dataclass(frozen=True)
class JsonNull:
    span: Span

    @property
    def kind(self) -> str:
        return "null"

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class JsonBool:
    value: bool
    span: Span

    @property
    def kind(self) -> str:
        return "bool"

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class JsonNumber:
    """A number literal.

    ``raw`` is the literal exactly as written. ``value`` is an ``int`` when
    the literal has no fraction or exponent, a ``float`` otherwise, so that
    ``5`` and ``5.0`` stay distinguishable. An integer literal too long to
    convert to ``int`` keeps only its magnitude as a ``float``; ``is_integer``
    follows the spelling, not the type of ``value``.
    """

    raw: str
    value: int | float
    span: Span

    @property
    def kind(self) -> str:
        return "number"

    @property
    def is_integer(self) -> bool:
        return not any(c in self.raw for c in ".eE")

    def to_python(self) -> int | float:
        return self.value


@dataclass(frozen=True)
class JsonString:
    value: str
    span: Span

    @property
    def kind(self) -> str:
        return "string"

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonArray:
    """An array; ``span`` runs from ``[`` to ``]`` inclusive."""

    items: tuple[SpannedValue, ...]
    span: Span

    @property
    def kind(self) -> str:
        return "array"

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class ObjectMember:
    """A ``"key": value`` pair; ``key_span`` covers the quoted key."""

    key: str
    key_span: Span
    value: SpannedValue


@dataclass(frozen=True)
class JsonObject:
    """An object; ``span`` runs from ``{`` to ``}`` inclusive.

    Members are kept in source order. Keys are unique: when the source
    repeats a key the last occurrence is the one kept.
    """

    members: tuple[ObjectMember, ...]
    span: Span
    _index: dict[str, ObjectMember] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {m.key: m for m in self.members})

    @property
    def kind(self) -> str:
        return "object"

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def keys(self) -> list[str]:
        return [m.key for m in self.members]

    def member(self, key: str) -> ObjectMember | None:
        return self._index.get(key)

    def get(self, key: str) -> SpannedValue | None:
        found = self._index.get(key)
        return found.value if found is not None else None

    def to_python(self) -> dict[str, Any]:
        return {m.key: m.value.to_python() for m in self.members}


# The union of all value node types.
SpannedValue = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject


def type_name(value: Any) -> str:
    """Name the JSON kind of a plain Python value, as used in error messages."""
    if value is None:
        return "null"
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"{type(value).__name__} is not a JSON value")


def to_json_text(value: Any) -> str:
    """Compact JSON text for a plain Python value, used in messages only."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def describe(node: SpannedValue) -> str:
    """Compact JSON text for a parsed node, keeping the number as written."""
    if isinstance(node, JsonNumber):
        return node.raw
    return to_json_text(node.to_python())
