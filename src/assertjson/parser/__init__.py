"""JSON parsing with span fidelity."""

from assertjson.parser.parser import JsonParser, parse

__all__ = [
    "JsonParser",
    "parse",
]
