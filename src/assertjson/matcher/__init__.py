"""Matching of parsed JSON against expectation trees."""

from assertjson.matcher.matcher import Matcher, validate

__all__ = [
    "Matcher",
    "validate",
]
