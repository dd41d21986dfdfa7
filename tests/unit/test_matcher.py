"""Tests for the expectation matcher."""

from __future__ import annotations

import logging

import pytest

from assertjson.matcher.matcher import Matcher, validate
from assertjson.models.errors import ErrorKind, Span, ValidationError
from assertjson.models.expectation import (
    ArrayExpectation,
    LiteralExpectation,
    ObjectExpectation,
    ValidatorExpectation,
)
from assertjson.models.value import SpannedValue
from assertjson.parser.parser import parse
from assertjson.settings import reset_settings
from assertjson.validators import custom, string
from tests.conftest import SAMPLE_JSON


class TestLiterals:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("null", None),
            ("true", True),
            ("false", False),
            ("23", 23),
            ("2.3", 2.3),
            ('"str"', "str"),
            ("[]", []),
            ("{}", {}),
        ],
    )
    def test_equal_literal_passes(self, text: str, expected: object) -> None:
        assert validate(parse(text), LiteralExpectation(value=expected)) == []

    def test_number_spelling_is_irrelevant(self) -> None:
        assert validate(parse("5.0"), LiteralExpectation(value=5)) == []
        assert validate(parse("5"), LiteralExpectation(value=5.0)) == []
        assert validate(parse("1e2"), LiteralExpectation(value=100)) == []

    def test_type_mismatch_wins_over_value_mismatch(self) -> None:
        actual = parse('{"a": 1}')
        errors = validate(actual, LiteralExpectation(value="x"))
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.INVALID_TYPE
        assert errors[0].span == actual.span
        assert errors[0].message == "Invalid type. Expected string but got object."

    def test_bool_is_not_a_number(self) -> None:
        errors = validate(parse("true"), LiteralExpectation(value=1))
        assert [e.kind for e in errors] == [ErrorKind.INVALID_TYPE]
        assert errors[0].message == "Invalid type. Expected number but got bool."

    def test_number_is_not_a_bool(self) -> None:
        errors = validate(parse("0"), LiteralExpectation(value=False))
        assert [e.kind for e in errors] == [ErrorKind.INVALID_TYPE]

    def test_value_mismatch(self) -> None:
        errors = validate(parse('"incorrect name"'), "charlesvdv")
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.INVALID_VALUE
        assert errors[0].span.as_tuple() == (0, 16)
        assert errors[0].message == (
            'Invalid value. Expected "charlesvdv" but got "incorrect name".'
        )

    def test_value_mismatch_keeps_number_spelling(self) -> None:
        errors = validate(parse("2.50"), 3)
        assert errors[0].message == "Invalid value. Expected 3 but got 2.50."

    def test_container_literal_reports_deepest_difference(self) -> None:
        actual = parse('{"a": [1, 2]}')
        errors = validate(actual, LiteralExpectation(value={"a": [1, 3]}))
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.INVALID_VALUE
        assert errors[0].span.as_tuple() == (10, 11)
        assert errors[0].path == "a[1]"

    def test_object_literal_is_exact(self) -> None:
        errors = validate(parse('{"a": 1, "b": 2}'), LiteralExpectation(value={"a": 1}))
        assert [e.kind for e in errors] == [ErrorKind.UNEXPECTED_KEY]


class TestArrays:
    def test_length_mismatch_stops_recursion(self) -> None:
        actual = parse("[1,2]")
        expected = ArrayExpectation(
            items=(
                LiteralExpectation(value=1),
                LiteralExpectation(value=2),
                LiteralExpectation(value=3),
            )
        )
        errors = validate(actual, expected)
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.LENGTH_MISMATCH
        assert errors[0].span == actual.span
        assert errors[0].message == "Invalid length. Expected 3 elements but got 2."

    def test_not_an_array(self) -> None:
        errors = validate(parse("null"), ArrayExpectation())
        assert [e.kind for e in errors] == [ErrorKind.INVALID_TYPE]
        assert errors[0].expected == "array"

    def test_all_element_errors_collected(self) -> None:
        errors = validate(parse('[1, "x", true]'), [2, "x", False])
        assert [e.path for e in errors] == ["[0]", "[2]"]
        assert [e.kind for e in errors] == [ErrorKind.INVALID_VALUE, ErrorKind.INVALID_VALUE]

    def test_mixed_array(self) -> None:
        text = '[null, true, false, 8, 8.9, "str", {"key": null}, {}, [false, "hello"], []]'
        expected = [None, True, False, 8, 8.9, "str", {"key": None}, {}, [False, "hello"], []]
        assert validate(parse(text), expected) == []


class TestObjects:
    def test_missing_key_points_at_object(self) -> None:
        actual = parse("{}")
        errors = validate(actual, ObjectExpectation(entries={"name": LiteralExpectation("bob")}))
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.MISSING_KEY
        assert errors[0].span.as_tuple() == (0, 2)
        assert errors[0].message == "Missing key 'name' in object"

    def test_extra_keys_allowed_by_default(self) -> None:
        actual = parse('{"a":1,"b":2}')
        assert validate(actual, ObjectExpectation(entries={"a": LiteralExpectation(1)})) == []

    def test_strict_matcher_reports_extra_keys(self) -> None:
        actual = parse('{"a":1,"b":2}')
        errors = Matcher(strict=True).validate(actual, {"a": 1})
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.UNEXPECTED_KEY
        assert errors[0].span.as_tuple() == (7, 10)
        assert errors[0].path == "b"

    def test_per_object_strictness_overrides_matcher(self) -> None:
        actual = parse('{"a":1,"b":2}')
        lenient = ObjectExpectation(entries={"a": LiteralExpectation(1)}, strict=False)
        assert Matcher(strict=True).validate(actual, lenient) == []

    def test_strict_default_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ASSERTJSON_STRICT_OBJECTS", "true")
        reset_settings()
        errors = validate(parse('{"a":1,"b":2}'), {"a": 1})
        assert [e.kind for e in errors] == [ErrorKind.UNEXPECTED_KEY]

    def test_key_order_is_irrelevant(self, matcher: Matcher) -> None:
        assert matcher.validate(parse('{"b": 2, "a": 1}'), {"a": 1, "b": 2}) == []
        assert matcher.strict is False

    def test_not_an_object(self) -> None:
        errors = validate(parse("[1]"), {"a": 1})
        assert [e.kind for e in errors] == [ErrorKind.INVALID_TYPE]
        assert errors[0].message == "Invalid type. Expected object but got array."

    def test_sibling_errors_in_expectation_order(self, sample_document: SpannedValue) -> None:
        errors = validate(
            sample_document,
            {
                "status": "failure",
                "result": {"name": "charlesvdv", "missing": None, "id": "5"},
            },
        )
        assert [(e.kind, e.path) for e in errors] == [
            (ErrorKind.INVALID_VALUE, "status"),
            (ErrorKind.INVALID_VALUE, "result.name"),
            (ErrorKind.MISSING_KEY, "result"),
            (ErrorKind.INVALID_TYPE, "result.id"),
        ]

    def test_type_mismatch_does_not_descend(self) -> None:
        errors = validate(parse('{"result": "oops"}'), {"result": {"a": 1, "b": 2}})
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.INVALID_TYPE
        assert errors[0].path == "result"


class TestValidators:
    def test_validator_success(self) -> None:
        assert validate(parse('"x"'), ValidatorExpectation(string())) == []

    def test_validator_error_propagated(self) -> None:
        actual = parse('{"name": 3}')
        errors = validate(actual, {"name": string()})
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.INVALID_TYPE
        assert errors[0].span.as_tuple() == (9, 10)
        assert errors[0].path == "name"

    def test_error_outside_value_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        rogue = custom(lambda value: ValidationError.custom(Span(start=0, end=1), "elsewhere"))
        with caplog.at_level(logging.WARNING, logger="assertjson.matcher"):
            errors = validate(parse('{"a": 1}'), {"a": rogue})
        assert errors[0].message == "elsewhere"
        assert "outside the validated value" in caplog.text

    def test_unsupported_expectation_node(self) -> None:
        class Unknown:
            pass

        with pytest.raises(TypeError, match="Unsupported expectation node"):
            Matcher().visit(Unknown(), parse("1"), "", [])  # type: ignore[arg-type]


class TestProperties:
    def test_document_matches_its_own_decoded_value(self, sample_document: SpannedValue) -> None:
        assert validate(sample_document, LiteralExpectation(sample_document.to_python())) == []

    def test_validate_is_idempotent(self) -> None:
        actual = parse(SAMPLE_JSON)
        expected = {"status": "failure", "result": {"id": "5", "tags": ["a"]}}
        first = validate(actual, expected)
        second = validate(actual, expected)
        assert first == second
        assert len(first) == 3
