from __future__ import annotations

import json
import math

import pytest

from shapesaver.codec import format_text, parse_document, render_document
from shapesaver.exceptions import DocumentParseError, NeverThrown
from shapesaver.infer import generate_schema
from shapesaver.value_model import JsonNumber, JsonObject, to_json


def test_parse_document_keeps_key_order() -> None:
    value = parse_document('{"b": 1, "a": [true, null]}')
    assert isinstance(value, JsonObject)
    assert [key for key, _ in value] == ["b", "a"]
    assert to_json(value) == {"b": 1, "a": [True, None]}


@pytest.mark.parametrize("text", ["{", "[1,]", "", "{'a': 1}"])
def test_parse_errors_carry_parser_message(text: str) -> None:
    with pytest.raises(DocumentParseError) as excinfo:
        parse_document(text)
    assert excinfo.value.message
    assert excinfo.value.report().startswith("JSON error: ")


@pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
def test_non_finite_constants_are_rejected(text: str) -> None:
    with pytest.raises(DocumentParseError):
        parse_document(text)


def test_render_document_indents_values_and_schemas() -> None:
    value = parse_document('{"name":"Zoë","n":[1]}')
    assert render_document(value) == '{\n  "name": "Zoë",\n  "n": [\n    1\n  ]\n}'
    rendered_schema = render_document(generate_schema(value), indent=0)
    assert json.loads(rendered_schema)["type"] == "object"


def test_render_document_rejects_negative_indent() -> None:
    with pytest.raises(NeverThrown):
        render_document(parse_document("1"), indent=-1)


def test_format_text_reindents() -> None:
    assert format_text('[1,{"a":2}]', indent=1) == '[\n 1,\n {\n  "a": 2\n }\n]'


@pytest.mark.parametrize("text", ["[1e400]", '{"a": -1e999}'])
def test_out_of_range_numbers_are_rejected(text: str) -> None:
    with pytest.raises(DocumentParseError) as excinfo:
        parse_document(text)
    assert "out of range" in excinfo.value.message


def test_render_document_never_emits_non_finite_tokens() -> None:
    with pytest.raises(ValueError):
        render_document(JsonNumber(math.inf))


@pytest.mark.parametrize("text", ['["\\ud800"]', '{"\\udfff": 1}'])
def test_lone_surrogates_are_rejected(text: str) -> None:
    with pytest.raises(DocumentParseError) as excinfo:
        parse_document(text)
    assert "surrogate" in excinfo.value.message


def test_surrogate_pairs_are_accepted() -> None:
    assert to_json(parse_document('["\\ud83d\\ude00"]')) == ["\U0001f600"]
