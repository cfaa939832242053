from __future__ import annotations

import math

import pytest

from shapesaver.exceptions import NeverThrown
from shapesaver.value_model import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNumber,
    JsonObject,
    JsonString,
    from_json,
    to_json,
)


def test_from_json_builds_tagged_variants() -> None:
    value = from_json({"a": [1, 2.5, "x", True, None], "b": {}})
    assert value == JsonObject(
        (
            (
                "a",
                JsonArray(
                    (
                        JsonNumber(1),
                        JsonNumber(2.5),
                        JsonString("x"),
                        JsonBool(True),
                        JSON_NULL,
                    )
                ),
            ),
            ("b", JsonObject(())),
        )
    )


def test_bool_is_not_a_number() -> None:
    assert from_json(True) == JsonBool(True)
    assert from_json(0) == JsonNumber(0)
    assert from_json(1) != JsonBool(True)


def test_to_json_round_trips_and_keeps_key_order() -> None:
    raw = {"z": 1, "a": [{"y": None, "b": "s"}], "m": False}
    rendered = to_json(from_json(raw))
    assert rendered == raw
    assert list(rendered) == ["z", "a", "m"]
    assert list(rendered["a"][0]) == ["y", "b"]


def test_tuples_are_accepted_as_arrays() -> None:
    assert from_json(("a", 1)) == JsonArray((JsonString("a"), JsonNumber(1)))


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (5, True),
        (-3, True),
        (5.0, True),
        (5.5, False),
        (10**30, True),
        (math.inf, False),
        (math.nan, False),
    ],
)
def test_number_integrality(number: int | float, expected: bool) -> None:
    assert JsonNumber(number).is_integral() is expected


def test_object_rejects_duplicate_keys() -> None:
    with pytest.raises(NeverThrown) as excinfo:
        JsonObject((("a", JSON_NULL), ("a", JsonBool(False))))
    assert excinfo.value.env == {"key": "a"}


def test_object_iterates_entries_in_order() -> None:
    value = from_json({"first": 1, "second": 2})
    assert isinstance(value, JsonObject)
    assert len(value) == 2
    assert list(value) == [("first", JsonNumber(1)), ("second", JsonNumber(2))]


def test_from_json_rejects_non_json_values() -> None:
    with pytest.raises(NeverThrown):
        from_json(object())
    with pytest.raises(NeverThrown):
        from_json({1: "non-string key"})
    with pytest.raises(NeverThrown):
        from_json({"unordered": {1, 2}})


def test_to_json_rejects_raw_values() -> None:
    with pytest.raises(NeverThrown):
        to_json({"raw": "dict"})  # type: ignore[arg-type]
