from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from shapesaver.invariants import never
from shapesaver.merge import merge, merge_all
from shapesaver.schema_types import EMPTY_SCHEMA, SCHEMA_DIALECT, Schema, TypeTag
from shapesaver.value_model import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)


def infer(value: JsonValue) -> Schema:
    """Infer the schema of a single value tree.

    Array elements are folded through `merge`, which is where `required`
    narrows to the keys shared by every observed object. A lone object lists
    all of its keys as required.
    """
    match value:
        case JsonNull():
            return Schema.of(TypeTag.NULL)
        case JsonBool():
            return Schema.of(TypeTag.BOOLEAN)
        case JsonNumber() as number:
            if number.is_integral():
                return Schema.of(TypeTag.INTEGER)
            return Schema.of(TypeTag.NUMBER)
        case JsonString():
            return Schema.of(TypeTag.STRING)
        case JsonArray(items=items):
            unified: Schema | None = None
            for item in items:
                unified = merge(unified, infer(item))
            return Schema(types=(TypeTag.ARRAY,), items=unified or EMPTY_SCHEMA)
        case JsonObject(entries=entries):
            properties = {key: infer(item) for key, item in entries}
            return Schema(
                types=(TypeTag.OBJECT,),
                properties=properties,
                required=tuple(properties) or None,
            )
        case _:
            never("infer() received non-JSON value", value_type=type(value).__name__)


def generate_schema(value: JsonValue) -> Schema:
    return replace(infer(value), dialect=SCHEMA_DIALECT)


def generate_schema_from_samples(values: Iterable[JsonValue]) -> Schema:
    """Merge the inferred schemas of several sample documents into one root."""
    merged = merge_all(infer(value) for value in values)
    return replace(merged or EMPTY_SCHEMA, dialect=SCHEMA_DIALECT)
