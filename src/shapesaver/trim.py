from __future__ import annotations

from shapesaver.invariants import never, require_non_negative
from shapesaver.json_types import JSONValue
from shapesaver.value_model import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    from_json,
    to_json,
)


def trim(value: JsonValue, limit: int) -> JsonValue:
    """Cap every array in `value` at `limit` elements.

    Only retained elements are visited. Object keys and their order are kept,
    and scalars come back as the same objects.
    """
    require_non_negative(limit, reason="trim limit must be non-negative")
    return _trim(value, limit)


def _trim(value: JsonValue, limit: int) -> JsonValue:
    match value:
        case JsonArray(items=items):
            return JsonArray(tuple(_trim(item, limit) for item in items[:limit]))
        case JsonObject(entries=entries):
            return JsonObject(tuple((key, _trim(item, limit)) for key, item in entries))
        case JsonNull() | JsonBool() | JsonNumber() | JsonString():
            return value
        case _:
            never("trim() received non-JSON value", value_type=type(value).__name__)


def trim_document(raw: JSONValue, limit: int) -> JSONValue:
    return to_json(trim(from_json(raw), limit))
