"""Parse raw text into value trees and render results back to text."""

from __future__ import annotations

import json
import math
from typing import NoReturn

from shapesaver.exceptions import DocumentParseError
from shapesaver.invariants import never
from shapesaver.paths import iter_nodes
from shapesaver.schema_types import Schema
from shapesaver.value_model import JsonObject, JsonString, JsonValue, from_json, to_json

DEFAULT_INDENT = 2


def _reject_constant(name: str) -> NoReturn:
    raise DocumentParseError(f"Unexpected token {name} is not valid JSON")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise DocumentParseError(f"Number {text} is out of range")
    return value


def _ensure_encodable(text: str, *, where: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise DocumentParseError(f"Lone surrogate in {where}: {exc.reason}") from exc


def _reject_lone_surrogates(value: JsonValue) -> None:
    for path, node in iter_nodes(value):
        match node:
            case JsonString(value=text):
                _ensure_encodable(text, where=path)
            case JsonObject(entries=entries):
                for key, _ in entries:
                    _ensure_encodable(key, where=f"a key of {path}")
            case _:
                continue


def parse_document(text: str) -> JsonValue:
    try:
        raw = json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except ValueError as exc:
        raise DocumentParseError(str(exc)) from exc
    value = from_json(raw)
    _reject_lone_surrogates(value)
    return value


def render_document(value: JsonValue | Schema, *, indent: int = DEFAULT_INDENT) -> str:
    if indent < 0:
        never("render indent must be non-negative", indent=indent)
    payload = value.to_json() if isinstance(value, Schema) else to_json(value)
    return json.dumps(payload, indent=indent, ensure_ascii=False, allow_nan=False)


def format_text(text: str, *, indent: int = DEFAULT_INDENT) -> str:
    return render_document(parse_document(text), indent=indent)
