"""Tagged value tree for JSON documents.

Every transform in shapesaver matches over these variants exhaustively and
falls through to `never()`, so a value kind that is not handled fails loudly
instead of passing through unchanged.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from shapesaver.invariants import never
from shapesaver.json_types import JSONValue


@dataclass(frozen=True)
class JsonNull:
    pass


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonNumber:
    value: int | float

    def is_integral(self) -> bool:
        if isinstance(self.value, int):
            return True
        return math.isfinite(self.value) and self.value.is_integer()


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonArray:
    items: tuple[JsonValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class JsonObject:
    entries: tuple[tuple[str, JsonValue], ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for key, _ in self.entries:
            if key in seen:
                never("object keys must be unique", key=key)
            seen.add(key)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[str, JsonValue]]:
        return iter(self.entries)


JsonValue: TypeAlias = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

JSON_NULL = JsonNull()


def from_json(raw: object) -> JsonValue:
    """Build a value tree from plain parsed JSON."""
    match raw:
        case None:
            return JSON_NULL
        case bool():
            return JsonBool(raw)
        case int() | float():
            return JsonNumber(raw)
        case str():
            return JsonString(raw)
        case list() | tuple():
            return JsonArray(tuple(from_json(item) for item in raw))
        case Mapping():
            entries: list[tuple[str, JsonValue]] = []
            for key, item in raw.items():
                if not isinstance(key, str):
                    never("object keys must be strings", key_type=type(key).__name__)
                entries.append((key, from_json(item)))
            return JsonObject(tuple(entries))
        case _:
            never("from_json() received non-JSON value", value_type=type(raw).__name__)


def to_json(value: JsonValue) -> JSONValue:
    match value:
        case JsonNull():
            return None
        case JsonBool(value=flag):
            return flag
        case JsonNumber(value=number):
            return number
        case JsonString(value=text):
            return text
        case JsonArray(items=items):
            return [to_json(item) for item in items]
        case JsonObject(entries=entries):
            return {key: to_json(item) for key, item in entries}
        case _:
            never("to_json() received non-JSON value", value_type=type(value).__name__)

