"""Partial JSON Schema descriptors produced by inference."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from shapesaver.json_types import JSONObject

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


class TypeTag(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def union_types(*groups: Iterable[TypeTag]) -> tuple[TypeTag, ...]:
    """Set union that keeps first-seen order."""
    merged: list[TypeTag] = []
    for group in groups:
        for tag in group:
            if tag not in merged:
                merged.append(tag)
    return tuple(merged)


@dataclass(frozen=True)
class Schema:
    """One inferred shape.

    `types` behaves as a set; order is kept only so rendered output is stable.
    `required` is never empty: an empty intersection is stored as None.
    `dialect` renders as `$schema` and is only set on a document root.
    """

    types: tuple[TypeTag, ...] = ()
    properties: Mapping[str, Schema] | None = None
    items: Schema | None = None
    required: tuple[str, ...] | None = None
    dialect: str | None = None

    def __post_init__(self) -> None:
        if self.properties is not None:
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def of(cls, tag: TypeTag) -> Schema:
        return cls(types=(tag,))

    def has_type(self, tag: TypeTag) -> bool:
        return tag in self.types

    def type_set(self) -> frozenset[TypeTag]:
        return frozenset(self.types)

    def is_unconstrained(self) -> bool:
        return (
            not self.types
            and self.properties is None
            and self.items is None
            and not self.required
        )

    def to_json(self) -> JSONObject:
        payload: JSONObject = {}
        if self.dialect is not None:
            payload["$schema"] = self.dialect
        if len(self.types) == 1:
            payload["type"] = self.types[0].value
        elif self.types:
            payload["type"] = [tag.value for tag in self.types]
        if self.properties is not None:
            payload["properties"] = {
                name: schema.to_json() for name, schema in self.properties.items()
            }
        if self.items is not None:
            payload["items"] = self.items.to_json()
        if self.required:
            payload["required"] = list(self.required)
        return payload


EMPTY_SCHEMA = Schema()
