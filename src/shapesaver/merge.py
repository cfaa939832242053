"""Schema merge combinator.

`merge` unifies two schemas into one that covers both. Object and array
substructure is only merged when both inputs are independently of that kind;
a kind contributed by one side alone adds its type tag and nothing else.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from shapesaver.schema_types import EMPTY_SCHEMA, Schema, TypeTag, union_types


def merge(a: Schema | None, b: Schema | None) -> Schema | None:
    # None and the unconstrained schema are both identities.
    if b is None or b.is_unconstrained():
        return a if a is not None else b
    if a is None or a.is_unconstrained():
        return b

    both_objects = a.has_type(TypeTag.OBJECT) and b.has_type(TypeTag.OBJECT)
    both_arrays = a.has_type(TypeTag.ARRAY) and b.has_type(TypeTag.ARRAY)

    properties: Mapping[str, Schema] | None = None
    required: tuple[str, ...] | None = None
    if both_objects:
        properties = _merge_properties(a.properties or {}, b.properties or {})
        required = _intersect_required(a.required, b.required)

    items: Schema | None = None
    if both_arrays:
        items = merge(a.items, b.items) or EMPTY_SCHEMA

    return Schema(
        types=union_types(a.types, b.types),
        properties=properties,
        items=items,
        required=required,
    )


def merge_all(schemas: Iterable[Schema]) -> Schema | None:
    merged: Schema | None = None
    for schema in schemas:
        merged = merge(merged, schema)
    return merged


def _merge_properties(
    left: Mapping[str, Schema], right: Mapping[str, Schema]
) -> dict[str, Schema]:
    merged: dict[str, Schema] = {}
    for name, schema in left.items():
        other = right.get(name)
        if other is None:
            merged[name] = schema
            continue
        # Both sides are non-None, so merge cannot return None here.
        merged[name] = merge(schema, other) or EMPTY_SCHEMA
    for name, schema in right.items():
        if name not in merged:
            merged[name] = schema
    return merged


def _intersect_required(
    left: tuple[str, ...] | None, right: tuple[str, ...] | None
) -> tuple[str, ...] | None:
    if not left or not right:
        return None
    keep = set(right)
    common = tuple(name for name in left if name in keep)
    return common or None
