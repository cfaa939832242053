"""Structural paths such as `$.users[0].roles`.

Paths identify nodes for presentation state only; the transforms never look
at them.
"""

from __future__ import annotations

from collections.abc import Iterator

from shapesaver.value_model import JsonArray, JsonObject, JsonValue

ROOT_PATH = "$"


def key_path(parent: str, key: str) -> str:
    return f"{parent}.{key}"


def index_path(parent: str, index: int) -> str:
    return f"{parent}[{index}]"


def iter_nodes(value: JsonValue, path: str = ROOT_PATH) -> Iterator[tuple[str, JsonValue]]:
    yield path, value
    match value:
        case JsonArray(items=items):
            for index, item in enumerate(items):
                yield from iter_nodes(item, index_path(path, index))
        case JsonObject(entries=entries):
            for key, item in entries:
                yield from iter_nodes(item, key_path(path, key))
        case _:
            return


def container_paths(value: JsonValue) -> list[str]:
    return [
        path
        for path, node in iter_nodes(value)
        if isinstance(node, (JsonArray, JsonObject))
    ]
