"""Collapsible tree rendering of value trees.

Collapse state is a frozenset of structural paths owned by the caller; the
renderer only reads it and `toggle_collapsed` returns a new set.
"""

from __future__ import annotations

import json
from collections.abc import Collection
from dataclasses import dataclass

from shapesaver.invariants import never
from shapesaver.paths import ROOT_PATH, index_path, key_path
from shapesaver.value_model import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

EXPANDED_MARKER = "▾"
COLLAPSED_MARKER = "▸"


@dataclass(frozen=True)
class TreeLine:
    depth: int
    text: str
    toggle_path: str | None = None
    collapsed: bool = False


def toggle_collapsed(collapsed: Collection[str], path: str) -> frozenset[str]:
    state = set(collapsed)
    if path in state:
        state.discard(path)
    else:
        state.add(path)
    return frozenset(state)


def format_primitive(value: JsonValue) -> str:
    match value:
        case JsonNull():
            return "null"
        case JsonBool(value=flag):
            return "true" if flag else "false"
        case JsonNumber(value=number):
            return json.dumps(number)
        case JsonString(value=text):
            return json.dumps(text, ensure_ascii=False)
        case _:
            never("format_primitive() received a container", value_type=type(value).__name__)


def render_tree(
    value: JsonValue, collapsed: Collection[str] = frozenset()
) -> list[TreeLine]:
    lines: list[TreeLine] = []
    _render_node(value, ROOT_PATH, 0, True, "", frozenset(collapsed), lines)
    return lines


def _render_node(
    node: JsonValue,
    path: str,
    depth: int,
    is_last: bool,
    key_prefix: str,
    collapsed: frozenset[str],
    lines: list[TreeLine],
) -> None:
    separator = "" if is_last else ","
    match node:
        case JsonArray(items=items):
            open_bracket, close_bracket = "[", "]"
            count = len(items)
        case JsonObject(entries=entries):
            open_bracket, close_bracket = "{", "}"
            count = len(entries)
        case JsonNull() | JsonBool() | JsonNumber() | JsonString():
            lines.append(
                TreeLine(depth=depth, text=f"{key_prefix}{format_primitive(node)}{separator}")
            )
            return
        case _:
            never("render_tree() received non-JSON value", value_type=type(node).__name__)

    if path in collapsed:
        lines.append(
            TreeLine(
                depth=depth,
                text=f"{key_prefix}{open_bracket}… {count}{close_bracket}{separator}",
                toggle_path=path,
                collapsed=True,
            )
        )
        return

    lines.append(TreeLine(depth=depth, text=f"{key_prefix}{open_bracket}", toggle_path=path))
    if isinstance(node, JsonArray):
        for index, item in enumerate(node.items):
            _render_node(
                item,
                index_path(path, index),
                depth + 1,
                index == count - 1,
                "",
                collapsed,
                lines,
            )
    else:
        for index, (key, item) in enumerate(node.entries):
            _render_node(
                item,
                key_path(path, key),
                depth + 1,
                index == count - 1,
                f"{json.dumps(key, ensure_ascii=False)}: ",
                collapsed,
                lines,
            )
    lines.append(TreeLine(depth=depth, text=f"{close_bracket}{separator}"))


def format_tree(lines: list[TreeLine], *, indent: str = "  ") -> str:
    rendered: list[str] = []
    for line in lines:
        if line.toggle_path is None:
            marker = " "
        elif line.collapsed:
            marker = COLLAPSED_MARKER
        else:
            marker = EXPANDED_MARKER
        rendered.append(f"{marker} {indent * line.depth}{line.text}")
    return "\n".join(rendered)
