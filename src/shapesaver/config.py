from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

from shapesaver.codec import DEFAULT_INDENT
from shapesaver.limits import parse_limit

DEFAULT_CONFIG_NAME = "shapesaver.toml"
DEFAULT_LIMIT = 1

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def _section(data: TomlTable, name: str) -> TomlTable:
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}


def trim_defaults(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    return _section(load_config(root=root, config_path=config_path), "trim")


def render_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    return _section(load_config(root=root, config_path=config_path), "render")


def tree_defaults(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    return _section(load_config(root=root, config_path=config_path), "tree")


def _normalize_name_list(value: TomlValue) -> list[str]:
    items: list[str] = []
    if value is None:
        return items
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple, set)):
        for item in value:
            if isinstance(item, str):
                items.extend([part.strip() for part in item.split(",") if part.strip()])
    return [item for item in items if item]


def default_limit(section: TomlTable | None) -> int:
    """Configured array limit, or DEFAULT_LIMIT when unset.

    A configured value goes through the same parsing as CLI input, so an
    invalid value raises `InvalidLimitError`.
    """
    if not isinstance(section, dict):
        return DEFAULT_LIMIT
    value = section.get("limit")
    if value is None:
        return DEFAULT_LIMIT
    if isinstance(value, (str, int)):
        return parse_limit(value)
    return parse_limit(str(value))


def default_indent(section: TomlTable | None) -> int:
    if not isinstance(section, dict):
        return DEFAULT_INDENT
    value = section.get("indent")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_INDENT
    return max(value, 0)


def default_collapsed(section: TomlTable | None) -> list[str]:
    if not isinstance(section, dict):
        return []
    return _normalize_name_list(section.get("collapse"))


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged
