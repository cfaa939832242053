"""Invariant markers."""

from __future__ import annotations

from typing import NoReturn

from shapesaver.exceptions import NeverThrown


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path as intentionally unreachable.

    The optional env payload is metadata only; it is attached to the raised
    `NeverThrown` for diagnostics.
    """
    raise NeverThrown(reason or "never() marker reached", env=env)


def require_non_negative(value: int, *, reason: str = "", **env: object) -> int:
    if value < 0:
        never(reason or "value must be non-negative", value=value, **env)
    return value
