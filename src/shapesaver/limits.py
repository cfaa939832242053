from __future__ import annotations

import re

from shapesaver.exceptions import InvalidLimitError

INVALID_LIMIT_MESSAGE = "Provide a valid number of items for arrays."

_LEADING_INT_RE = re.compile(r"^\s*(?P<number>[+-]?\d+)")


def parse_limit(text: str | int) -> int:
    """Read an array limit the way `parseInt(text, 10)` does, clamped at zero.

    Trailing characters after the leading digits are ignored; text without
    leading digits is rejected.
    """
    if isinstance(text, bool):
        raise InvalidLimitError(INVALID_LIMIT_MESSAGE)
    if isinstance(text, int):
        return max(text, 0)
    match = _LEADING_INT_RE.match(text)
    if match is None:
        raise InvalidLimitError(INVALID_LIMIT_MESSAGE)
    return max(int(match.group("number")), 0)
