from __future__ import annotations

import pytest

from shapesaver.exceptions import InvalidLimitError
from shapesaver.limits import INVALID_LIMIT_MESSAGE, parse_limit


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1", 1),
        ("  7", 7),
        ("+3", 3),
        ("12abc", 12),
        ("1.9", 1),
        ("1e3", 1),
        ("007", 7),
        ("-4", 0),
        ("-0", 0),
        (5, 5),
        (-2, 0),
    ],
)
def test_parse_limit_follows_parse_int(text: str | int, expected: int) -> None:
    assert parse_limit(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "  ", "- 3", ".5"])
def test_parse_limit_rejects_text_without_digits(text: str) -> None:
    with pytest.raises(InvalidLimitError) as excinfo:
        parse_limit(text)
    assert excinfo.value.message == INVALID_LIMIT_MESSAGE
    assert excinfo.value.report() == f"Limit error: {INVALID_LIMIT_MESSAGE}"


def test_parse_limit_rejects_booleans() -> None:
    with pytest.raises(InvalidLimitError):
        parse_limit(True)
