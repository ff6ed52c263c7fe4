"""Small text helpers used by the map reader."""

from __future__ import annotations

import re

_ATOI_SPACE = " \t\n\v\r\f"
_SPACE_CHARS = frozenset("\t\n\v\f\r ")
_LEADING_DIGITS = re.compile(r"[0-9]*")


def atoi(text: str) -> int:
    """Parse a leading integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. The result wraps to a signed 32-bit
    integer. Text without digits gives 0.
    """
    rest = text.lstrip(_ATOI_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _LEADING_DIGITS.match(rest).group()
    value = int(digits) if digits else 0
    value = (sign * value) & 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def is_space(char: str) -> bool:
    """Return True for a tab, newline, vertical tab, form feed, CR or space."""
    return len(char) == 1 and char in _SPACE_CHARS


def is_blank(text: str | None) -> bool:
    """Return True if ``text`` is None, empty, or only whitespace."""
    if not text:
        return True
    return all(is_space(ch) for ch in text)