"""Hand-written scanners for inline link destinations."""

from __future__ import annotations

import string
from typing import Optional, Tuple

_PUNCT = frozenset(string.punctuation)
_SPACE = frozenset(" \t\n\x0b\x0c\r")
_MAX_NESTED_PARENS = 32


def _ispunct(c: str) -> bool:
    return c in _PUNCT


def _is_control_or_space(c: str) -> bool:
    return c in _SPACE or ord(c) < 0x20 or ord(c) == 0x7F


def manual_scan_link_url(data: str) -> Optional[Tuple[str, int]]:
    """Scan a link destination at the start of ``data``.

    Returns the destination (without angle brackets, if it had them) and the
    number of characters consumed, or None if there is no valid destination.
    A destination must be followed by at least one more character.
    """
    if not data.startswith("<"):
        return manual_scan_link_url_2(data)

    size = len(data)
    i = 1
    while i < size:
        c = data[i]
        if c == ">":
            i += 1
            break
        if c == "\\":
            i += 2
        elif c in "\n<":
            return None
        else:
            i += 1

    if i >= size:
        return None
    return data[1:i - 1], i


def manual_scan_link_url_2(data: str) -> Optional[Tuple[str, int]]:
    """Scan an unbracketed link destination with balanced parentheses."""
    size = len(data)
    i = 0
    depth = 0

    while i < size:
        c = data[i]
        if c == "\\" and i + 1 < size and _ispunct(data[i + 1]):
            i += 2
        elif c == "(":
            depth += 1
            i += 1
            if depth > _MAX_NESTED_PARENS:
                return None
        elif c == ")":
            if depth == 0:
                break
            depth -= 1
            i += 1
        elif _is_control_or_space(c):
            if i == 0:
                return None
            break
        else:
            i += 1

    if i >= size or depth != 0:
        return None
    return data[:i], i


def count_newlines(data: str) -> Tuple[int, int]:
    """Number of newlines in ``data`` and characters after the last one."""
    newlines = data.count("\n")
    last = data.rfind("\n")
    since_newline = len(data) - last - 1 if last != -1 else len(data)
    return newlines, since_newline