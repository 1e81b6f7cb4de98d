"""Flanking rules for delimiter runs and smart dash rendering."""

from __future__ import annotations

import unicodedata
from typing import AbstractSet, Tuple

_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_punctuation(ch: str) -> bool:
    """Whether ``ch`` is in a Unicode punctuation category."""
    return unicodedata.category(ch).startswith("P")


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_WHITESPACE


def scan_delims(
    data: str, pos: int, c: str, skip_chars: AbstractSet[str]
) -> Tuple[int, bool, bool]:
    """Measure the delimiter run of ``c`` at ``pos`` and whether it can open or close.

    Quotes always form a run of one. Characters in ``skip_chars`` are passed
    over when looking at the neighbours of the run. Returns the run length
    and the can-open and can-close flags.
    """
    if pos == 0:
        before_char = "\n"
    else:
        before_pos = pos - 1
        while before_pos > 0 and data[before_pos] in skip_chars:
            before_pos -= 1
        before_char = data[before_pos]
        if before_char in skip_chars:
            before_char = "\n"

    if c in "'\"":
        numdelims = 1
    else:
        numdelims = 0
        while pos + numdelims < len(data) and data[pos + numdelims] == c:
            numdelims += 1

    end = pos + numdelims
    if end >= len(data):
        after_char = "\n"
    else:
        after_pos = end
        while after_pos < len(data) - 1 and data[after_pos] in skip_chars:
            after_pos += 1
        after_char = data[after_pos]
        if after_char in skip_chars:
            after_char = "\n"

    before_space = _is_whitespace(before_char)
    after_space = _is_whitespace(after_char)
    before_punct = is_punctuation(before_char)
    after_punct = is_punctuation(after_char)

    left_flanking = (
        numdelims > 0
        and not after_space
        and not (after_punct and not before_space and not before_punct)
    )
    right_flanking = (
        numdelims > 0
        and not before_space
        and not (before_punct and not after_space and not after_punct)
    )

    if c == "_":
        return (
            numdelims,
            left_flanking and (not right_flanking or before_punct),
            right_flanking and (not left_flanking or after_punct),
        )
    if c in "'\"":
        return (
            numdelims,
            left_flanking
            and (not right_flanking or before_char in "([")
            and before_char not in "])",
            right_flanking,
        )
    return numdelims, left_flanking, right_flanking


def smart_dashes(count: int) -> str:
    """The em and en dashes that a run of ``count`` hyphens becomes."""
    if count < 0:
        raise ValueError("hyphen count must not be negative")
    if count % 3 == 0:
        ens, ems = 0, count // 3
    elif count % 2 == 0:
        ens, ems = count // 2, 0
    elif count % 3 == 2:
        ens, ems = 1, (count - 2) // 3
    else:
        ens, ems = 2, (count - 4) // 3
    return "\u2014" * max(ems, 0) + "\u2013" * max(ens, 0)