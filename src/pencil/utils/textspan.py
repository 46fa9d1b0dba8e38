"""Utility functions for locating words and blank runs in pencil text.

The helpers in this module are pure.  Spans are represented as half-open
intervals ``[start, end)`` where ``start`` is inclusive and ``end`` is
exclusive.
"""

from __future__ import annotations

__all__ = ["BLANK_CHARS", "is_blank", "find_last", "find_blank_run"]

BLANK_CHARS: frozenset[str] = frozenset(" \n")


def is_blank(char: str) -> bool:
    """Return ``True`` for characters a pencil never spends graphite on."""

    return char in BLANK_CHARS


def find_last(text: str, word: str) -> tuple[int, int] | None:
    """Return the span of the rightmost occurrence of ``word`` in ``text``.

    Matching is an exact, case-sensitive substring search with no notion of
    word boundaries.  An empty ``word`` never matches.
    """

    if not word:
        return None
    start = text.rfind(word)
    if start == -1:
        return None
    return start, start + len(word)


def find_blank_run(text: str, min_width: int = 2) -> int | None:
    """Return the index of the first run of at least ``min_width`` spaces."""

    if min_width < 1:
        raise ValueError("min_width must be positive")
    pos = text.find(" " * min_width)
    return None if pos == -1 else pos
