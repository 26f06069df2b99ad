"""Shared helpers for scanning separators in path strings."""

from __future__ import annotations

import typing as t

SLASH: t.Final[str] = "/"
BACKSLASH: t.Final[str] = "\\"
SEPARATORS: t.Final[frozenset[str]] = frozenset((SLASH, BACKSLASH))


def is_separator(char: str) -> bool:
    """Return ``True`` when *char* is ``/`` or ``\\``."""
    return char in SEPARATORS


def char_at(text: str, index: int) -> str:
    """Return the character at *index*, or ``""`` past the end of *text*."""
    return text[index : index + 1]


def iter_segments(text: str) -> t.Iterator[tuple[str, int]]:
    """
    Yield ``(segment, end)`` pairs for *text* split on either separator.

    ``end`` is the index of the separator that terminated the segment, or
    ``len(text)`` for the final segment. Empty segments are yielded too, so
    ``"a//b"`` produces ``"a"``, ``""`` and ``"b"``.
    """
    start = 0
    for end, char in enumerate(text):
        if char in SEPARATORS:
            yield text[start:end], end
            start = end + 1
    yield text[start:], len(text)


def split_segments(text: str) -> list[str]:
    """Split *text* on either separator, keeping empty segments."""
    return [segment for segment, _ in iter_segments(text)]


def to_separator(text: str, sep: str) -> str:
    """Rewrite every separator in *text* to *sep*."""
    return "".join(sep if char in SEPARATORS else char for char in text)
