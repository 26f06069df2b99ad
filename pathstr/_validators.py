"""Shared validation helpers."""

from __future__ import annotations

from ._path_utils import SEPARATORS


def validate_separator(sep: str) -> None:
    """Ensure *sep* is one of the two separators path strings understand."""
    if not isinstance(sep, str):
        msg = f"separator must be a str, not {type(sep).__name__}"
        raise TypeError(msg)

    if sep not in SEPARATORS:
        msg = f"separator must be '/' or '\\', got {sep!r}"
        raise ValueError(msg)
