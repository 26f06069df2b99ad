"""Joining of path fragments into a single forward-slash path."""

from __future__ import annotations

from ._path_utils import SLASH, is_separator, split_segments, to_separator
from .roots import get_root


def _collapse_segments(segments: list[str]) -> list[str]:
    """Drop empty and ``.`` segments and fold ``..`` into its predecessor."""
    collapsed: list[str] = []
    for segment in segments:
        if segment in ("", "."):
            continue
        if segment == ".." and collapsed and collapsed[-1] != "..":
            collapsed.pop()
            continue
        collapsed.append(segment)
    return collapsed


def join(path: str, *paths: str) -> str:
    """
    Concatenate path fragments with ``/``.

    Only the first fragment may contribute a root (``C:/``, ``//host/share/``,
    ``file:///`` and so on); later fragments are treated as relative even
    when they look rooted. ``..`` removes the preceding segment regardless of
    whether a root is present, and a trailing separator on the last fragment
    is kept.

    Examples
    --------
    >>> join("a/", "b", "../c")
    'a/c'
    >>> join("C:\\\\x", "y/")
    'C:/x/y/'
    """
    fragments = (path, *paths)
    root = get_root(path)

    segments = split_segments(path[len(root) :])
    for fragment in paths:
        segments.extend(split_segments(fragment))

    joined = _collapse_segments(segments)
    last = fragments[-1]
    if last and is_separator(last[-1]):
        joined.append("")

    result = SLASH.join(joined)
    if root:
        result = to_separator(root, SLASH) + result
    return result


__all__ = ["join"]
