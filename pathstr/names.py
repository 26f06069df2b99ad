"""File-name validation and character-scan decomposition of path strings.

None of these helpers normalise their input; they look at the raw string.
"""

from __future__ import annotations

import re
import typing as t

from ._path_utils import BACKSLASH, SLASH
from .platform import POSIX, Platform, resolve_platform

# Reference: https://en.wikipedia.org/wiki/Filename
_POSIX_FORBIDDEN_CHARS: t.Final[frozenset[str]] = frozenset("\\/")
_WINDOWS_FORBIDDEN_CHARS: t.Final[frozenset[str]] = frozenset('\\/:*?"<>|')
_WINDOWS_RESERVED_NAMES: t.Final[re.Pattern[str]] = re.compile(
    r"(con|prn|aux|clock\$|nul|lpt[1-9]|com[1-9])", re.IGNORECASE
)
_RESERVED_VALUES: t.Final[frozenset[str]] = frozenset((".", ".."))


def is_valid_basename(name: str | None, *, platform: Platform | str = POSIX) -> bool:
    """Return ``True`` when *name* can be used as a file or folder name."""
    if not name or name.isspace():
        return False

    target = resolve_platform(platform)
    forbidden = _WINDOWS_FORBIDDEN_CHARS if target.windows else _POSIX_FORBIDDEN_CHARS
    if any(char in forbidden for char in name):
        return False

    if target.windows and _WINDOWS_RESERVED_NAMES.fullmatch(name):
        return False

    if name in _RESERVED_VALUES:
        return False

    # Windows drops trailing dots and spaces when creating files.
    return not (target.windows and (name.endswith(".") or name != name.rstrip()))


def _last_separator(path: str) -> int:
    """Return the index of the last ``/``, falling back to the last ``\\``."""
    index = path.rfind(SLASH)
    if index == -1:
        index = path.rfind(BACKSLASH)
    return index


def dirname(path: str) -> str:
    """Return the directory part of *path*, or ``"."`` when there is none."""
    index = _last_separator(path)
    if index == -1:
        return "."
    if index == 0:
        return path[0]
    return path[:index]


def basename(path: str) -> str:
    """Return the final segment of *path*, ignoring trailing separators."""
    index = _last_separator(path)
    while index != -1 and index == len(path) - 1:
        path = path[:-1]
        index = _last_separator(path)
    if index == -1:
        return path
    return path[index + 1 :]


def extname(path: str) -> str:
    """Return the extension of the last segment, e.g. ``.gz`` for ``a.tar.gz``."""
    name = basename(path)
    index = name.rfind(".")
    return name[index:] if index != -1 else ""


__all__ = ["basename", "dirname", "extname", "is_valid_basename"]
