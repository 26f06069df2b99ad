"""Root detection for POSIX, drive-letter, UNC and URI path strings.

The root is the non-traversable prefix of a path: a bare leading separator,
a drive such as ``C:\\``, a UNC share such as ``\\\\server\\share\\`` or a URI
scheme plus authority such as ``file:///``. Normalisation and joining strip the
root before touching segments and put it back verbatim afterwards.
"""

from __future__ import annotations

import re
import typing as t

from ._path_utils import SLASH, char_at, is_separator, to_separator
from ._validators import validate_separator

SEP: t.Final[str] = SLASH

_URI_MARKER: t.Final[str] = "://"
_ABSOLUTE_PATTERN: t.Final[re.Pattern[str]] = re.compile(
    r"^((/|[a-zA-Z]:\\)[^()<>\\'\"\[\]]+)"
)


def _unc_root(path: str, sep: str) -> str | None:
    """Return the ``\\\\host\\share\\`` prefix of *path*, if it has one."""
    if not is_separator(char_at(path, 1)) or is_separator(char_at(path, 2)):
        return None

    # The host starts at index 2; scanning from 3 means a host needs at least
    # two characters before its terminating separator.
    length = len(path)
    pos = start = 3
    while pos < length and not is_separator(path[pos]):
        pos += 1

    if start == pos or is_separator(char_at(path, pos + 1)):
        return None

    pos += 1
    while pos < length:
        if is_separator(path[pos]):
            return to_separator(path[: pos + 1], sep)
        pos += 1
    return None


def _drive_root(path: str, sep: str) -> str | None:
    """Return ``X:`` or ``X:<sep>`` when *path* starts with a drive letter."""
    letter = path[0]
    if not (letter.isascii() and letter.isalpha()) or char_at(path, 1) != ":":
        return None
    if is_separator(char_at(path, 2)):
        return path[:2] + sep
    return path[:2]


def _uri_root(path: str) -> str | None:
    """Return ``scheme://authority/`` up to the first separator after ``://``."""
    pos = path.find(_URI_MARKER)
    if pos == -1:
        return None
    for index in range(pos + len(_URI_MARKER), len(path)):
        if is_separator(path[index]):
            return path[: index + 1]
    return None


def get_root(path: str | None, sep: str = SEP) -> str:
    """
    Return the root prefix of *path*.

    Parameters
    ----------
    path : str | None
        The path string to inspect. ``None`` and ``""`` have no root.
    sep : str, optional
        Separator written into POSIX, drive and UNC roots. URI roots are
        returned as found.

    Returns
    -------
    str
        ``"/"`` for ``/usr/bin``, ``"C:\\"`` for ``C:\\files``,
        ``"\\\\host\\share\\"`` for ``\\\\host\\share\\x``, ``"file:///"``
        for ``file:///a/b`` and ``""`` for relative paths. Malformed UNC and
        URI shapes degrade to the next weaker classification. With the
        default separator the drive and UNC examples come back as ``"C:/"``
        and ``"//host/share/"``; pass ``sep="\\"`` for the backslash forms.

    Raises
    ------
    ValueError
        If *sep* is neither ``/`` nor ``\\``.
    """
    validate_separator(sep)
    if not path:
        return ""

    if is_separator(path[0]):
        unc = _unc_root(path, sep)
        return sep if unc is None else unc

    drive = _drive_root(path, sep)
    if drive is not None:
        return drive

    return _uri_root(path) or ""


def is_absolute(path: str) -> bool:
    """
    Return ``True`` when *path* looks absolute.

    This is a surface check rather than a root-aware one: it accepts a
    leading ``/`` or a ``X:\\`` drive followed by at least one character that
    is not a bracket, parenthesis, quote or backslash.
    """
    return bool(path) and _ABSOLUTE_PATTERN.match(path) is not None


def is_relative(path: str | None) -> bool:
    """Return ``True`` for paths such as ``./a`` or ``..`` that start with a dot."""
    return bool(path) and len(path) > 1 and path[0] == "."


__all__ = [
    "SEP",
    "get_root",
    "is_absolute",
    "is_relative",
]
