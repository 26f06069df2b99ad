"""Segment normalisation for rooted and relative path strings."""

from __future__ import annotations

import typing as t

from ._path_utils import BACKSLASH, SLASH, iter_segments
from .platform import POSIX, Platform, resolve_platform
from .roots import SEP, get_root


def _collapse(text: str, root: str, sep: str) -> str:
    """Resolve ``.`` and ``..`` segments of the root-less *text*."""
    last = len(text) - 1
    result = ""
    for part, end in iter_segments(text):
        if part == "." and (root or result or end < last):
            continue

        if part == "..":
            # A doubled separator leaves a trailing sep; the parent is the
            # segment before it.
            base = result[:-1] if result.endswith(sep) else result
            prev_start = base.rfind(sep)
            prev_part = base[prev_start + 1 :]
            if (root or prev_part) and prev_part != "..":
                result = "" if prev_start == -1 else base[:prev_start]
                continue

        if result and result[-1] != sep:
            result += sep
        result += part
    return result


def normalize(
    path: str | None,
    to_native: bool = False,  # noqa: FBT001, FBT002
    *,
    platform: Platform | str = POSIX,
) -> str | None:
    """
    Return *path* with ``.`` and ``..`` resolved and one separator style.

    Parameters
    ----------
    path : str | None
        The path to normalise. Either separator is accepted in the input.
    to_native : bool, optional
        Write backslashes instead of forward slashes when *platform* is
        Windows. Ignored on POSIX targets.
    platform : Platform | str, optional
        Target platform. Defaults to :data:`~pathstr.platform.POSIX`.

    Returns
    -------
    str | None
        ``None`` when *path* is ``None``, ``"."`` for an empty path, and
        otherwise the root of *path* followed by its collapsed segments. A
        ``..`` is only kept when there is nothing left to remove, so relative
        paths may start with ``../``. Trailing separators are preserved.
    """
    if path is None:
        return path
    if not path:
        return "."

    target = resolve_platform(platform)
    sep = BACKSLASH if target.windows and to_native else SLASH
    root = get_root(path, sep)
    collapsed = _collapse(path[len(root) :], root, sep)
    if not root and not collapsed:
        # Everything cancelled out, e.g. ``a/..``.
        return "."
    return root + collapsed


def is_unc(path: str | None, *, platform: Platform | str = POSIX) -> bool:
    """Return ``True`` for ``\\\\host\\share`` paths on Windows targets."""
    target = resolve_platform(platform)
    if not target.windows or not path:
        return False
    native = t.cast("str", normalize(path, True, platform=target))
    return native.startswith(BACKSLASH * 2)


def make_absolute(path: str, is_normalized: bool = False) -> str:  # noqa: FBT001, FBT002
    """Prefix *path* with ``/`` unless it (once normalised) already starts with one."""
    candidate = path if is_normalized else normalize(path)
    if candidate and candidate[0] == SEP:
        return path
    return SEP + path


__all__ = ["is_unc", "make_absolute", "normalize"]
