"""Comparisons between normalised paths: relative paths and containment."""

from __future__ import annotations

from ._path_utils import SLASH
from .normalize import normalize
from .platform import POSIX, Platform, resolve_platform


def _normalized(path: str) -> str:
    result = normalize(path)
    return "" if result is None else result


def relative(from_path: str, to_path: str) -> str:
    """
    Return the path that leads from *from_path* to *to_path*.

    Both paths are normalised and compared segment by segment. Every segment
    of *from_path* after the shared prefix becomes a ``..``. Paths with
    different roots share no prefix, so the result climbs all the way out of
    *from_path* first.
    """
    from_parts = _normalized(from_path).split(SLASH)
    to_parts = _normalized(to_path).split(SLASH)
    if len(from_parts) > 1 and not from_parts[-1]:
        # A trailing separator on the source is not a segment to climb out of.
        from_parts.pop()

    shared = 0
    for from_part, to_part in zip(from_parts, to_parts):
        if from_part != to_part:
            break
        shared += 1

    remaining = from_parts[shared:]
    return SLASH.join([".."] * len(remaining) + to_parts[shared:])


def is_equal_or_parent(
    path: str, candidate: str, *, platform: Platform | str = POSIX
) -> bool:
    """
    Return ``True`` when *path* equals *candidate* or lies beneath it.

    Parameters
    ----------
    path : str
        The path being tested.
    candidate : str
        The potential ancestor. One trailing separator is ignored.
    platform : Platform | str, optional
        Decides whether letter case matters. Defaults to
        :data:`~pathstr.platform.POSIX` (case-sensitive).

    Notes
    -----
    A prefix only counts when it ends on a segment boundary, so ``/foo2`` is
    not inside ``/foo``.
    """
    if path == candidate:
        return True

    path = _normalized(path)
    candidate = _normalized(candidate)
    if candidate.endswith(SLASH):
        candidate = candidate[:-1]

    if path == candidate:
        return True

    if not resolve_platform(platform).case_sensitive:
        path = path.lower()
        candidate = candidate.lower()
        if path == candidate:
            return True

    if not path.startswith(candidate):
        return False
    return path[len(candidate) : len(candidate) + 1] == SLASH


__all__ = ["is_equal_or_parent", "relative"]
