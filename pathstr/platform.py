"""Platform selection shared across pathstr modules.

Path operations never consult the host on their own. Callers pass a
:class:`Platform` (or a platform name) to the functions that care about
separator style or case sensitivity, and :func:`detect_platform` is the single
place that looks at the running interpreter.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import sys
import typing as t

_logger = logging.getLogger(__name__)

# Tests set this override to emulate alternative platforms (for example
# Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "PATHSTR_PLATFORM_OVERRIDE"

# Each entry pairs a prefix (matched against the start of a normalised
# platform name such as ``sys.platform``) with the canonical name it maps to.
_WINDOWS_PREFIXES: t.Final[tuple[str, ...]] = ("win", "nt")
_CASE_SENSITIVE_PREFIXES: t.Final[tuple[str, ...]] = ("linux", "posix")


@dc.dataclass(frozen=True, slots=True)
class Platform:
    """
    Separator and case-sensitivity rules for one target operating system.

    Attributes
    ----------
    name : str
        Lower-case platform name, e.g. ``"linux"`` or ``"win32"``.
    windows : bool
        ``True`` when the target uses backslash as its native separator and
        the Windows file-name rules.
    case_sensitive : bool
        ``True`` when path comparisons must respect letter case.
    """

    name: str
    windows: bool = False
    case_sensitive: bool = True

    @property
    def native_sep(self) -> str:
        """Return the separator the target uses natively."""
        return "\\" if self.windows else "/"

    def __str__(self) -> str:
        """Return the platform name."""
        return self.name


POSIX: t.Final[Platform] = Platform("linux", windows=False, case_sensitive=True)
MACOS: t.Final[Platform] = Platform("darwin", windows=False, case_sensitive=False)
WINDOWS: t.Final[Platform] = Platform("win32", windows=True, case_sensitive=False)

_BY_NAME: t.Final[dict[str, Platform]] = {
    "linux": POSIX,
    "posix": POSIX,
    "darwin": MACOS,
    "macos": MACOS,
    "win32": WINDOWS,
    "windows": WINDOWS,
    "nt": WINDOWS,
}


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def platform_from_name(name: str) -> Platform:
    """
    Map a platform name onto its :class:`Platform` rules.

    Parameters
    ----------
    name : str
        A value such as ``sys.platform``, ``"windows"`` or ``"posix"``.

    Returns
    -------
    Platform
        One of the predefined platforms when *name* is a known alias,
        otherwise a platform derived from the name's prefix. Only Linux-like
        names produce a case-sensitive platform.

    Raises
    ------
    ValueError
        If *name* is empty or only whitespace.
    """
    normalised = _normalise(name)
    if not normalised:
        msg = "platform name must not be empty"
        raise ValueError(msg)

    if known := _BY_NAME.get(normalised):
        return known

    if normalised.startswith(_WINDOWS_PREFIXES):
        return dc.replace(WINDOWS, name=normalised)

    return Platform(
        normalised,
        windows=False,
        case_sensitive=normalised.startswith(_CASE_SENSITIVE_PREFIXES),
    )


def detect_platform(platform: str | None = None) -> Platform:
    """Return the effective host platform, honouring test overrides."""
    if platform:
        return platform_from_name(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        _logger.debug(
            "Using platform %r from %s", override.strip(), PLATFORM_OVERRIDE_ENV
        )
        return platform_from_name(override)

    _logger.debug("Using host platform %r", sys.platform)
    return platform_from_name(sys.platform)


def resolve_platform(platform: Platform | str) -> Platform:
    """Coerce a :class:`Platform` or platform name into a :class:`Platform`."""
    if isinstance(platform, Platform):
        return platform
    if isinstance(platform, str):
        return platform_from_name(platform)
    msg = f"platform must be a Platform or str, not {type(platform).__name__}"
    raise TypeError(msg)


__all__ = [
    "MACOS",
    "PLATFORM_OVERRIDE_ENV",
    "POSIX",
    "WINDOWS",
    "Platform",
    "detect_platform",
    "platform_from_name",
    "resolve_platform",
]
