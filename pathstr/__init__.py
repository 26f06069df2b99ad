"""Platform-aware manipulation of path strings without touching the filesystem.

Roots (POSIX, drive letter, UNC and URI) are detected by scanning the string,
``.`` and ``..`` segments are resolved relative to that root, and every
platform-dependent decision takes an explicit :class:`Platform` argument
instead of reading process-wide state.
"""

from __future__ import annotations

from .compare import is_equal_or_parent, relative
from .join import join
from .names import basename, dirname, extname, is_valid_basename
from .normalize import is_unc, make_absolute, normalize
from .platform import (
    MACOS,
    PLATFORM_OVERRIDE_ENV,
    POSIX,
    WINDOWS,
    Platform,
    detect_platform,
    platform_from_name,
    resolve_platform,
)
from .roots import SEP, get_root, is_absolute, is_relative

__all__ = [
    "MACOS",
    "PLATFORM_OVERRIDE_ENV",
    "POSIX",
    "SEP",
    "WINDOWS",
    "Platform",
    "basename",
    "detect_platform",
    "dirname",
    "extname",
    "get_root",
    "is_absolute",
    "is_equal_or_parent",
    "is_relative",
    "is_unc",
    "is_valid_basename",
    "join",
    "make_absolute",
    "normalize",
    "platform_from_name",
    "relative",
    "resolve_platform",
]
