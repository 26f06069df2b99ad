"""Tests for platform selection and detection."""

from __future__ import annotations

import logging
import sys

import pytest

import pathstr.platform as platform


class TestPlatformFromName:
    """Tests for platform_from_name()."""

    @pytest.mark.parametrize("name", ["win32", "windows", "NT", " Windows "])
    def test_windows_aliases(self, name: str) -> None:
        """Windows names map onto the predefined Windows platform."""
        assert platform.platform_from_name(name) is platform.WINDOWS

    @pytest.mark.parametrize("name", ["linux", "posix", "LINUX"])
    def test_posix_aliases(self, name: str) -> None:
        """Linux-like names map onto the case-sensitive POSIX platform."""
        assert platform.platform_from_name(name) is platform.POSIX

    def test_darwin_is_case_insensitive(self) -> None:
        """macOS uses forward slashes but ignores case."""
        assert platform.platform_from_name("darwin") is platform.MACOS
        assert platform.MACOS.case_sensitive is False
        assert platform.MACOS.windows is False

    def test_linux_prefix_is_case_sensitive(self) -> None:
        """Versioned Linux names keep case sensitivity."""
        result = platform.platform_from_name("linux2")
        assert result.name == "linux2"
        assert result.case_sensitive is True
        assert result.windows is False

    def test_windows_prefix(self) -> None:
        """Unknown ``win`` prefixed names follow the Windows rules."""
        result = platform.platform_from_name("win64")
        assert result.name == "win64"
        assert result.windows is True
        assert result.case_sensitive is False

    def test_unknown_platform_is_case_insensitive_posix(self) -> None:
        """Anything else behaves like POSIX without case sensitivity."""
        result = platform.platform_from_name("freebsd14")
        assert result == platform.Platform(
            "freebsd14", windows=False, case_sensitive=False
        )

    def test_empty_name_rejected(self) -> None:
        """Blank names cannot be mapped."""
        with pytest.raises(ValueError, match="must not be empty"):
            platform.platform_from_name("   ")


def test_native_separator() -> None:
    """Only Windows uses backslashes natively."""
    assert platform.WINDOWS.native_sep == "\\"
    assert platform.POSIX.native_sep == "/"
    assert platform.MACOS.native_sep == "/"
    assert str(platform.WINDOWS) == "win32"


class TestResolvePlatform:
    """Tests for resolve_platform()."""

    def test_platform_passes_through(self) -> None:
        """Platform instances are returned as given."""
        assert platform.resolve_platform(platform.MACOS) is platform.MACOS

    def test_name_is_mapped(self) -> None:
        """Strings are looked up by name."""
        assert platform.resolve_platform("windows") is platform.WINDOWS

    def test_other_types_rejected(self) -> None:
        """Anything else is a usage error."""
        with pytest.raises(TypeError, match="must be a Platform or str"):
            platform.resolve_platform(3)  # type: ignore[arg-type]


class TestDetectPlatform:
    """Tests for detect_platform()."""

    def test_explicit_name_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit name is used even when an override is set."""
        monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")
        assert platform.detect_platform("linux") is platform.POSIX

    def test_override_env_forces_windows(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Tests can force alternate platforms via the override variable."""
        monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")
        assert platform.detect_platform() is platform.WINDOWS

    def test_host_platform_used_without_override(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without an override the interpreter's platform decides."""
        monkeypatch.setattr(sys, "platform", "darwin")
        assert platform.detect_platform() is platform.MACOS

    def test_detection_source_is_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The override variable is named in the debug log."""
        monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "windows")
        with caplog.at_level(logging.DEBUG, logger="pathstr.platform"):
            platform.detect_platform()
        assert platform.PLATFORM_OVERRIDE_ENV in caplog.text
