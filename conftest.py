"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from pathstr.platform import PLATFORM_OVERRIDE_ENV


@pytest.fixture(autouse=True)
def clear_platform_override(monkeypatch: pytest.MonkeyPatch) -> t.Iterator[None]:
    """Ensure a platform override from the outer environment never leaks in."""
    monkeypatch.delenv(PLATFORM_OVERRIDE_ENV, raising=False)
    yield
