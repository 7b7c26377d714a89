"""Shared fixtures: fixed clocks only, never the wall clock."""

from __future__ import annotations

from datetime import timedelta

import pytest

from core.domain.models import Instant

SAVED_FILE_SECONDS = 1704772140  # 2024-01-09T03:49:00Z


@pytest.fixture
def now() -> Instant:
    """One minute after the timestamp in the sample filename."""
    return Instant.from_unix_seconds(SAVED_FILE_SECONDS + 60)


@pytest.fixture
def plus_two_hours() -> timedelta:
    return timedelta(hours=2)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep developer env vars and .env files out of the tests."""
    for name in (
        "READTIMESTAMP_LOG_LEVEL",
        "READTIMESTAMP_COLOR",
        "READTIMESTAMP_SHOW_LOCAL",
        "READTIMESTAMP_UTC_OFFSET_MINUTES",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
