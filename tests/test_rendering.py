"""Tests for the fixed-layout instant renderer."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from core.domain.models import Instant
from core.services.extraction import U64_MAX
from core.services.rendering import civil_from_days, render_instant, render_pair


def _at(seconds: int) -> Instant:
    return Instant.from_unix_seconds(seconds)


def test_epoch() -> None:
    assert render_instant(_at(0)) == "1970-01-01 @ 12:00:00 AM"


def test_sample_filename_utc() -> None:
    assert render_instant(_at(1704772140)) == "2024-01-09 @ 03:49:00 AM"


def test_noon_is_pm() -> None:
    assert render_instant(_at(12 * 3600)) == "1970-01-01 @ 12:00:00 PM"
    assert render_instant(_at(13 * 3600 + 5)) == "1970-01-01 @ 01:00:05 PM"


def test_positive_offset() -> None:
    assert render_instant(_at(1704772140), timedelta(hours=2)) == "2024-01-09 @ 05:49:00 AM"


def test_negative_offset_crosses_midnight() -> None:
    assert render_instant(_at(1704772140), timedelta(hours=-5)) == "2024-01-08 @ 10:49:00 PM"


def test_half_hour_offset() -> None:
    assert render_instant(_at(0), timedelta(hours=5, minutes=30)) == "1970-01-01 @ 05:30:00 AM"


def test_subseconds_are_truncated() -> None:
    assert render_instant(Instant(unix_nanos=1_704_772_140 * 10**9 + 999_999_999)) == (
        "2024-01-09 @ 03:49:00 AM"
    )


def test_leap_day() -> None:
    seconds = int(datetime(2024, 2, 29, 23, 59, 59, tzinfo=timezone.utc).timestamp())
    assert render_instant(_at(seconds)) == "2024-02-29 @ 11:59:59 PM"


def test_beyond_datetime_range() -> None:
    assert render_instant(_at(253402300799)) == "9999-12-31 @ 11:59:59 PM"
    assert render_instant(_at(253402300800)) == "10000-01-01 @ 12:00:00 AM"


def test_u64_seconds_renders() -> None:
    text = render_instant(_at(U64_MAX))
    year = int(text.split("-", 1)[0])
    assert year > 500_000_000_000


@pytest.mark.parametrize(
    "seconds",
    [0, 59, 86_399, 951_782_400, 1_000_000_000, 1_704_772_140, 4_102_444_800, 32_503_680_000],
)
def test_matches_datetime(seconds: int) -> None:
    dt = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=seconds)
    hour12 = dt.hour % 12 or 12
    period = "AM" if dt.hour < 12 else "PM"
    expected = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"@ {hour12:02d}:{dt.minute:02d}:{dt.second:02d} {period}"
    )
    assert render_instant(_at(seconds)) == expected


def test_civil_from_days_before_epoch() -> None:
    assert civil_from_days(-1) == (1969, 12, 31)
    assert civil_from_days(0) == (1970, 1, 1)


def test_render_pair() -> None:
    utc, local = render_pair(_at(0), timedelta(hours=-1))
    assert utc == "1970-01-01 @ 12:00:00 AM"
    assert local == "1969-12-31 @ 11:00:00 PM"
    assert render_pair(_at(0), None) == ("1970-01-01 @ 12:00:00 AM", None)
