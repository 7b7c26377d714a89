"""Render de instantes en formato fijo (`YYYY-MM-DD @ HH:MM:SS AM`).

Por qué no usamos `datetime.strftime`:
- `datetime` solo cubre los años 1..9999 y un u64 leído como segundos cae
  mucho más lejos. La conversión día -> fecha civil se hace con aritmética
  entera sobre el calendario gregoriano proléptico, válida para cualquier año.
"""

from __future__ import annotations

from datetime import timedelta

from core.domain.models import Instant
from core.services.durations import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE

_DAYS_PER_ERA = 146_097  # 400 Gregorian years
_EPOCH_SHIFT_DAYS = 719_468  # 0000-03-01 -> 1970-01-01


def civil_from_days(days: int) -> tuple[int, int, int]:
    """(year, month, day) for a count of days since 1970-01-01."""

    shifted = days + _EPOCH_SHIFT_DAYS
    era = shifted // _DAYS_PER_ERA
    day_of_era = shifted - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    # Months counted from March so the leap day falls at the end of the year.
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def offset_seconds(offset: timedelta | None) -> int:
    if offset is None:
        return 0
    return offset // timedelta(seconds=1)


def render_instant(instant: Instant, offset: timedelta | None = None) -> str:
    """Format `instant` shifted by `offset` (UTC when None)."""

    total = instant.unix_seconds + offset_seconds(offset)
    days, second_of_day = divmod(total, SECONDS_PER_DAY)
    year, month, day = civil_from_days(days)

    hour, rest = divmod(second_of_day, SECONDS_PER_HOUR)
    minute, second = divmod(rest, SECONDS_PER_MINUTE)
    period = "AM" if hour < 12 else "PM"
    hour12 = hour % 12 or 12

    sign = "-" if year < 0 else ""
    return (
        f"{sign}{abs(year):04d}-{month:02d}-{day:02d} "
        f"@ {hour12:02d}:{minute:02d}:{second:02d} {period}"
    )


def render_pair(instant: Instant, offset: timedelta | None) -> tuple[str, str | None]:
    """UTC rendering plus local rendering (None when the offset is unknown)."""

    utc = render_instant(instant)
    local = render_instant(instant, offset) if offset is not None else None
    return utc, local
