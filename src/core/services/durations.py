"""Relative-duration formatting.

Fixed conversion constants, no calendar math: a year is always 365 days and a
month always 30 days. The breakdown is greedy from years down to seconds and
drops zero components; sub-second precision is discarded.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.models import NANOS_PER_SECOND, DurationComponent, Instant

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY
SECONDS_PER_MONTH = 30 * SECONDS_PER_DAY
SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY

# Descending granularity.
DURATION_UNITS: tuple[tuple[str, int], ...] = (
    ("year", SECONDS_PER_YEAR),
    ("month", SECONDS_PER_MONTH),
    ("week", SECONDS_PER_WEEK),
    ("day", SECONDS_PER_DAY),
    ("hour", SECONDS_PER_HOUR),
    ("minute", SECONDS_PER_MINUTE),
    ("second", 1),
)

_UNIT_SIZES = dict(DURATION_UNITS)

MINIMUM_PHRASE = "0 seconds"


def elapsed_seconds(a: Instant, b: Instant) -> int:
    """|a - b| in whole seconds."""

    return abs(a.unix_nanos - b.unix_nanos) // NANOS_PER_SECOND


def decompose(seconds: int) -> list[DurationComponent]:
    if seconds < 0:
        raise ValueError("elapsed seconds must be non-negative")

    components: list[DurationComponent] = []
    remainder = seconds
    for name, size in DURATION_UNITS:
        magnitude, remainder = divmod(remainder, size)
        if magnitude:
            components.append(DurationComponent(unit=name, magnitude=magnitude))
    return components


def to_seconds(components: Sequence[DurationComponent]) -> int:
    """Inverse of `decompose` using the same constants."""

    return sum(component.magnitude * _UNIT_SIZES[component.unit] for component in components)


def format_components(components: Sequence[DurationComponent]) -> str:
    if not components:
        return MINIMUM_PHRASE
    return " ".join(component.render() for component in components)


def format_duration(a: Instant, b: Instant) -> str:
    return format_components(decompose(elapsed_seconds(a, b)))


def relative_phrase(instant: Instant, now: Instant) -> str:
    """'in <duration>' for future instants, '<duration> ago' otherwise."""

    text = format_duration(instant, now)
    if instant.unix_nanos > now.unix_nanos:
        return f"in {text}"
    return f"{text} ago"
