"""Tests for the closest-to-now plausibility ranking."""

from __future__ import annotations

import pytest

from core.domain.models import Instant, UnitCandidate
from core.domain.units import TimeUnit
from core.services.interpretation import interpret_all
from core.services.ranking import distance, rank_candidates


def _units(ranked):
    return [candidate.unit for _, candidate in ranked]


def test_seconds_closest_for_recent_filename(now: Instant) -> None:
    ranked = rank_candidates(interpret_all(1704772140), now)
    assert [rank for rank, _ in ranked] == [0, 1, 2, 3]
    assert _units(ranked) == [
        TimeUnit.SECONDS,
        TimeUnit.MILLISECONDS,
        TimeUnit.MICROSECONDS,
        TimeUnit.NANOSECONDS,
    ]


def test_milliseconds_closest_for_millisecond_value(now: Instant) -> None:
    ranked = rank_candidates(interpret_all(1704772140123), now)
    assert _units(ranked)[0] is TimeUnit.MILLISECONDS


def test_nanoseconds_closest_for_nanosecond_value(now: Instant) -> None:
    ranked = rank_candidates(interpret_all(1704772140123456789), now)
    assert _units(ranked)[0] is TimeUnit.NANOSECONDS
    # Seconds lands billions of years away.
    assert _units(ranked)[-1] is TimeUnit.SECONDS


def test_ties_keep_declaration_order(now: Instant) -> None:
    ranked = rank_candidates(interpret_all(0), now)
    assert _units(ranked) == list(TimeUnit)


def test_input_order_does_not_matter(now: Instant) -> None:
    candidates = interpret_all(1704772140)
    assert rank_candidates(reversed(candidates), now) == rank_candidates(candidates, now)


def test_idempotent(now: Instant) -> None:
    candidates = interpret_all(98765432101)
    assert rank_candidates(candidates, now) == rank_candidates(candidates, now)


def test_distance_is_absolute() -> None:
    a = Instant(unix_nanos=10)
    b = Instant(unix_nanos=25)
    assert distance(a, b) == distance(b, a) == 15


def test_duplicate_units_rejected(now: Instant) -> None:
    candidate = UnitCandidate(unit=TimeUnit.SECONDS, instant=now)
    with pytest.raises(ValueError):
        rank_candidates([candidate, candidate], now)
