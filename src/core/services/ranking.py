"""Plausibility ranking of unit candidates.

Heuristic: a timestamp embedded in a recently created filename is close to
"now" under its true unit, so the candidate nearest to `now` is ranked first.
Nothing in a bare integer says which unit it was written in; an old timestamp
can be misranked when a wrong unit happens to land closer to the present.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import Instant, UnitCandidate


def distance(instant: Instant, now: Instant) -> int:
    """Absolute distance in nanoseconds."""

    return abs(instant.unix_nanos - now.unix_nanos)


def rank_candidates(
    candidates: Iterable[UnitCandidate],
    now: Instant,
) -> list[tuple[int, UnitCandidate]]:
    """Return `(rank, candidate)` pairs, nearest to `now` first.

    Exact ties keep unit declaration order (seconds before nanoseconds).
    """

    items = list(candidates)
    units = [candidate.unit for candidate in items]
    if len(set(units)) != len(units):
        raise ValueError("each unit may appear only once")

    ordered = sorted(items, key=lambda c: (distance(c.instant, now), c.unit.order))
    return list(enumerate(ordered))
