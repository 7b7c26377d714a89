"""Timestamp analysis orchestration.

This module composes extraction, parsing, unit interpretation, ranking,
rendering and duration formatting into a single `TimestampReport`. It keeps
side-effects (clock reads, printing, colors) out: the caller supplies `now`
and the local offset once, and every candidate is computed against those same
values so the four relative durations are consistent with each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from core.domain.models import Instant, RankedCandidate, TimestampReport, UnitCandidate
from core.interfaces.clock import Clock
from core.logging_config import get_logger
from core.services.durations import decompose, elapsed_seconds, format_components, relative_phrase
from core.services.extraction import extract_digits, parse_timestamp
from core.services.interpretation import interpret_all
from core.services.ranking import distance, rank_candidates
from core.services.rendering import render_pair

_log = get_logger(__name__)


@dataclass(frozen=True)
class AnalysisRequest:
    """Inputs of one run, captured once at the start."""

    raw_input: str
    now: Instant
    local_offset: timedelta | None = None

    @classmethod
    def from_clock(cls, raw_input: str, clock: Clock) -> "AnalysisRequest":
        return cls(raw_input=raw_input, now=clock.now(), local_offset=clock.local_offset())


def build_candidate(
    rank: int,
    candidate: UnitCandidate,
    *,
    now: Instant,
    local_offset: timedelta | None,
) -> RankedCandidate:
    """Attach renderings and the relative duration to a ranked candidate."""

    utc, local = render_pair(candidate.instant, local_offset)
    components = decompose(elapsed_seconds(candidate.instant, now))
    return RankedCandidate(
        rank=rank,
        unit=candidate.unit,
        instant=candidate.instant,
        distance_nanos=distance(candidate.instant, now),
        is_future=candidate.instant.unix_nanos > now.unix_nanos,
        utc=utc,
        local=local,
        components=components,
        duration=format_components(components),
        relative=relative_phrase(candidate.instant, now),
    )


def analyze(
    raw_input: str,
    now: Instant,
    local_offset: timedelta | None = None,
) -> TimestampReport:
    """Run the whole pipeline for one input string.

    Raises `NoTimestampFound` or `IntegerOverflow`; no partial report exists.
    """

    extraction = extract_digits(raw_input)
    value = parse_timestamp(extraction.digits)
    _log.debug("interpreting %d (digits %r)", value, extraction.digits)

    ranked = rank_candidates(interpret_all(value), now)
    candidates = [
        build_candidate(rank, candidate, now=now, local_offset=local_offset)
        for rank, candidate in ranked
    ]
    _log.debug("ranking: %s", ", ".join(c.unit.value for c in candidates))

    return TimestampReport(
        raw_input=raw_input,
        extraction=extraction,
        value=value,
        now=now,
        local_offset=local_offset,
        candidates=candidates,
    )


def run_analysis(request: AnalysisRequest) -> TimestampReport:
    return analyze(request.raw_input, request.now, request.local_offset)
