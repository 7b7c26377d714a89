"""Time units a bare integer can be read in.

The set is closed: every consumer (interpreter, ranker tie-break, renderer
labels) walks exactly these four members in declaration order.
"""

from __future__ import annotations

from enum import Enum


class TimeUnit(str, Enum):
    """Unit used to read an integer as an offset from the Unix epoch."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def nanos(self) -> int:
        """Nanoseconds contained in one step of this unit."""

        return _NANOS_PER_UNIT[self]

    @property
    def order(self) -> int:
        """Declaration index, used to break ranking ties."""

        return _DECLARATION_ORDER[self]

    @classmethod
    def label_width(cls) -> int:
        """Width of the longest unit name (for aligned output)."""

        return max(len(unit.value) for unit in cls)


_NANOS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.SECONDS: 1_000_000_000,
    TimeUnit.MILLISECONDS: 1_000_000,
    TimeUnit.MICROSECONDS: 1_000,
    TimeUnit.NANOSECONDS: 1,
}

_DECLARATION_ORDER: dict[TimeUnit, int] = {unit: index for index, unit in enumerate(TimeUnit)}
