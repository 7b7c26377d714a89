"""Digit-substring extraction and unsigned parsing.

The first maximal run of ASCII digits wins (not the longest one). A single
left-to-right pass also counts how many runs exist so the presentation layer
can mention that other candidates were ignored.
"""

from __future__ import annotations

from core.domain.errors import IntegerOverflow, NoTimestampFound
from core.domain.models import Extraction
from core.logging_config import get_logger

U64_MAX = 2**64 - 1

_U64_MAX_DIGITS = len(str(U64_MAX))

_log = get_logger(__name__)


def _is_ascii_digit(ch: str) -> bool:
    # str.isdigit() also accepts things like "²" or Arabic-Indic digits.
    return "0" <= ch <= "9"


def extract_digits(raw: str) -> Extraction:
    """Return the digit run to interpret, or raise `NoTimestampFound`."""

    if raw and all(_is_ascii_digit(ch) for ch in raw):
        return Extraction(digits=raw, start=0, whole_input=True, run_count=1)

    first_start: int | None = None
    first_end: int | None = None
    run_count = 0
    in_run = False

    for index, ch in enumerate(raw):
        if _is_ascii_digit(ch):
            if not in_run:
                run_count += 1
                in_run = True
                if first_start is None:
                    first_start = index
        else:
            if in_run and first_end is None:
                first_end = index
            in_run = False

    if first_start is None:
        raise NoTimestampFound(raw)
    if first_end is None:
        first_end = len(raw)

    _log.debug("found %d digit run(s) in %r, using offset %d", run_count, raw, first_start)
    return Extraction(
        digits=raw[first_start:first_end],
        start=first_start,
        whole_input=False,
        run_count=run_count,
    )


def parse_timestamp(digits: str) -> int:
    """Parse a digit run as an unsigned 64-bit integer.

    Values above `U64_MAX` raise `IntegerOverflow`; nothing is truncated.
    """

    significant = digits.lstrip("0")
    # Checked before int() so very long runs never hit the int/str conversion limit.
    if len(significant) > _U64_MAX_DIGITS:
        raise IntegerOverflow(digits, U64_MAX)

    value = int(significant) if significant else 0
    if value > U64_MAX:
        raise IntegerOverflow(digits, U64_MAX)
    return value
