"""Implementaciones de `Clock`."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta

from core.domain.models import Instant


class SystemClock:
    """Reloj real del sistema."""

    def now(self) -> Instant:
        return Instant(unix_nanos=time.time_ns())

    def local_offset(self) -> timedelta | None:
        try:
            return datetime.now().astimezone().utcoffset()
        except (OSError, OverflowError, ValueError):
            return None


@dataclass(frozen=True)
class FixedClock:
    """Reloj congelado (tests y `--now`)."""

    instant: Instant
    offset: timedelta | None = None

    def now(self) -> Instant:
        return self.instant

    def local_offset(self) -> timedelta | None:
        return self.offset
