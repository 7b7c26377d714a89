"""Lectura de un entero bajo cada una de las cuatro unidades.

Por qué aritmética entera en nanosegundos:
- Es exacta para cualquier u64 en cualquier unidad (sin floats, sin límites
  de `datetime`), así que esta etapa no tiene casos de error.
"""

from __future__ import annotations

from core.domain.models import Instant, UnitCandidate
from core.domain.units import TimeUnit


def interpret(value: int, unit: TimeUnit) -> Instant:
    """Instant at `value` steps of `unit` after the epoch."""

    return Instant(unix_nanos=value * unit.nanos)


def interpret_all(value: int) -> list[UnitCandidate]:
    """One candidate per unit, in declaration order."""

    return [UnitCandidate(unit=unit, instant=interpret(value, unit)) for unit in TimeUnit]
