"""Contrato del reloj.

Por qué Protocol:
- El Core nunca lee el reloj del sistema: recibe `now` y el offset local como
  valores. Este contrato permite que la CLI use el reloj real y los tests uno
  fijo, sin herencia.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol, runtime_checkable

from core.domain.models import Instant


@runtime_checkable
class Clock(Protocol):
    """Fuente del instante actual y del offset local.

    Reglas de diseño:
    - Cada método se llama una sola vez por invocación.
    - `local_offset` devuelve None si no se puede determinar.
    """

    def now(self) -> Instant:
        ...

    def local_offset(self) -> timedelta | None:
        ...
