"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI solo necesita capturar `TimestampError` para traducir cualquier fallo
  a un mensaje y un exit code, sin conocer cada caso.
- Cada subclase conserva el dato que provocó el fallo para poder mostrarlo.
"""

from __future__ import annotations


class TimestampError(Exception):
    """Base de todos los fallos al interpretar una entrada."""


class NoTimestampFound(TimestampError):
    """La entrada no contiene ningún dígito decimal."""

    def __init__(self, raw_input: str) -> None:
        self.raw_input = raw_input
        super().__init__(
            f"{raw_input!r} does not contain any possible timestamps (no decimal digits)"
        )


class IntegerOverflow(TimestampError):
    """La secuencia de dígitos no cabe en un entero sin signo de 64 bits."""

    def __init__(self, digits: str, limit: int) -> None:
        self.digits = digits
        self.limit = limit
        super().__init__(
            f"{digits!r} is too large to be a timestamp (maximum is {limit})"
        )
