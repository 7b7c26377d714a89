"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a la CLI o a Rich.
- `model_dump(mode="json")` da la representación estructurada que consume
  cualquier capa de presentación (terminal, JSON).

Nota:
- Todos los modelos son inmutables (`frozen=True`): se calculan una vez por
  invocación y nunca se mutan.
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.units import TimeUnit

NANOS_PER_SECOND = 1_000_000_000


class Instant(BaseModel):
    """Punto absoluto en el tiempo, en nanosegundos desde 1970-01-01T00:00:00Z.

    Por qué un entero y no `datetime`:
    - `datetime` termina en el año 9999; un u64 leído como segundos llega a
      cientos de miles de millones de años. Los enteros de Python no desbordan.
    """

    model_config = ConfigDict(frozen=True)

    unix_nanos: int = Field(
        ...,
        description="Nanosegundos transcurridos desde el epoch (negativo = antes).",
    )

    @classmethod
    def from_unix_seconds(cls, seconds: int) -> "Instant":
        return cls(unix_nanos=seconds * NANOS_PER_SECOND)

    @property
    def unix_seconds(self) -> int:
        """Whole seconds since the epoch (floored)."""

        return self.unix_nanos // NANOS_PER_SECOND


class Extraction(BaseModel):
    """Resultado del extractor de dígitos."""

    model_config = ConfigDict(frozen=True)

    digits: str = Field(
        ...,
        min_length=1,
        pattern=r"^[0-9]+$",
        description="Secuencia contigua de dígitos decimales elegida.",
    )
    start: int = Field(
        default=0,
        ge=0,
        description="Offset de la secuencia dentro de la entrada original.",
    )
    whole_input: bool = Field(
        default=False,
        description="True si la entrada completa ya era numérica (fast path).",
    )
    run_count: int = Field(
        default=1,
        ge=1,
        description="Cantidad de secuencias de dígitos presentes en la entrada.",
    )


class UnitCandidate(BaseModel):
    """Una lectura del entero bajo una unidad concreta."""

    model_config = ConfigDict(frozen=True)

    unit: TimeUnit
    instant: Instant


class DurationComponent(BaseModel):
    """Magnitud de una unidad de calendario dentro de una duración."""

    model_config = ConfigDict(frozen=True)

    unit: str = Field(..., min_length=1, description="Nombre en singular (p.ej. 'month').")
    magnitude: int = Field(..., ge=0)

    def render(self) -> str:
        name = self.unit if self.magnitude == 1 else f"{self.unit}s"
        return f"{self.magnitude} {name}"


class RankedCandidate(BaseModel):
    """Candidato ya ordenado, con sus representaciones para presentar.

    Por qué incluye los strings renderizados:
    - La capa de presentación (terminal/JSON) no necesita volver a calcular
      nada: solo decide colores y layout.
    """

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=0, le=3, description="0 = interpretación más plausible.")
    unit: TimeUnit
    instant: Instant
    distance_nanos: int = Field(
        ...,
        ge=0,
        description="|instant - now| en nanosegundos (la métrica de plausibilidad).",
    )
    is_future: bool = Field(
        default=False,
        description="True si el instante queda después de `now`.",
    )
    utc: str = Field(..., description="Instante en UTC, formato 'YYYY-MM-DD @ HH:MM:SS AM'.")
    local: str | None = Field(
        default=None,
        description="Instante en el offset local (None si el offset es desconocido).",
    )
    components: list[DurationComponent] = Field(default_factory=list)
    duration: str = Field(..., min_length=1, description="Duración legible desde `now`.")
    relative: str = Field(..., min_length=1, description="Frase relativa ('in ...' / '... ago').")


class TimestampReport(BaseModel):
    """Agregado final de una invocación: entrada, extracción y los 4 candidatos."""

    model_config = ConfigDict(frozen=True)

    raw_input: str
    extraction: Extraction
    value: int = Field(..., ge=0, description="Entero sin signo leído de los dígitos.")
    now: Instant
    local_offset: timedelta | None = Field(
        default=None,
        description="Offset local usado para la columna 'local' (None = solo UTC).",
    )
    candidates: list[RankedCandidate] = Field(..., min_length=4, max_length=4)

    @property
    def non_digit_note(self) -> bool:
        """True when the input carried non-digit characters around the timestamp."""

        return not self.extraction.whole_input

    @property
    def best(self) -> RankedCandidate:
        return self.candidates[0]

    @property
    def others(self) -> list[RankedCandidate]:
        return self.candidates[1:]

    def candidate_for(self, unit: TimeUnit) -> RankedCandidate:
        for candidate in self.candidates:
            if candidate.unit is unit:
                return candidate
        raise KeyError(unit)
