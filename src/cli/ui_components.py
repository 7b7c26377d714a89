"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la lógica del comando con detalles visuales.
- El reporte ya trae todo renderizado; aquí solo se decide color y layout.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.models import RankedCandidate, TimestampReport
from core.domain.units import TimeUnit

ARGUMENT_NAME = "<TIMESTAMP>"


def print_header(console: Console, raw_input: str) -> None:
    """Imprime 'Attempting to parse "<input>"' subrayado con guiones."""

    header = Text.assemble('Attempting to parse "', (raw_input, "bold"), '"')
    console.print(header)
    console.print("-" * len(header.plain), highlight=False)


def collect_notes(report: TimestampReport, *, offset_missing: bool = False) -> list[str]:
    """Notas informativas para stderr (no son errores)."""

    notes: list[str] = []
    extraction = report.extraction
    if report.non_digit_note:
        notes.append(
            f"NOTE: {ARGUMENT_NAME} contains non-digit characters, "
            f'using "{extraction.digits}" (found at offset {extraction.start})'
        )
    if extraction.run_count > 1:
        notes.append(
            f"NOTE: {extraction.run_count} possible timestamps were found in {ARGUMENT_NAME}. "
            "Parsing the first one."
        )
    if offset_missing:
        notes.append(
            "NOTE: Could not determine current time zone offset. "
            "Dates will only be displayed in UTC."
        )
    return notes


def print_notes(console: Console, notes: list[str]) -> None:
    for note in notes:
        console.print(Text(note, style="yellow"))


def print_error(console: Console, message: str) -> None:
    console.print(Text(f"ERROR: {message}", style="red"))


def build_candidate_line(candidate: RankedCandidate, *, emphasize: bool = False) -> Text:
    """Una línea por unidad: '(   seconds) UTC: ... local: ... (1 minute ago)'."""

    label = candidate.unit.value.rjust(TimeUnit.label_width())
    line = Text()
    line.append(f"({label}) ")
    line.append("UTC: ")
    line.append(candidate.utc, style="blue")
    if candidate.local is not None:
        line.append(" local: ")
        line.append(candidate.local, style="magenta")
    line.append(" (")
    line.append(candidate.relative, style="cyan")
    line.append(")")
    if emphasize:
        line.stylize("bold")
    return line


def print_report(console: Console, report: TimestampReport) -> None:
    """Mejor candidato primero, luego los otros tres en orden de rank."""

    console.print(Text("Best candidate unit:", style="bold green"))
    console.print(build_candidate_line(report.best, emphasize=True))
    console.print()
    for candidate in report.others:
        console.print(build_candidate_line(candidate))
