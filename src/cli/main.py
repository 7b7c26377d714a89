"""CLI principal (Typer).

Por qué la CLI es delgada:
- Lee el reloj y el offset local una sola vez, llama a
  `core.services.timestamp_pipeline.analyze` y delega el render en Rich.
- Traduce `TimestampError` a un mensaje en stderr y exit code 1.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_report_json, render_report_json
from adapters.system_clock import FixedClock, SystemClock
from cli.ui_components import collect_notes, print_error, print_header, print_notes, print_report
from core.config import APP_NAME, APP_VERSION, AppSettings
from core.domain.errors import TimestampError
from core.domain.models import Instant
from core.interfaces.clock import Clock
from core.logging_config import get_logger, setup_logging
from core.services.timestamp_pipeline import AnalysisRequest, run_analysis

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    help="Pretty print a Unix timestamp (seconds, milliseconds, microseconds or nanoseconds).",
)

_log = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


def _resolve_offset(
    clock: Clock,
    settings: AppSettings,
    *,
    utc_offset: int | None,
    show_local: bool,
) -> timedelta | None:
    if not show_local:
        return None
    if utc_offset is not None:
        return timedelta(minutes=utc_offset)
    override = settings.offset_override()
    if override is not None:
        return override
    return clock.local_offset()


@app.command()
def main(
    timestamp: str = typer.Argument(
        ...,
        metavar="TIMESTAMP",
        help="The Unix timestamp to parse, or any text (e.g. a filename) containing one.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the report as JSON instead of text.",
    ),
    json_out: Path | None = typer.Option(
        None,
        "--json-out",
        help="Also write the JSON report to this path.",
        dir_okay=False,
    ),
    now: int | None = typer.Option(
        None,
        "--now",
        help="Reference time as Unix seconds (defaults to the system clock).",
    ),
    utc_offset: int | None = typer.Option(
        None,
        "--utc-offset",
        min=-24 * 60,
        max=24 * 60,
        help="Local UTC offset in minutes (defaults to the system time zone).",
    ),
    no_local: bool = typer.Option(
        False,
        "--no-local",
        help="Only show UTC dates.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Debug logging on stderr.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Find a timestamp in TIMESTAMP and show it in every plausible unit."""

    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    color = settings.color and not no_color
    color_system = "auto" if color else None
    console = Console(color_system=color_system, highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, color_system=color_system, highlight=False, soft_wrap=True)

    clock: Clock = SystemClock()
    if now is not None:
        # --now pins the reference time; the system time zone still applies.
        clock = FixedClock(Instant.from_unix_seconds(now), clock.local_offset())
    show_local = settings.show_local and not no_local
    request = AnalysisRequest(
        raw_input=timestamp,
        now=clock.now(),
        local_offset=_resolve_offset(clock, settings, utc_offset=utc_offset, show_local=show_local),
    )
    _log.debug("now=%d ns, local offset=%s", request.now.unix_nanos, request.local_offset)

    if not as_json:
        print_header(console, timestamp)

    try:
        report = run_analysis(request)
    except TimestampError as exc:
        print_error(err_console, str(exc))
        raise typer.Exit(code=1) from exc

    if json_out is not None:
        path = export_report_json(report=report, output_path=json_out)
        _log.info("JSON report written to %s", path)

    if as_json:
        typer.echo(render_report_json(report), nl=False)
        return

    notes = collect_notes(report, offset_missing=show_local and request.local_offset is None)
    print_notes(err_console, notes)
    if notes:
        console.print()
    print_report(console, report)


def run() -> None:
    app()
