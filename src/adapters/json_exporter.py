"""Exportación JSON del reporte.

Por qué JSON:
- Expone los cuatro candidatos como datos estructurados para scripts y
  pipelines, sin depender del render de terminal.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import TimestampReport


def render_report_json(report: TimestampReport) -> str:
    """Serializa `TimestampReport` a JSON UTF-8 con formato estable."""

    payload = report.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_report_json(*, report: TimestampReport, output_path: Path) -> Path:
    """Escribe el reporte en `output_path` (crea directorios si hace falta)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_report_json(report), encoding="utf-8")
    return output_path
