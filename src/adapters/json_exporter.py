"""Exportación JSON del reporte.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- El mismo payload lo devuelve la API `/api/primes`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import PrimeReport


def report_payload(report: PrimeReport) -> dict[str, Any]:
    """Vista plana y estable del reporte."""

    return {
        "start": report.range.start,
        "end": report.range.end,
        "count": report.count,
        "primes": list(report.primes),
        "strategy": report.strategy,
        "elapsed_ms": round(report.elapsed_ms, 3),
        "generated_at": report.generated_at.isoformat(timespec="seconds"),
    }


def export_report_json(*, report: PrimeReport, output_path: Path) -> Path:
    """Exporta `PrimeReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(report_payload(report), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
