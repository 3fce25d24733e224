"""Exportación de reportes.

Por qué está en adapters:
- PDF/HTML son detalles de infraestructura (WeasyPrint/Jinja2).
- El Core solo conoce el agregado `PrimeReport`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from adapters.messages import texts
from adapters.templating import TEMPLATES_DIR, get_env
from core.domain.errors import ReportRenderError
from core.domain.language import Language
from core.domain.models import PrimeReport

logger = logging.getLogger(__name__)

TABLE_COLUMNS = 10


def render_report_html(*, report: PrimeReport, language: Language = Language.ENGLISH) -> str:
    """Renderiza el HTML autocontenido que WeasyPrint convierte a PDF."""

    generated_at_local = report.generated_at.astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")
    template = get_env().get_template("report.html")
    return template.render(
        report=report,
        rows=report.rows(TABLE_COLUMNS),
        columns=TABLE_COLUMNS,
        generated_at_utc=report.generated_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
        generated_at_local=generated_at_local,
        t=texts(language),
    )


def export_report_html(
    *,
    report: PrimeReport,
    output_path: Path,
    language: Language = Language.ENGLISH,
) -> Path:
    """Exporta el reporte como HTML.

    Por qué existe:
    - Sirve como fallback cuando el render PDF no está soportado por el entorno.
    - Útil para depurar el contenido del reporte y el template.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_report_html(report=report, language=language)
    output_path.write_text(html, encoding="utf-8")
    return output_path


def render_report_pdf(*, report: PrimeReport, language: Language = Language.ENGLISH) -> bytes:
    """Genera el PDF en memoria (para la respuesta HTTP).

    WeasyPrint se importa aquí: depende de librerías nativas (Pango) y la web
    debe poder arrancar aunque falten; en ese caso se lanza `ReportRenderError`.
    """

    try:
        from weasyprint import HTML  # noqa: PLC0415
    except (ImportError, OSError) as exc:
        logger.error("WeasyPrint is not available: %s", exc)
        raise ReportRenderError(f"PDF backend unavailable: {exc}") from exc

    html = render_report_html(report=report, language=language)
    try:
        pdf = HTML(string=html, base_url=str(TEMPLATES_DIR)).write_pdf()
    except Exception as exc:
        logger.exception("PDF rendering failed for range [%d, %d]", report.range.start, report.range.end)
        raise ReportRenderError(f"PDF rendering failed: {exc}") from exc
    if not pdf:
        raise ReportRenderError("PDF rendering produced no output")
    return pdf


def export_report_pdf(
    *,
    report: PrimeReport,
    output_path: Path,
    language: Language = Language.ENGLISH,
) -> Path:
    """Exporta el `PrimeReport` como PDF.

    Diseño:
    - Sincrónico: WeasyPrint es CPU/IO local. La web lo ejecuta en el
      threadpool de FastAPI (ruta síncrona).
    """

    pdf = render_report_pdf(report=report, language=language)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(pdf)
    return output_path
