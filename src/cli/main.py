"""CLI principal (Typer).

Comandos:
- `find START END`: calcula los primos, los muestra y opcionalmente exporta.
- `serve`: levanta la aplicación web con uvicorn.
- `doctor ...`: diagnósticos de entorno.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_report_json
from adapters.messages import error_message, texts
from adapters.report_exporter import export_report_html, export_report_pdf
from cli import doctor
from cli.ui_components import build_primes_table, build_summary_panel, print_banner
from core.config import AppSettings
from core.domain.errors import PrimosError, ReportRenderError
from core.domain.language import Language
from core.logging_config import configure_logging
from core.services.prime_enumerator import STRATEGIES
from core.services.prime_pipeline import run_query

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Find every prime number in an integer range.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command()
def find(
    start: str = typer.Argument(..., help="Lower bound (inclusive, >= 1)."),
    end: str = typer.Argument(..., help="Upper bound (inclusive, >= start)."),
    strategy: str | None = typer.Option(None, "--strategy", help=f"One of: {', '.join(STRATEGIES)}."),
    json_out: Path | None = typer.Option(None, "--json", help="Write the result as JSON."),
    html_out: Path | None = typer.Option(None, "--html", help="Write the report as HTML."),
    pdf_out: Path | None = typer.Option(None, "--pdf", help="Write the report as PDF."),
    spanish: bool = typer.Option(False, "--spanish", help="Spanish output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No banner or table, summary only."),
) -> None:
    """List the primes in [START, END]."""

    settings = AppSettings()
    configure_logging("WARNING" if quiet else settings.log_level)
    language = Language.from_bool(spanish) if spanish else settings.default_language

    if strategy is not None and strategy not in STRATEGIES:
        raise typer.BadParameter(f"expected one of: {', '.join(STRATEGIES)}", param_hint="--strategy")

    try:
        report = run_query(start, end, settings=settings, strategy=strategy)
    except PrimosError as exc:
        _console.print(f"[red]{error_message(exc, language)}[/red]")
        raise typer.Exit(code=2) from exc

    if not quiet:
        print_banner(_console)
    _console.print(build_summary_panel(report, language))
    if not quiet:
        if report.primes:
            _console.print(build_primes_table(report, language))
        else:
            _console.print(texts(language)["no_primes"])

    if json_out is not None:
        path = export_report_json(report=report, output_path=json_out)
        _console.print(f"[green]JSON:[/green] {path}")
    if html_out is not None:
        path = export_report_html(report=report, output_path=html_out, language=language)
        _console.print(f"[green]HTML:[/green] {path}")
    if pdf_out is not None:
        try:
            path = export_report_pdf(report=report, output_path=pdf_out, language=language)
            _console.print(f"[green]PDF:[/green] {path}")
        except ReportRenderError as exc:
            fallback = export_report_html(
                report=report,
                output_path=pdf_out.with_suffix(".html"),
                language=language,
            )
            _console.print(f"[yellow]PDF export failed ({exc}); wrote HTML instead:[/yellow] {fallback}")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default from settings)."),
    port: int | None = typer.Option(None, "--port", help="Port (default from settings)."),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes (dev)."),
) -> None:
    """Run the web service."""

    import uvicorn  # noqa: PLC0415

    settings = AppSettings()
    configure_logging(settings.log_level)
    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info("Serving on http://%s:%d", bind_host, bind_port)
    uvicorn.run(
        "adapters.web.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
