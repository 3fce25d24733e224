"""Doctor command for environment diagnostics."""

from __future__ import annotations

import tempfile
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.report_exporter import export_report_pdf
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import ReportRenderError
from core.domain.language import Language
from core.domain.models import NumberRange, PrimeReport
from core.services.prime_enumerator import STRATEGIES, enumerate_primes

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_SELF_CHECK = (10, 20, [11, 13, 17, 19])


def _check_http(url: str, timeout: float = 3.0) -> tuple[bool, str]:
    try:
        response = httpx.get(url, timeout=timeout)
        response.raise_for_status()
        return True, f"HTTP {response.status_code} {response.json().get('status', '')}".strip()
    except (httpx.HTTPError, ValueError) as exc:
        return False, str(exc) or exc.__class__.__name__


def _check_engine() -> tuple[bool, str]:
    """Every strategy must agree on a known range."""

    start, end, expected = _SELF_CHECK
    mismatches = [s for s in STRATEGIES if enumerate_primes(start, end, strategy=s) != expected]
    if mismatches:
        return False, f"mismatch for: {', '.join(mismatches)}"
    return True, f"[{start}, {end}] -> {expected}"


def _check_pdf() -> tuple[bool, str]:
    """Attempt to generate a minimal PDF to detect WeasyPrint issues."""

    report = PrimeReport(range=NumberRange(start=2, end=2), primes=[2])
    with tempfile.TemporaryDirectory() as tmp:
        try:
            export_report_pdf(report=report, output_path=Path(tmp) / "_doctor_test.pdf", language=Language.ENGLISH)
        except ReportRenderError as exc:
            return False, str(exc)
    return True, "OK"


@app.command()
def run(
    url: str | None = typer.Option(None, "--url", help="Base URL of a running service to probe."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="PRIMOS Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("max_bound", "OK", str(settings.max_bound))
    table.add_row("max_span", "OK", str(settings.max_span))
    table.add_row("strategy", "OK", settings.strategy)
    table.add_row("language", "OK", settings.default_language.label())

    ok_engine, detail_engine = _check_engine()
    table.add_row("Prime engine", "OK" if ok_engine else "FAIL", detail_engine)

    ok_pdf, detail_pdf = _check_pdf()
    table.add_row("WeasyPrint PDF", "OK" if ok_pdf else "FAIL", detail_pdf)

    # Service (best-effort)
    base_url = url or f"http://{settings.host}:{settings.port}"
    ok_http, detail_http = _check_http(f"{base_url.rstrip('/')}/health")
    table.add_row("Web service", "OK" if ok_http else "DOWN", detail_http)

    _console.print(table)

    if not ok_pdf:
        _console.print(
            "\n[yellow]Note:[/yellow] When PDF export fails, `find --pdf` falls back to HTML "
            "and the web download answers 503."
        )
    if not ok_engine:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores limits and language in the user config .env)."""

    settings = AppSettings()

    max_bound = typer.prompt("Maximum bound", default=settings.max_bound, type=int)
    max_span = typer.prompt("Maximum span per query", default=settings.max_span, type=int)
    language = typer.prompt(
        "Default language (en/es)",
        default=settings.default_language.value,
        show_default=True,
    ).strip().lower()

    if max_bound < 1 or max_span < 1:
        raise typer.BadParameter("limits must be >= 1")
    if language not in {lang.value for lang in Language}:
        raise typer.BadParameter("language must be 'en' or 'es'")

    env_path = write_user_env_vars(
        {
            "PRIMOS_MAX_BOUND": str(max_bound),
            "PRIMOS_MAX_SPAN": str(max_span),
            "PRIMOS_DEFAULT_LANGUAGE": language,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
