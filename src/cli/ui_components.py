"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.messages import texts
from core.domain.language import Language
from core.domain.models import PrimeReport


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (`--quiet`).
    """

    title = Text("PRIMOS", style="bold cyan")
    subtitle = Text("Números primos por rango • HTML • PDF", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_summary_panel(report: PrimeReport, language: Language) -> Panel:
    """Panel con rango, cantidad y estrategia."""

    t = texts(language)
    body = Text()
    body.append(f"{t['range_label']}: ", style="bold")
    body.append(f"{report.range.start} - {report.range.end}\n")
    body.append(f"{t['count_label']}: ", style="bold")
    body.append(f"{report.count}\n")
    body.append(f"strategy={report.strategy}  elapsed={report.elapsed_ms:.2f} ms", style="dim")
    return Panel(body, title=Text(t["results_title"], style="bold yellow"), border_style="yellow")


def build_primes_table(report: PrimeReport, language: Language, *, columns: int = 10) -> Table:
    """Tabla de primos en filas de `columns` (misma forma que el PDF)."""

    t = texts(language)
    table = Table(title=t["primes_heading"], show_header=False, show_lines=False)
    for _ in range(columns):
        table.add_column(justify="right", style="green")
    for row in report.rows(columns):
        table.add_row(*(str(p) for p in row))
    return table
