from __future__ import annotations

import json
from pathlib import Path

import pytest

from adapters.json_exporter import export_report_json, report_payload
from adapters.messages import MESSAGES, error_message
from adapters.page_renderer import render_error_page, render_form_page, render_results_page
from adapters.report_exporter import (
    export_report_html,
    export_report_pdf,
    render_report_html,
    render_report_pdf,
)
from conftest import requires_weasyprint
from core.domain.errors import (
    MISSING_VALUE,
    NOT_A_NUMBER,
    InvalidInput,
    InvalidRange,
    RangeOverflow,
    RangeTooWide,
    ReportRenderError,
)
from core.domain.language import Language
from core.domain.models import NumberRange, PrimeReport


@pytest.fixture
def report() -> PrimeReport:
    primes = [p for p in range(2, 60) if all(p % d for d in range(2, p))]
    return PrimeReport(range=NumberRange(start=1, end=60), primes=primes, strategy="trial")


def test_message_tables_have_same_keys() -> None:
    assert MESSAGES[Language.ENGLISH].keys() == MESSAGES[Language.SPANISH].keys()


def test_error_messages_are_localized() -> None:
    assert "whole numbers" in error_message(InvalidInput("start", "x", "bad"), Language.ENGLISH)
    assert "no son números válidos" in error_message(InvalidInput("start", "x", "bad"), Language.SPANISH)
    assert "El rango es inválido" in error_message(InvalidRange(8, 2), Language.SPANISH)
    assert "2147483647" in error_message(RangeOverflow(2**31, 2**31 - 1), Language.ENGLISH)
    assert "at most 100" in error_message(RangeTooWide(101, 100), Language.ENGLISH)


def test_missing_input_has_its_own_message() -> None:
    missing = InvalidInput("end", None, MISSING_VALUE)
    not_a_number = InvalidInput("end", "x", NOT_A_NUMBER)
    assert "are required" in error_message(missing, Language.ENGLISH)
    assert "Parámetros inválidos" in error_message(missing, Language.SPANISH)
    assert error_message(missing, Language.ENGLISH) != error_message(not_a_number, Language.ENGLISH)


def test_results_page_lists_every_prime(report: PrimeReport) -> None:
    html = render_results_page(report=report, language=Language.ENGLISH)
    for p in report.primes:
        assert f'<span class="prime">{p}</span>' in html
    assert "1 - 60" in html
    assert '<span id="count">17</span>' in html
    assert 'href="/primes/pdf?lang=en"' in html


def test_results_page_empty(report: PrimeReport) -> None:
    empty = PrimeReport(range=NumberRange(start=24, end=28), primes=[])
    html = render_results_page(report=empty, language=Language.SPANISH)
    assert "No se encontraron números primos en este rango." in html
    assert 'lang="es"' in html


def test_form_and_error_pages() -> None:
    form = render_form_page(language=Language.ENGLISH, max_bound=100)
    assert 'action="/primes?lang=en"' in form
    assert 'max="100"' in form
    error = render_error_page(message="<boom>", language=Language.ENGLISH)
    # Autoescaped.
    assert "&lt;boom&gt;" in error
    assert 'href="/?lang=en"' in error


def test_report_html_table_has_ten_columns(report: PrimeReport) -> None:
    html = render_report_html(report=report, language=Language.ENGLISH)
    assert "Prime Number Report" in html
    assert html.count("<tr>") == 2
    # 17 primes fill 20 cells across two rows.
    assert html.count("<td>") == 20
    assert "Generated on:" in html
    assert report.generated_at.strftime("%Y-%m-%d %H:%M:%S UTC") in html


def test_report_html_without_primes() -> None:
    empty = PrimeReport(range=NumberRange(start=1, end=1), primes=[])
    html = render_report_html(report=empty, language=Language.SPANISH)
    assert "<table>" not in html
    assert "No se encontraron números primos en este rango." in html


def test_export_html(tmp_path: Path, report: PrimeReport) -> None:
    out = export_report_html(report=report, output_path=tmp_path / "nested" / "r.html")
    assert out.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


def test_json_payload_and_export(tmp_path: Path, report: PrimeReport) -> None:
    payload = report_payload(report)
    assert payload["count"] == 17
    assert payload["start"] == 1 and payload["end"] == 60
    out = export_report_json(report=report, output_path=tmp_path / "r.json")
    assert json.loads(out.read_text(encoding="utf-8"))["primes"] == report.primes


def test_pdf_backend_missing_raises_render_error(monkeypatch: pytest.MonkeyPatch, report: PrimeReport) -> None:
    import builtins

    real_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name == "weasyprint":
            raise OSError("cannot load library 'pango'")
        return real_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    with pytest.raises(ReportRenderError):
        render_report_pdf(report=report)


@requires_weasyprint
def test_pdf_render(tmp_path: Path, report: PrimeReport) -> None:
    pdf = render_report_pdf(report=report, language=Language.SPANISH)
    assert pdf.startswith(b"%PDF")
    out = export_report_pdf(report=report, output_path=tmp_path / "r.pdf")
    assert out.read_bytes().startswith(b"%PDF")
