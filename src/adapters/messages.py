"""User-facing strings in English and Spanish.

Templates receive the whole table as `t`; error pages go through
`error_message`, which maps the stable `code` of a `PrimosError` to text.
"""

from __future__ import annotations

from core.domain.errors import MISSING_VALUE, InvalidInput, PrimosError, RangeOverflow, RangeTooWide
from core.domain.language import Language

MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "html_lang": "en",
        "app_title": "Prime Number Finder",
        "form_intro": "Enter a range to list every prime number in it.",
        "start_label": "Start",
        "end_label": "End",
        "submit": "Find primes",
        "results_title": "Prime Number Results",
        "report_title": "Prime Number Report",
        "range_label": "Range analyzed",
        "count_label": "Number of primes found",
        "primes_heading": "Prime Numbers Found:",
        "no_primes": "No prime numbers were found in this range.",
        "download_pdf": "Download PDF",
        "new_calculation": "New calculation",
        "generated_on": "Generated on",
        "error_title": "Error",
        "back_to_form": "Back to the form",
        "pdf_filename": "prime_numbers.pdf",
        "err_missing_input": "Error: invalid parameters. Both start and end are required.",
        "err_invalid_input": "Error: the values entered are not valid whole numbers.",
        "err_invalid_range": (
            "Error: the range is invalid. The start must be >= 1 and the end must not be "
            "smaller than the start."
        ),
        "err_range_overflow": "Error: the end of the range may not exceed {limit}.",
        "err_range_too_wide": "Error: the range covers {span} numbers; at most {max_span} are allowed.",
        "err_render_failed": "Error: the PDF document could not be generated.",
        "err_unknown": "Error: the request could not be processed.",
    },
    Language.SPANISH: {
        "html_lang": "es",
        "app_title": "Buscador de Números Primos",
        "form_intro": "Introduce un rango para listar todos sus números primos.",
        "start_label": "Inicio",
        "end_label": "Fin",
        "submit": "Calcular primos",
        "results_title": "Resultados de Números Primos",
        "report_title": "Reporte de Números Primos",
        "range_label": "Rango analizado",
        "count_label": "Cantidad de números primos encontrados",
        "primes_heading": "Números Primos Encontrados:",
        "no_primes": "No se encontraron números primos en este rango.",
        "download_pdf": "Descargar PDF",
        "new_calculation": "Nuevo Cálculo",
        "generated_on": "Generado el",
        "error_title": "Error",
        "back_to_form": "Volver al formulario",
        "pdf_filename": "numeros_primos.pdf",
        "err_missing_input": "Error: Parámetros inválidos. Se requieren el inicio y el fin.",
        "err_invalid_input": "Error: Los valores ingresados no son números válidos.",
        "err_invalid_range": (
            "Error: El rango es inválido. El inicio debe ser >= 1 y el fin no puede ser "
            "menor que el inicio."
        ),
        "err_range_overflow": "Error: El fin del rango no puede superar {limit}.",
        "err_range_too_wide": "Error: El rango abarca {span} números; el máximo permitido es {max_span}.",
        "err_render_failed": "Error: No se pudo generar el documento PDF.",
        "err_unknown": "Error: No se pudo procesar la solicitud.",
    },
}


def texts(language: Language) -> dict[str, str]:
    return MESSAGES[language]


def error_message(exc: PrimosError, language: Language) -> str:
    table = MESSAGES[language]
    if isinstance(exc, InvalidInput) and exc.reason == MISSING_VALUE:
        return table["err_missing_input"]
    template = table.get(f"err_{exc.code}", table["err_unknown"])
    if isinstance(exc, RangeOverflow):
        return template.format(limit=exc.limit)
    if isinstance(exc, RangeTooWide):
        return template.format(span=exc.span, max_span=exc.max_span)
    return template
