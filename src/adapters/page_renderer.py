"""Web pages: entry form, results and error page."""

from __future__ import annotations

from adapters.messages import texts
from adapters.templating import get_env
from core.domain.language import Language
from core.domain.models import PrimeReport


def render_form_page(
    *,
    language: Language,
    start: str = "",
    end: str = "",
    max_bound: int | None = None,
) -> str:
    return get_env().get_template("index.html").render(
        t=texts(language),
        lang=language.value,
        start=start,
        end=end,
        max_bound=max_bound,
    )


def render_results_page(*, report: PrimeReport, language: Language) -> str:
    """Lists every prime of `report` with links to the PDF and the form."""

    return get_env().get_template("results.html").render(
        t=texts(language),
        lang=language.value,
        report=report,
    )


def render_error_page(*, message: str, language: Language) -> str:
    return get_env().get_template("error.html").render(
        t=texts(language),
        lang=language.value,
        message=message,
    )
