"""FastAPI application: form, results page, PDF download and JSON API.

The handler is the only bridge between the session store and the core:
it parses the two form values, runs the query, stores the resulting
`PrimeReport` under the caller's session id and renders the page. The PDF
route reads that report back; without one it redirects to the form.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Form, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

from adapters.json_exporter import report_payload
from adapters.messages import error_message, texts
from adapters.page_renderer import render_error_page, render_form_page, render_results_page
from adapters.report_exporter import render_report_pdf
from adapters.session_store import InMemoryReportStore
from core.config import APP_NAME, APP_VERSION, AppSettings
from core.domain.errors import PrimosError, ReportRenderError
from core.domain.language import Language
from core.interfaces.report_store import ReportStore
from core.services.prime_pipeline import run_query

logger = logging.getLogger(__name__)


def _settings(request: Request) -> AppSettings:
    return request.app.state.settings


def _store(request: Request) -> ReportStore:
    return request.app.state.report_store


def _language(request: Request, lang: str | None) -> Language:
    return Language.parse(lang, _settings(request).default_language)


def _error_response(message: str, language: Language, status_code: int) -> HTMLResponse:
    return HTMLResponse(render_error_page(message=message, language=language), status_code=status_code)


def create_app(
    settings: AppSettings | None = None,
    *,
    report_store: ReportStore | None = None,
) -> FastAPI:
    """Build the web application.

    `report_store` defaults to an `InMemoryReportStore` sized from settings;
    tests pass their own to inspect what the handler stored.
    """

    settings = settings or AppSettings()
    app = FastAPI(title=APP_NAME, version=APP_VERSION)
    app.state.settings = settings
    app.state.report_store = report_store or InMemoryReportStore(
        ttl_seconds=settings.session_ttl_seconds,
        max_entries=settings.session_max_entries,
    )

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request, lang: str | None = Query(default=None)) -> HTMLResponse:
        language = _language(request, lang)
        return HTMLResponse(render_form_page(language=language, max_bound=_settings(request).max_bound))

    @app.post("/primes", response_class=HTMLResponse)
    def find_primes(
        request: Request,
        start: str | None = Form(default=None),
        end: str | None = Form(default=None),
        lang: str | None = Query(default=None),
    ) -> HTMLResponse:
        language = _language(request, lang)
        try:
            report = run_query(start, end, settings=_settings(request))
        except PrimosError as exc:
            return _error_response(error_message(exc, language), language, 400)

        store = _store(request)
        cookie_name = _settings(request).session_cookie_name
        session_id = request.cookies.get(cookie_name)
        # Only a live session is reused; anything else gets a server-issued id.
        if not session_id or store.get(session_id) is None:
            session_id = store.new_session_id()
        store.put(session_id, report)

        response = HTMLResponse(render_results_page(report=report, language=language))
        response.set_cookie(
            cookie_name,
            session_id,
            max_age=int(_settings(request).session_ttl_seconds),
            httponly=True,
            samesite="lax",
        )
        return response

    @app.get("/primes/pdf")
    def download_pdf(request: Request, lang: str | None = Query(default=None)) -> Response:
        language = _language(request, lang)
        session_id = request.cookies.get(_settings(request).session_cookie_name)
        report = _store(request).get(session_id)
        if report is None:
            return RedirectResponse(url=f"/?lang={language.value}", status_code=303)

        try:
            pdf = render_report_pdf(report=report, language=language)
        except ReportRenderError as exc:
            return _error_response(error_message(exc, language), language, 503)

        filename = texts(language)["pdf_filename"]
        return Response(
            content=pdf,
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.get("/api/primes")
    def api_primes(
        request: Request,
        start: str | None = Query(default=None),
        end: str | None = Query(default=None),
    ) -> JSONResponse:
        # Strategy is a host setting, never a request parameter.
        try:
            report = run_query(start, end, settings=_settings(request))
        except PrimosError as exc:
            return JSONResponse({"error": exc.code, "detail": str(exc)}, status_code=400)
        return JSONResponse(report_payload(report))

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": APP_NAME, "version": APP_VERSION}

    logger.debug("Web application created (max_bound=%d, max_span=%d)", settings.max_bound, settings.max_span)
    return app
