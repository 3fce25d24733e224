from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient

from adapters.session_store import InMemoryReportStore
from adapters.web.app import create_app
from core.config import AppSettings


def weasyprint_available() -> bool:
    # WeasyPrint imports fine only when its native libraries (Pango) are present.
    try:
        import weasyprint  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


requires_weasyprint = pytest.mark.skipif(
    not weasyprint_available(),
    reason="WeasyPrint or its native libraries are not installed",
)


def reference_primes(end: int) -> list[int]:
    # Independent oracle: plain list-based sieve, no shared code with the engine.
    if end < 2:
        return []
    is_p = [True] * (end + 1)
    is_p[0] = is_p[1] = False
    n = 2
    while n * n <= end:
        if is_p[n]:
            for k in range(n * n, end + 1, n):
                is_p[k] = False
        n += 1
    return [i for i, flag in enumerate(is_p) if flag]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Settings must not pick up the developer's env vars or user .env.
    for key in list(os.environ):
        if key.startswith("PRIMOS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def store() -> InMemoryReportStore:
    return InMemoryReportStore(ttl_seconds=60, max_entries=10)


@pytest.fixture
def client(settings: AppSettings, store: InMemoryReportStore) -> TestClient:
    return TestClient(create_app(settings, report_store=store))
