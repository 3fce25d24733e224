"""Almacén de sesiones en memoria.

Por qué está en adapters:
- Guardar el resultado entre la página y la descarga PDF es un detalle del
  host, no del Core.
- La cookie solo transporta un identificador opaco; el `PrimeReport` queda
  en el servidor (una lista de primos no cabe en una cookie de 4 KB).
"""

from __future__ import annotations

import secrets
import threading
import time
from collections import OrderedDict
from typing import Callable

from core.domain.models import PrimeReport


class InMemoryReportStore:
    """`ReportStore` con expiración por TTL y tope de entradas.

    Las rutas síncronas de FastAPI corren en un threadpool, así que el dict
    se protege con un `threading.Lock`.
    """

    def __init__(
        self,
        *,
        ttl_seconds: float = 1800.0,
        max_entries: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, tuple[float, PrimeReport]] = OrderedDict()

    def new_session_id(self) -> str:
        return secrets.token_urlsafe(24)

    def put(self, session_id: str, report: PrimeReport) -> None:
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            self._entries.pop(session_id, None)
            self._entries[session_id] = (now + self._ttl, report)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def get(self, session_id: str | None) -> PrimeReport | None:
        if not session_id:
            return None
        now = self._clock()
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                return None
            expires_at, report = entry
            if expires_at <= now:
                del self._entries[session_id]
                return None
            return report

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired(self._clock())
            return len(self._entries)

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
