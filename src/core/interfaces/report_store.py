"""Contrato del almacén de resultados por sesión.

Por qué Protocol:
- El handler web solo necesita guardar y recuperar un `PrimeReport` por
  identificador opaco; el almacén concreto (memoria, Redis...) es intercambiable.
- El motor de primos nunca depende de este contrato.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PrimeReport


@runtime_checkable
class ReportStore(Protocol):
    """Contrato mínimo para relayar un resultado entre dos peticiones."""

    def new_session_id(self) -> str:
        """Genera un identificador de sesión opaco."""

        ...

    def put(self, session_id: str, report: PrimeReport) -> None:
        """Guarda (o reemplaza) el resultado de la sesión."""

        ...

    def get(self, session_id: str | None) -> PrimeReport | None:
        """Devuelve el resultado vigente o `None` si no existe/expiró."""

        ...
