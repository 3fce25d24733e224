"""Errores tipados del dominio.

Por qué no heredan de `ValueError`:
- Pydantic envuelve `ValueError` en `ValidationError`; aquí queremos que el
  llamador reciba `InvalidRange`/`RangeOverflow` tal cual.
- Cada error expone un `code` estable para que la capa web/CLI lo traduzca.
"""

from __future__ import annotations

# Motivos de `InvalidInput`; la capa de mensajes distingue ambos.
MISSING_VALUE = "parameter is missing"
NOT_A_NUMBER = "value is not a valid number"


class PrimosError(Exception):
    """Base de todos los errores de la aplicación."""

    code = "error"


class InvalidRange(PrimosError):
    """`start < 1` o `end < start`."""

    code = "invalid_range"

    def __init__(self, start: object, end: object, reason: str | None = None) -> None:
        self.start = start
        self.end = end
        detail = reason or "start must be >= 1 and end must be >= start"
        super().__init__(f"Invalid range [{start}, {end}]: {detail}")


class RangeOverflow(PrimosError):
    """Una cota supera el dominio entero soportado."""

    code = "range_overflow"

    def __init__(self, bound: int | str, limit: int) -> None:
        self.bound = bound
        self.limit = limit
        super().__init__(f"Bound {bound} exceeds the supported maximum {limit}")


class InvalidInput(PrimosError):
    """Entrada ausente o no numérica (error de borde, nunca del motor)."""

    code = "invalid_input"

    def __init__(self, field: str, raw: object, reason: str) -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {reason}")


class RangeTooWide(PrimosError):
    """El rango excede el máximo configurado por el host."""

    code = "range_too_wide"

    def __init__(self, span: int, max_span: int) -> None:
        self.span = span
        self.max_span = max_span
        super().__init__(f"Range spans {span} integers; the maximum allowed is {max_span}")


class ReportRenderError(PrimosError):
    """El backend de PDF no está disponible o falló al renderizar."""

    code = "render_failed"
