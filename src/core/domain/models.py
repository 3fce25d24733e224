"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da modelos inmutables y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `PrimeReport` se serializa igual para la sesión, el JSON y las plantillas.

Nota:
- Estos modelos describen *qué* es un resultado, no *cómo* se calcula.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.errors import InvalidRange, RangeOverflow

INT64_MAX = 2**63 - 1


class NumberRange(BaseModel):
    """Intervalo entero inclusivo `[start, end]` ya validado.

    Invariante: `1 <= start <= end <= INT64_MAX`. Construir uno inválido
    lanza `InvalidRange`/`RangeOverflow` directamente.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    start: int = Field(
        ...,
        description="Cota inferior inclusiva (>= 1).",
    )
    end: int = Field(
        ...,
        description="Cota superior inclusiva (>= start).",
    )

    @model_validator(mode="before")
    @classmethod
    def _reject_non_integers(cls, data: object) -> object:
        if isinstance(data, dict):
            start, end = data.get("start"), data.get("end")
            for value in (start, end):
                if isinstance(value, bool) or not isinstance(value, int):
                    raise InvalidRange(start, end, "bounds must be integers")
            # Se corta aquí para no delegar enteros fuera de 64 bits al core de pydantic.
            if start < 1:
                raise InvalidRange(start, end, "start must be >= 1")
            if end > INT64_MAX:
                raise RangeOverflow(end, INT64_MAX)
        return data

    @model_validator(mode="after")
    def _check_invariant(self) -> "NumberRange":
        if self.start < 1:
            raise InvalidRange(self.start, self.end, "start must be >= 1")
        if self.end < self.start:
            raise InvalidRange(self.start, self.end, "end must be >= start")
        if self.end > INT64_MAX:
            raise RangeOverflow(self.end, INT64_MAX)
        return self

    @property
    def span(self) -> int:
        return self.end - self.start + 1


class PrimeReport(BaseModel):
    """Agregado que viaja entre peticiones: rango + primos + metadatos.

    Por qué un agregado:
    - La página HTML, el PDF y el JSON consumen exactamente lo mismo.
    - Es el "mensaje" que el handler deja en la sesión para el renderer PDF.
    """

    model_config = ConfigDict(frozen=True)

    range: NumberRange = Field(
        ...,
        description="Rango analizado.",
    )
    primes: list[int] = Field(
        default_factory=list,
        description="Primos del rango, ascendentes y sin duplicados.",
    )
    strategy: str = Field(
        default="auto",
        min_length=1,
        description="Estrategia interna usada por el enumerador.",
    )
    elapsed_ms: float = Field(
        default=0.0,
        ge=0.0,
        description="Tiempo de cómputo (milisegundos).",
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de generación (UTC).",
    )

    @property
    def count(self) -> int:
        return len(self.primes)

    def rows(self, columns: int = 10) -> list[list[int]]:
        """Parte la lista de primos en filas de `columns` elementos."""

        if columns < 1:
            raise ValueError("columns must be >= 1")
        return [self.primes[i : i + columns] for i in range(0, len(self.primes), columns)]
