"""Prime query orchestration utilities.

The web handler and the CLI both turn raw user input into a `PrimeReport`.
This module holds that flow (parse, enforce host limits, enumerate, time)
so the entry-points only deal with I/O. The enumerator itself stays in
`prime_enumerator` and never sees raw input or settings.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from core.config import AppSettings
from core.domain.errors import (
    MISSING_VALUE,
    NOT_A_NUMBER,
    InvalidInput,
    InvalidRange,
    RangeOverflow,
    RangeTooWide,
)
from core.domain.models import INT64_MAX, NumberRange, PrimeReport
from core.services.prime_enumerator import enumerate_range, resolve_strategy

logger = logging.getLogger(__name__)

_INT64_DIGITS = len(str(INT64_MAX))


@dataclass(frozen=True)
class RangeLimits:
    """Host-side ceilings applied before the enumerator runs."""

    max_bound: int = 2**31 - 1
    max_span: int = 1_000_000

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "RangeLimits":
        return cls(max_bound=settings.max_bound, max_span=settings.max_span)


def _parse_int(field: str, raw: object, *, limit: int) -> int:
    if raw is None:
        raise InvalidInput(field, raw, MISSING_VALUE)
    if isinstance(raw, bool):
        raise InvalidInput(field, raw, NOT_A_NUMBER)
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not text:
        raise InvalidInput(field, raw, MISSING_VALUE)
    # int() refuses very long digit strings; anything past 64 bits overflows.
    digits = text.lstrip("+-").lstrip("0")
    if digits.isdecimal() and len(digits) > _INT64_DIGITS:
        raise RangeOverflow(f"{digits[:12]}... ({len(digits)} digits)", limit)
    try:
        return int(text)
    except ValueError:
        raise InvalidInput(field, raw, NOT_A_NUMBER) from None


def parse_range(
    raw_start: object,
    raw_end: object,
    *,
    limits: RangeLimits | None = None,
) -> NumberRange:
    """Turn raw form/CLI values into a validated `NumberRange`.

    Errors, in the order they are checked:
    - `InvalidInput`: missing or non-numeric value.
    - `InvalidRange`: `start < 1` or `end < start`.
    - `RangeOverflow`: `end` above `limits.max_bound`, or a digit string
      too long for a 64-bit integer (checked while parsing).
    - `RangeTooWide`: more than `limits.max_span` integers.
    """

    limits = limits or RangeLimits()
    max_bound = min(limits.max_bound, INT64_MAX)
    start = _parse_int("start", raw_start, limit=max_bound)
    end = _parse_int("end", raw_end, limit=max_bound)

    if start < 1:
        raise InvalidRange(start, end, "start must be >= 1")
    if end < start:
        raise InvalidRange(start, end, "end must be >= start")

    if end > max_bound:
        raise RangeOverflow(end, max_bound)

    range_ = NumberRange(start=start, end=end)
    if range_.span > limits.max_span:
        raise RangeTooWide(range_.span, limits.max_span)
    return range_


def build_report(range_: NumberRange, *, strategy: str = "auto") -> PrimeReport:
    """Enumerate `range_` and wrap the result with timing metadata."""

    concrete = resolve_strategy(range_, strategy)
    t0 = time.perf_counter()
    primes = enumerate_range(range_, strategy=concrete)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    logger.info(
        "Enumerated primes in [%d, %d]: count=%d strategy=%s elapsed_ms=%.2f",
        range_.start,
        range_.end,
        len(primes),
        concrete,
        elapsed_ms,
    )
    return PrimeReport(range=range_, primes=primes, strategy=concrete, elapsed_ms=elapsed_ms)


def run_query(
    raw_start: object,
    raw_end: object,
    *,
    settings: AppSettings,
    strategy: str | None = None,
) -> PrimeReport:
    """Parse, validate and enumerate in one call (web handler / CLI)."""

    try:
        range_ = parse_range(raw_start, raw_end, limits=RangeLimits.from_settings(settings))
    except (InvalidInput, InvalidRange, RangeOverflow, RangeTooWide) as exc:
        logger.warning("Rejected prime query start=%r end=%r: %s", raw_start, raw_end, exc)
        raise
    return build_report(range_, strategy=strategy or settings.strategy)
