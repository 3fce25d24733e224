"""Range prime enumeration.

This is the only module with real algorithmic content. It is a pure
function of its two bounds: no sessions, no rendering, no module-level
mutable state, so it can be embedded behind the web handler, the CLI or a
test without setup.

Strategies produce identical output and differ only in cost:

- ``trial``: trial division by odd divisors up to ``isqrt(n)``.
- ``sieve``: segmented sieve of Eratosthenes; base primes up to
  ``isqrt(end)`` are computed once and the target range is sieved in
  fixed-size segments.
- ``miller-rabin``: deterministic Miller-Rabin for 64-bit candidates.
- ``auto``: picks one of the above from the shape of the range.
"""

from __future__ import annotations

from math import isqrt
from typing import Callable

from core.domain.models import NumberRange

STRATEGIES: tuple[str, ...] = ("auto", "trial", "sieve", "miller-rabin")

SEGMENT_SIZE = 1 << 16
# Base primes up to this bound fit comfortably in memory (~660k primes).
SIEVE_BASE_LIMIT = 10_000_000
# Below this span building base primes costs more than trial division.
SIEVE_MIN_SPAN = 64
# Beyond this candidate size trial division stops being interactive.
TRIAL_DIVISION_LIMIT = 1 << 32

_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_SMALL_PRIMES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)


def is_prime(n: int) -> bool:
    """Trial-division primality test.

    ``n <= 1`` is not prime, 2 is the only even prime, and odd ``n`` is
    tested against every odd divisor from 3 to ``isqrt(n)`` inclusive.
    """

    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    limit = isqrt(n)
    for d in range(3, limit + 1, 2):
        if n % d == 0:
            return False
    return True


def is_prime_miller_rabin(n: int) -> bool:
    """Deterministic Miller-Rabin, exact for every ``n < 3.18 * 10**23``."""

    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for a in _MR_BASES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def base_primes(limit: int) -> list[int]:
    """Plain sieve of Eratosthenes: every prime ``<= limit``."""

    if limit < 2:
        return []
    flags = bytearray(b"\x01") * (limit + 1)
    flags[0:2] = b"\x00\x00"
    for p in range(2, isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return [i for i, flag in enumerate(flags) if flag]


def _trial_primes(start: int, end: int) -> list[int]:
    return [n for n in range(start, end + 1) if is_prime(n)]


def _miller_rabin_primes(start: int, end: int) -> list[int]:
    return [n for n in range(start, end + 1) if is_prime_miller_rabin(n)]


def _sieve_primes(start: int, end: int) -> list[int]:
    low = max(start, 2)
    if low > end:
        return []

    primes_below_root = base_primes(isqrt(end))
    found: list[int] = []

    for seg_low in range(low, end + 1, SEGMENT_SIZE):
        seg_high = min(seg_low + SEGMENT_SIZE - 1, end)
        size = seg_high - seg_low + 1
        segment = bytearray(b"\x01") * size
        for p in primes_below_root:
            pp = p * p
            if pp > seg_high:
                break
            first = max(pp, (seg_low + p - 1) // p * p)
            if first > seg_high:
                continue
            offset = first - seg_low
            segment[offset::p] = bytes(len(range(offset, size, p)))
        found.extend(seg_low + i for i, flag in enumerate(segment) if flag)

    return found


_STRATEGY_IMPL: dict[str, Callable[[int, int], list[int]]] = {
    "trial": _trial_primes,
    "sieve": _sieve_primes,
    "miller-rabin": _miller_rabin_primes,
}


def choose_strategy(range_: NumberRange) -> str:
    """Resolve ``auto`` to a concrete strategy for ``range_``."""

    if isqrt(range_.end) <= SIEVE_BASE_LIMIT and range_.span >= SIEVE_MIN_SPAN:
        return "sieve"
    if range_.end > TRIAL_DIVISION_LIMIT:
        return "miller-rabin"
    return "trial"


def resolve_strategy(range_: NumberRange, strategy: str = "auto") -> str:
    """Validate ``strategy`` and resolve ``auto`` against ``range_``."""

    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{strategy}'. Expected one of: {', '.join(STRATEGIES)}")
    if strategy == "auto":
        return choose_strategy(range_)
    return strategy


def enumerate_range(range_: NumberRange, *, strategy: str = "auto") -> list[int]:
    """Primes in an already validated range, ascending and duplicate-free."""

    concrete = resolve_strategy(range_, strategy)
    return _STRATEGY_IMPL[concrete](range_.start, range_.end)


def enumerate_primes(start: int, end: int, *, strategy: str = "auto") -> list[int]:
    """Return every prime in ``[start, end]`` in ascending order.

    Raises ``InvalidRange`` when ``start < 1`` or ``end < start`` and
    ``RangeOverflow`` when ``end`` is beyond the signed 64-bit domain.
    """

    return enumerate_range(NumberRange(start=start, end=end), strategy=strategy)
