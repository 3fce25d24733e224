from __future__ import annotations

import threading

import pytest

from adapters.session_store import InMemoryReportStore
from core.domain.models import NumberRange, PrimeReport
from core.interfaces.report_store import ReportStore


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _report(end: int = 10) -> PrimeReport:
    return PrimeReport(range=NumberRange(start=1, end=end), primes=[2, 3, 5, 7])


def test_store_satisfies_protocol() -> None:
    assert isinstance(InMemoryReportStore(), ReportStore)


def test_put_and_get_roundtrip() -> None:
    store = InMemoryReportStore()
    sid = store.new_session_id()
    report = _report()
    store.put(sid, report)
    assert store.get(sid) is report
    assert store.get("unknown") is None
    assert store.get(None) is None


def test_session_ids_are_unique_and_opaque() -> None:
    store = InMemoryReportStore()
    ids = {store.new_session_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(len(i) >= 24 for i in ids)


def test_put_replaces_previous_result() -> None:
    store = InMemoryReportStore()
    store.put("s", _report(10))
    store.put("s", _report(20))
    assert store.get("s").range.end == 20
    assert len(store) == 1


def test_entries_expire_after_ttl() -> None:
    clock = _Clock()
    store = InMemoryReportStore(ttl_seconds=30, clock=clock)
    store.put("s", _report())
    clock.now += 29
    assert store.get("s") is not None
    clock.now += 2
    assert store.get("s") is None
    assert len(store) == 0


def test_oldest_entry_evicted_when_full() -> None:
    store = InMemoryReportStore(max_entries=2)
    store.put("a", _report())
    store.put("b", _report())
    store.put("c", _report())
    assert store.get("a") is None
    assert store.get("b") is not None
    assert store.get("c") is not None


@pytest.mark.parametrize("kwargs", [{"ttl_seconds": 0}, {"max_entries": 0}])
def test_rejects_bad_limits(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        InMemoryReportStore(**kwargs)


def test_concurrent_puts() -> None:
    store = InMemoryReportStore(max_entries=1000)

    def worker(prefix: int) -> None:
        for i in range(100):
            store.put(f"{prefix}-{i}", _report())

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store) == 800
