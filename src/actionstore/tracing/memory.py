"""Bounded in-memory ActionLog."""

from __future__ import annotations

import threading
from collections import OrderedDict

from actionstore.tracing.models import DispatchRecord


class InMemoryActionLog:
    """Keeps the most recent ``capacity`` records in memory.

    Thread-safe: completions dispatched from the background effect loop may
    record concurrently with readers on other threads.
    """

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._records: OrderedDict[int, DispatchRecord] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, record: DispatchRecord) -> None:
        with self._lock:
            self._records[record.seq] = record
            while len(self._records) > self._capacity:
                oldest = min(self._records)
                del self._records[oldest]

    def get(self, seq: int) -> DispatchRecord | None:
        with self._lock:
            return self._records.get(seq)

    def records(self, kind: str | None = None, top_level_only: bool = False) -> list[DispatchRecord]:
        with self._lock:
            selected = sorted(self._records.values(), key=lambda r: r.seq)
        if kind is not None:
            selected = [r for r in selected if r.kind == kind]
        if top_level_only:
            selected = [r for r in selected if r.top_level]
        return selected

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._records)
