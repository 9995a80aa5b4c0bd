"""Tracing middleware: writes every action that enters the pipeline to an ActionLog."""

from __future__ import annotations

import itertools
import threading
import time
from typing import TYPE_CHECKING

from actionstore.tracing.models import DispatchRecord

if TYPE_CHECKING:
    from actionstore.core.action import Action
    from actionstore.core.reducer import StateTree
    from actionstore.middleware.protocol import DispatchAPI, Next
    from actionstore.tracing.protocol import ActionLog


class TracingMiddleware:
    """Records actions with their nesting depth and time spent downstream.

    Place it first in the chain so nested dispatches (undo replays, PushUndo,
    effect completions) are recorded as well. Sequence numbers follow entry
    order; an outer action's record is written after its nested ones.
    """

    def __init__(self, log: ActionLog) -> None:
        self._log = log
        self._seq = itertools.count(1)
        self._seq_lock = threading.Lock()

    @property
    def log(self) -> ActionLog:
        return self._log

    def handle(self, store: DispatchAPI, action: Action, next_: Next) -> StateTree:
        with self._seq_lock:
            seq = next(self._seq)
        timestamp = time.time()
        depth = store.depth
        started = time.perf_counter()
        try:
            return next_(action)
        finally:
            self._log.record(
                DispatchRecord(
                    seq=seq,
                    timestamp=timestamp,
                    action=action.to_dict(),
                    depth=depth,
                    duration_ms=(time.perf_counter() - started) * 1000.0,
                )
            )
