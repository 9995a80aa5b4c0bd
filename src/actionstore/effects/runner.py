"""Out-of-band scheduling of effect coroutines.

Inside a running event loop, effects become tasks on that loop and their
completions are dispatched from the loop's thread. From plain synchronous code
they run on a shared background loop (SyncRunner); completions then arrive
from that thread and the store serializes them with its dispatch lock.

Usage:
    runner = EffectRunner()
    runner.submit(coro)          # never blocks
    await runner.drain()         # inside a loop
    runner.drain_sync(timeout=5) # from sync code
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
import time
from collections.abc import Coroutine
from typing import Any, Union

logger = logging.getLogger(__name__)

_Future = Union[asyncio.Future, concurrent.futures.Future]


class SyncRunner:
    """Thread-safe async runner for sync contexts. Singleton per process."""

    _instance: SyncRunner | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    @classmethod
    def get(cls) -> SyncRunner:
        """Get the singleton SyncRunner instance, creating it if necessary."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    inst = cls()
                    inst._start()
                    cls._instance = inst
        return cls._instance

    def _start(self) -> None:
        """Start the background event loop thread."""
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever,
            daemon=True,
            name="actionstore-effects-loop",
        )
        self._thread.start()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            raise RuntimeError("Runner not initialized")
        return self._loop

    def submit(self, coro: Coroutine[Any, Any, Any]) -> concurrent.futures.Future:
        """Schedule a coroutine on the background loop without waiting for it."""
        return asyncio.run_coroutine_threadsafe(coro, self.loop)


class EffectRunner:
    """Schedules effect coroutines and tracks the ones still in flight.

    Args:
        loop: Loop to run effects on. By default, the loop running in the
            submitting thread, or the background SyncRunner loop if none is.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._in_flight: set[_Future] = set()
        self._lock = threading.Lock()

    def submit(self, coro: Coroutine[Any, Any, Any]) -> None:
        """Schedule coro out-of-band. Returns before it starts running."""
        try:
            running: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        target = self._loop or running
        future: _Future
        if target is not None and target is running:
            future = target.create_task(coro)
        elif target is not None:
            future = asyncio.run_coroutine_threadsafe(coro, target)
        else:
            future = SyncRunner.get().submit(coro)

        with self._lock:
            self._in_flight.add(future)
        future.add_done_callback(self._finished)

    def _finished(self, future: _Future) -> None:
        with self._lock:
            self._in_flight.discard(future)
        if future.cancelled():
            logger.debug("Effect task cancelled before completing")
            return
        exc = future.exception()
        if exc is not None:
            logger.error("Effect task crashed while dispatching its completion", exc_info=exc)

    def _pending(self) -> list[_Future]:
        with self._lock:
            return [f for f in self._in_flight if not f.done()]

    @property
    def in_flight(self) -> int:
        """Number of effects scheduled and not yet finished."""
        return len(self._pending())

    async def drain(self) -> None:
        """Wait until no effect is in flight, including ones started meanwhile."""
        while True:
            pending = self._pending()
            if not pending:
                return
            await asyncio.gather(
                *(f if isinstance(f, asyncio.Future) else asyncio.wrap_future(f) for f in pending),
                return_exceptions=True,
            )

    def drain_sync(self, timeout: float | None = None) -> None:
        """Block until no effect is in flight.

        Raises:
            RuntimeError: If effects run as tasks on an event loop; await
                drain() from that loop instead.
            TimeoutError: If effects are still running after timeout seconds.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            pending = self._pending()
            if not pending:
                return
            if any(isinstance(f, asyncio.Future) for f in pending):
                raise RuntimeError("Effects are running on an event loop; await drain() instead")
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            _, not_done = concurrent.futures.wait(pending, timeout=remaining)
            if not_done:
                raise TimeoutError(f"{len(not_done)} effect(s) still running after {timeout}s")
