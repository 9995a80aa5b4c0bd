"""Store: the single entry point through which state changes.

Usage:
    store = Store(
        combine_reducers({"thing": thing_reducer, "history": history_reducer}),
        middleware=[EffectMiddleware(performer), UndoRedoMiddleware(inverses)],
    )
    unsubscribe = store.subscribe(lambda state: print(state.thing.a))
    store.dispatch(IncA())
    store.select("thing.a")
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from enum import Enum, auto
from typing import Any

from actionstore.core.action import Action, Init
from actionstore.core.reducer import Reducer, StateTree
from actionstore.effects.runner import EffectRunner
from actionstore.middleware.protocol import Middleware
from actionstore.store.pipeline import compose

logger = logging.getLogger(__name__)

Listener = Callable[[StateTree], None]


class PipelineStatus(Enum):
    """Whether a dispatch is currently propagating through the pipeline."""

    IDLE = auto()
    DISPATCHING = auto()


class Store:
    """Single-writer state container.

    Every change goes through ``dispatch``, which runs the middleware chain and
    the root reducer synchronously. Dispatches made by middleware while
    another dispatch is running are ordinary nested calls: they complete,
    depth-first, before the outer dispatch continues. Effect completions
    arriving from another thread wait on a re-entrant lock, so only one
    dispatch cycle runs at a time. Listeners are called after the lock is
    released, with the tree the cycle produced.

    The state tree is never modified in place. Each reducer step swaps in a
    new tree; if a dispatch cycle raises, the tree from before the cycle is
    restored before the exception propagates.

    Args:
        reducer: Root reducer (see combine_reducers).
        initial_state: Starting tree. Defaults to reducer(None, Init()).
        middleware: Interceptors in pipeline order.
        runner: Scheduler for effect coroutines. Defaults to a new EffectRunner.
    """

    def __init__(
        self,
        reducer: Reducer,
        initial_state: StateTree | None = None,
        middleware: Sequence[Middleware] = (),
        runner: EffectRunner | None = None,
    ) -> None:
        self._reducer = reducer
        self._state: StateTree = (
            initial_state if initial_state is not None else reducer(None, Init())
        )
        self._middleware = tuple(middleware)
        self._runner = runner or EffectRunner()
        self._listeners: dict[object, Listener] = {}
        self._lock = threading.RLock()
        self._depth = 0
        self._pipeline = compose(self._middleware, self, self._apply)

    @property
    def state(self) -> StateTree:
        """Latest state tree."""
        return self._state

    @property
    def depth(self) -> int:
        """Nesting level of the running dispatch; 0 when idle."""
        return self._depth

    @property
    def status(self) -> PipelineStatus:
        return PipelineStatus.DISPATCHING if self._depth else PipelineStatus.IDLE

    @property
    def runner(self) -> EffectRunner:
        return self._runner

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return self._middleware

    def dispatch(self, action: Action) -> StateTree:
        """Run action through the pipeline and return the resulting tree.

        Returns as soon as the synchronous part is done; effects scheduled by
        the action complete later with their own dispatch.

        Raises:
            TypeError: If action is not an Action.
        """
        if not isinstance(action, Action):
            raise TypeError(f"dispatch() expects an Action, got {type(action).__name__}")

        with self._lock:
            outermost = self._depth == 0
            before = self._state
            self._depth += 1
            try:
                self._pipeline(action)
            except BaseException:
                if outermost:
                    self._state = before
                raise
            finally:
                self._depth -= 1

            state = self._state
            if not outermost:
                return state
            listeners = list(self._listeners.values())

        # Listeners run outside the lock; a completion may dispatch meanwhile.
        logger.debug("Dispatched %s", action.kind)
        self._notify(state, listeners)
        return state

    def _apply(self, action: Action) -> StateTree:
        self._state = self._reducer(self._state, action)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with the latest tree after every dispatch cycle.

        A cycle is one outermost dispatch, including everything dispatched
        from inside it (undo replays, PushUndo).

        Returns:
            Function removing the subscription. Calling it twice is harmless.
        """
        token = object()
        with self._lock:
            self._listeners[token] = listener

        def unsubscribe() -> None:
            with self._lock:
                self._listeners.pop(token, None)

        return unsubscribe

    def _notify(self, state: StateTree, listeners: list[Listener]) -> None:
        for listener in listeners:
            try:
                listener(state)
            except Exception:
                logger.exception("Store listener %r raised", listener)

    def select(self, path: str | Callable[[StateTree], Any]) -> Any:
        """Read part of the latest tree.

        Args:
            path: Dotted path ("thing.a") or a selector function.

        Raises:
            KeyError: If a path segment does not exist.
        """
        state = self._state
        if callable(path):
            return path(state)

        value: Any = state
        for part in path.split("."):
            if isinstance(value, Mapping):
                if part not in value:
                    raise KeyError(path)
                value = value[part]
            elif part and not part.startswith("_") and hasattr(value, part):
                value = getattr(value, part)
            else:
                raise KeyError(path)
        return value

    async def drain(self) -> None:
        """Wait until every scheduled effect has dispatched its completion."""
        await self._runner.drain()

    def drain_sync(self, timeout: float | None = None) -> None:
        """Blocking drain() for synchronous callers."""
        self._runner.drain_sync(timeout)

    def __repr__(self) -> str:
        return f"Store(slices={list(self._state)}, middleware={[type(m).__name__ for m in self._middleware]})"
