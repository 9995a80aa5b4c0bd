"""Middleware protocol.

A middleware intercepts every action on its way to the root reducer:

    class Logger:
        def handle(self, store, action, next_):
            print("before", store.state)
            state = next_(action)
            print("after", state)
            return state

``next_`` continues down the chain; ``store.dispatch`` re-enters the chain from
the top. A middleware that never calls ``next_`` swallows the action.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from actionstore.core.action import Action
    from actionstore.core.reducer import StateTree
    from actionstore.effects.runner import EffectRunner

Next = Callable[["Action"], "StateTree"]
"""Signature: (action) -> state tree after the rest of the chain ran."""


class DispatchAPI(Protocol):
    """The part of a store visible to middleware."""

    @property
    def state(self) -> StateTree: ...

    @property
    def depth(self) -> int:
        """Nesting level of the dispatch currently running (1 = outermost)."""
        ...

    @property
    def runner(self) -> EffectRunner: ...

    def dispatch(self, action: Action) -> StateTree: ...


@runtime_checkable
class Middleware(Protocol):
    """Interceptor in the dispatch pipeline."""

    def handle(self, store: DispatchAPI, action: Action, next_: Next) -> StateTree:
        """Process action, usually by calling next_(action) at some point.

        Args:
            store: Dispatch entry point and current state.
            action: The action being dispatched.
            next_: Rest of the pipeline, ending in the root reducer.

        Returns:
            The state tree once the action has been handled.
        """
        ...
