"""Composition of middleware around the root reducer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from actionstore.middleware.protocol import Middleware

if TYPE_CHECKING:
    from actionstore.core.action import Action
    from actionstore.core.reducer import StateTree
    from actionstore.middleware.protocol import DispatchAPI, Next


def compose(middleware: Sequence[Middleware], store: DispatchAPI, terminal: Next) -> Next:
    """Chain middleware so the first one sees each action first.

    Args:
        middleware: Interceptors in pipeline order.
        store: Passed to every interceptor as its dispatch entry point.
        terminal: Final step, applying the root reducer.

    Returns:
        Callable running one action through the whole chain.

    Raises:
        TypeError: If an element does not implement Middleware.
    """
    for mw in middleware:
        if not isinstance(mw, Middleware):
            raise TypeError(f"{mw!r} does not implement Middleware.handle()")

    next_ = terminal
    for mw in reversed(middleware):
        next_ = _bind(mw, store, next_)
    return next_


def _bind(mw: Middleware, store: DispatchAPI, next_: Next) -> Next:
    def step(action: Action) -> StateTree:
        return mw.handle(store, action, next_)

    step.__qualname__ = f"{type(mw).__name__}.handle"
    return step
