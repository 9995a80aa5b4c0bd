"""Wiring of the sample application store.

Usage:
    from actionstore.app import create_store
    from actionstore.thing import IncA

    store = create_store()
    store.dispatch(IncA())
    store.select("thing.a")  # 14
"""

from __future__ import annotations

from actionstore.config import StoreSettings
from actionstore.core.reducer import Reducer, StateTree, combine_reducers
from actionstore.count import InMemoryCountService, count_reducer
from actionstore.effects import (
    EffectPerformer,
    EffectRunner,
    RoutingPerformer,
    TimerPerformer,
    effects_reducer,
)
from actionstore.history import InverseRegistry, bounded_history_reducer
from actionstore.middleware import (
    EffectMiddleware,
    Middleware,
    TracingMiddleware,
    UndoRedoMiddleware,
)
from actionstore.store import Store
from actionstore.thing import thing_inverses, thing_reducer
from actionstore.tracing import ActionLog, InMemoryActionLog


def create_root_reducer(settings: StoreSettings | None = None) -> Reducer:
    """Root reducer with the thing, count, effects and history slices."""
    settings = settings or StoreSettings()
    return combine_reducers(
        {
            "thing": thing_reducer,
            "count": count_reducer,
            "effects": effects_reducer,
            "history": bounded_history_reducer(settings.history_limit),
        }
    )


def default_performer(settings: StoreSettings | None = None) -> RoutingPerformer:
    """Timer effects on a real clock, remote calls against an in-memory counter."""
    settings = settings or StoreSettings()
    return RoutingPerformer(
        {
            "timer": TimerPerformer(default_delay=settings.timer_delay),
            "remote": InMemoryCountService(),
        }
    )


def create_store(
    settings: StoreSettings | None = None,
    performer: EffectPerformer | None = None,
    *,
    initial_state: StateTree | None = None,
    action_log: ActionLog | None = None,
    runner: EffectRunner | None = None,
    inverses: InverseRegistry | None = None,
) -> Store:
    """Build an isolated store for the sample application.

    Pipeline: [TracingMiddleware] -> EffectMiddleware -> UndoRedoMiddleware -> reducer.

    Args:
        settings: Store configuration. Defaults to StoreSettings() (env).
        performer: Carries out effects. Defaults to default_performer().
        initial_state: Starting tree instead of every slice's default.
        action_log: Where to trace actions. When omitted and tracing is
            enabled in settings, an InMemoryActionLog is created.
        runner: Effect scheduler. Defaults to a new EffectRunner.
        inverses: Inverse derivations. Defaults to the thing slice's.

    Returns:
        A new Store; instances share nothing.
    """
    settings = settings or StoreSettings()
    if performer is None:
        performer = default_performer(settings)
    if action_log is None and settings.trace_enabled:
        action_log = InMemoryActionLog(capacity=settings.trace_capacity)

    middleware: list[Middleware] = []
    if action_log is not None:
        middleware.append(TracingMiddleware(action_log))
    middleware.append(EffectMiddleware(performer))
    middleware.append(UndoRedoMiddleware(inverses if inverses is not None else thing_inverses))

    return Store(
        create_root_reducer(settings),
        initial_state=initial_state,
        middleware=middleware,
        runner=runner,
    )
