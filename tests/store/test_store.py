"""Tests for the Store dispatch cycle.

Critical Invariants:
- Listeners run once per outermost dispatch cycle
- Nested dispatches complete depth-first before the outer one continues
- A failing cycle leaves the state exactly as it was before
"""

from dataclasses import dataclass

import pytest

from actionstore import (
    Action,
    Init,
    PipelineStatus,
    StateTree,
    Store,
    action,
    combine_reducers,
    create_store,
)
from actionstore.config import StoreSettings
from actionstore.effects import CallablePerformer
from actionstore.thing import AppendToB, IncA, LoadStatus, LoadStuff, SetA, thing_reducer


@action("test.store.Boom")
@dataclass(frozen=True, slots=True)
class Boom(Action):
    pass


@action("test.store.Echo")
@dataclass(frozen=True, slots=True)
class Echo(Action):
    """Triggers an IncA from inside the pipeline."""


def exploding(state, act):
    if isinstance(act, Boom):
        raise ValueError("reducer failure")
    return 0 if state is None else state


class Recorder:
    """Middleware logging what it sees, and re-dispatching IncA on Echo."""

    def __init__(self, seen):
        self.seen = seen

    def handle(self, store, act, next_):
        self.seen.append(("enter", act.kind, store.depth))
        if isinstance(act, Echo):
            store.dispatch(IncA())
        state = next_(act)
        self.seen.append(("exit", act.kind, store.depth))
        return state


@pytest.fixture
def plain_store():
    return Store(combine_reducers({"thing": thing_reducer, "boom": exploding}))


def test_initial_state_from_init(plain_store):
    assert plain_store.select("thing.a") == 13
    assert plain_store.select("boom") == 0


def test_explicit_initial_state():
    root = combine_reducers({"thing": thing_reducer})
    start = root(None, Init()).replace(thing=thing_reducer(None, SetA(a=1)))

    store = Store(root, initial_state=start)

    assert store.state is start


def test_dispatch_returns_new_state(plain_store):
    before = plain_store.state
    after = plain_store.dispatch(IncA())

    assert after is plain_store.state
    assert after.thing.a == 14
    assert before.thing.a == 13


def test_dispatch_rejects_non_actions(plain_store):
    with pytest.raises(TypeError):
        plain_store.dispatch({"kind": "incA"})  # type: ignore[arg-type]


def test_listener_called_once_per_dispatch(plain_store):
    calls = []
    plain_store.subscribe(calls.append)

    plain_store.dispatch(IncA())
    plain_store.dispatch(AppendToB("+"))

    assert [s.thing.a for s in calls] == [14, 14]
    assert calls[-1].thing.b == "hello+"


def test_unsubscribe_is_idempotent(plain_store):
    calls = []
    unsubscribe = plain_store.subscribe(calls.append)

    unsubscribe()
    unsubscribe()
    plain_store.dispatch(IncA())

    assert calls == []


def test_raising_listener_does_not_stop_others(plain_store, caplog):
    calls = []

    def broken(state):
        raise RuntimeError("listener")

    plain_store.subscribe(broken)
    plain_store.subscribe(calls.append)

    plain_store.dispatch(IncA())

    assert len(calls) == 1
    assert "listener" in caplog.text


def test_failed_dispatch_rolls_back(plain_store):
    """CRITICAL: An exception mid-cycle restores the pre-cycle tree.

    Why: Half-applied cycles would leave slices inconsistent with each other.
    """
    plain_store.dispatch(IncA())
    before = plain_store.state
    calls = []
    plain_store.subscribe(calls.append)

    with pytest.raises(ValueError):
        plain_store.dispatch(Boom())

    assert plain_store.state is before
    assert plain_store.status is PipelineStatus.IDLE
    assert calls == []


def test_nested_dispatch_is_depth_first():
    seen = []
    store = Store(combine_reducers({"thing": thing_reducer}), middleware=[Recorder(seen)])
    notified = []
    store.subscribe(notified.append)

    store.dispatch(Echo())

    assert seen == [
        ("enter", "test.store.Echo", 1),
        ("enter", "incA", 2),
        ("exit", "incA", 2),
        ("exit", "test.store.Echo", 1),
    ]
    assert store.select("thing.a") == 14
    assert len(notified) == 1


def test_status_reflects_dispatch():
    observed = []

    class Probe:
        def handle(self, store, act, next_):
            observed.append(store.status)
            return next_(act)

    store = Store(combine_reducers({"thing": thing_reducer}), middleware=[Probe()])
    store.dispatch(IncA())

    assert observed == [PipelineStatus.DISPATCHING]
    assert store.status is PipelineStatus.IDLE
    assert store.depth == 0


def test_non_middleware_rejected():
    with pytest.raises(TypeError):
        Store(combine_reducers({"thing": thing_reducer}), middleware=[object()])  # type: ignore[list-item]


def test_select_path_and_callable(plain_store):
    assert plain_store.select("thing.b") == "hello"
    assert plain_store.select(lambda s: s.thing.a * 2) == 26


@pytest.mark.parametrize("path", ["nope", "thing.nope", "thing._a", "boom.value"])
def test_select_unknown_path_raises(plain_store, path):
    with pytest.raises(KeyError):
        plain_store.select(path)


def test_state_tree_is_never_mutated(plain_store):
    snapshot = plain_store.state
    plain_store.dispatch(IncA())

    assert isinstance(snapshot, StateTree)
    assert snapshot.thing.a == 13


def test_listener_can_wait_for_effects():
    """CRITICAL: A listener blocking on drain_sync() lets the completion land.

    Why: Completions from the background loop need the dispatch lock; a
    listener called while the lock is still held would stall them until
    the drain times out.
    """
    store = create_store(StoreSettings(), CallablePerformer(lambda request: request.get("value")))
    outcomes = []

    def wait_for_load(state):
        if state.thing.loading and not outcomes:
            store.drain_sync(timeout=5)
            outcomes.append(store.select("thing.stuff"))

    store.subscribe(wait_for_load)
    store.dispatch(LoadStuff(delay=0.0, value="Stuff"))

    assert outcomes == ["Stuff"]
    assert store.select("thing.stuff_status") is LoadStatus.LOADED


def test_listener_receives_tree_of_its_cycle(plain_store):
    calls = []
    plain_store.subscribe(lambda state: calls.append(state))

    returned = plain_store.dispatch(IncA())

    assert calls == [returned]
    assert calls[0] is returned
