"""Tests for action logging and session replay."""

import pytest

from actionstore import Redo, Undo, create_store
from actionstore.config import StoreSettings
from actionstore.effects import CallablePerformer
from actionstore.thing import AppendToB, IncA, LoadStuff
from actionstore.tracing import ActionLog, DispatchRecord, InMemoryActionLog, replay_records


def make_record(seq, kind="incA", depth=1):
    return DispatchRecord(seq=seq, timestamp=0.0, action={"kind": kind, "is_replay": False}, depth=depth)


def test_in_memory_log_satisfies_protocol():
    assert isinstance(InMemoryActionLog(), ActionLog)


def test_capacity_evicts_oldest():
    log = InMemoryActionLog(capacity=2)
    for seq in (1, 2, 3):
        log.record(make_record(seq))

    assert log.count == 2
    assert log.get(1) is None
    assert [r.seq for r in log.records()] == [2, 3]


def test_filters():
    log = InMemoryActionLog()
    log.record(make_record(1, "incA"))
    log.record(make_record(2, "setA", depth=2))
    log.record(make_record(3, "incA"))

    assert [r.seq for r in log.records(kind="incA")] == [1, 3]
    assert [r.seq for r in log.records(top_level_only=True)] == [1, 3]

    log.clear()
    assert log.count == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        InMemoryActionLog(capacity=0)


def test_record_round_trips_through_dict():
    record = DispatchRecord(seq=4, timestamp=1.5, action={"kind": "incA"}, depth=2, duration_ms=0.1)
    assert DispatchRecord.from_dict(record.to_dict()) == record
    assert "metadata" not in record.to_dict()


def test_tracing_records_nested_dispatches():
    """Undo shows up as a top-level record with the replayed SetA nested under it."""
    log = InMemoryActionLog()
    store = create_store(StoreSettings(), action_log=log)

    store.dispatch(IncA())
    store.dispatch(Undo())

    kinds = [(r.kind, r.depth) for r in log.records()]
    assert kinds == [("incA", 1), ("PushUndo", 2), ("Undo", 1), ("setA", 2)]
    assert log.records(kind="setA")[0].action["is_replay"] is True


def test_trace_enabled_setting_creates_log():
    store = create_store(StoreSettings(trace_enabled=True, trace_capacity=5))
    log = store.middleware[0].log

    assert isinstance(log, InMemoryActionLog)
    assert log.capacity == 5


def test_replay_reproduces_session():
    """CRITICAL: Replaying the top-level records rebuilds the same thing slice.

    Why: Recorded sessions are only useful for debugging if they reproduce
    the state exactly, undo steps included.
    """
    log = InMemoryActionLog()
    source = create_store(StoreSettings(), action_log=log)
    for act in (IncA(), AppendToB("+"), IncA(), Undo(), Undo(), Redo()):
        source.dispatch(act)

    fresh = create_store(StoreSettings())
    state = replay_records(fresh, log.records())

    assert state.thing == source.state.thing
    assert state.history == source.state.history


def test_replay_skips_completions_and_reruns_effects():
    log = InMemoryActionLog()
    performer = CallablePerformer(lambda request: request.get("value"))
    source = create_store(StoreSettings(), performer, action_log=log)
    source.dispatch(LoadStuff(value="x"))
    source.drain_sync(timeout=5)

    fresh = create_store(StoreSettings(), performer)
    replay_records(fresh, log.records())
    fresh.drain_sync(timeout=5)

    assert fresh.select("thing.stuff") == "x"
    assert len(fresh.select("effects")) == 1
