"""Tests for the thing slice reducer."""

import pytest

from actionstore import Init
from actionstore.thing import (
    AddToA,
    AppendToB,
    IncA,
    LoadStatus,
    LoadStuff,
    ResetStuff,
    SetA,
    SetB,
    SetStuff,
    ThingState,
    thing_reducer,
)


def test_defaults():
    state = thing_reducer(None, Init())

    assert state == ThingState(a=13, b="hello", stuff=None)
    assert state.stuff_status is LoadStatus.IDLE
    assert not state.loading


@pytest.mark.parametrize(
    ("act", "expected_a"),
    [(IncA(), 14), (AddToA(5), 18), (AddToA(-20), -7), (SetA(a=0), 0)],
    ids=["inc", "add", "add-negative", "set"],
)
def test_a_updates(act, expected_a):
    assert thing_reducer(ThingState(), act).a == expected_a


def test_b_updates():
    state = thing_reducer(ThingState(), AppendToB("+"))
    assert state.b == "hello+"
    assert thing_reducer(state, SetB(b="x")).b == "x"


def test_a_is_unbounded():
    """Integers never wrap; 2**70 + 1 stays exact."""
    state = thing_reducer(ThingState(a=2**70), IncA())
    assert state.a == 2**70 + 1


def test_reducer_does_not_mutate_input():
    before = ThingState()
    thing_reducer(before, IncA())
    assert before.a == 13


def test_unknown_action_is_identity():
    state = ThingState()
    assert thing_reducer(state, Init()) is state


def test_load_then_set_stuff():
    load = LoadStuff()
    loading = thing_reducer(ThingState(), load)

    assert loading.loading
    assert loading.stuff_key == load.effect_key

    loaded = thing_reducer(loading, load.complete(result="Stuff"))
    assert loaded.stuff == "Stuff"
    assert loaded.stuff_status is LoadStatus.LOADED


def test_failed_load_records_error():
    load = LoadStuff()
    state = thing_reducer(thing_reducer(ThingState(), load), load.complete(error="TimeoutError"))

    assert state.stuff_status is LoadStatus.FAILED
    assert state.stuff_error == "TimeoutError"
    assert state.stuff is None


def test_stale_completion_is_ignored():
    """CRITICAL: Only the most recent load may land.

    Why: Two loads racing must not leave the older result on screen.
    """
    first, second = LoadStuff(value="old"), LoadStuff(value="new")
    state = thing_reducer(thing_reducer(ThingState(), first), second)

    assert thing_reducer(state, first.complete(result="old")) is state
    assert thing_reducer(state, second.complete(result="new")).stuff == "new"


def test_completion_after_reset_is_ignored():
    load = LoadStuff()
    state = thing_reducer(thing_reducer(ThingState(), load), ResetStuff())

    assert state.stuff_status is LoadStatus.IDLE
    assert thing_reducer(state, load.complete(result="Stuff")) is state


def test_completion_without_key_is_ignored():
    state = ThingState()
    assert thing_reducer(state, SetStuff(result="Stuff")) is state


def test_reset_when_idle_is_identity():
    state = ThingState()
    assert thing_reducer(state, ResetStuff()) is state
