"""Tests for the undo/redo history slice.

Critical Invariants:
- PushUndo always empties the redo stack
- Undo/Redo on an empty stack change nothing
- Records move between stacks intact
"""

import pytest

from actionstore import ClearUndo, PushUndo, Redo, Undo, UndoHistory, UndoRecord, history_reducer
from actionstore.history import bounded_history_reducer
from actionstore.thing import IncA, SetA


def record(n: int) -> UndoRecord:
    return UndoRecord(inverse=SetA(a=n), forward=IncA(), description=f"step {n}")


def test_initial_state_is_empty():
    history = history_reducer(None, Undo())

    assert history == UndoHistory()
    assert not history.can_undo
    assert not history.can_redo
    assert history.undo_description() is None


def test_push_prepends():
    history = history_reducer(None, PushUndo(record(1)))
    history = history_reducer(history, PushUndo(record(2)))

    assert history.undo == (record(2), record(1))
    assert history.undo_description() == "step 2"


def test_undo_moves_head_to_redo():
    history = UndoHistory(undo=(record(2), record(1)))

    after = history_reducer(history, Undo())

    assert after.undo == (record(1),)
    assert after.redo == (record(2),)
    assert after.redo_description() == "step 2"


def test_redo_moves_head_back():
    history = UndoHistory(undo=(record(1),), redo=(record(2),))

    after = history_reducer(history, Redo())

    assert after.undo == (record(2), record(1))
    assert after.redo == ()


def test_push_clears_redo():
    """CRITICAL: A new edit invalidates the redo future.

    Why: Redoing a step recorded against an older state would apply it to the
    wrong base and silently corrupt the slice.
    """
    history = UndoHistory(undo=(record(1),), redo=(record(2), record(3)))

    after = history_reducer(history, PushUndo(record(4)))

    assert after.undo == (record(4), record(1))
    assert after.redo == ()


@pytest.mark.parametrize("meta", [Undo(), Redo(), ClearUndo()], ids=["undo", "redo", "clear"])
def test_meta_actions_on_empty_history_are_identity(meta):
    history = UndoHistory()
    assert history_reducer(history, meta) is history


def test_clear_empties_both_stacks():
    history = UndoHistory(undo=(record(1),), redo=(record(2),))
    assert history_reducer(history, ClearUndo()) == UndoHistory()


def test_unrelated_action_is_identity():
    history = UndoHistory(undo=(record(1),))
    assert history_reducer(history, IncA()) is history


def test_bounded_history_drops_oldest():
    reducer = bounded_history_reducer(2)
    history = None
    for n in range(1, 5):
        history = reducer(history, PushUndo(record(n)))

    assert history.undo == (record(4), record(3))


def test_bounded_history_none_is_unbounded():
    assert bounded_history_reducer(None) is history_reducer


def test_bounded_history_rejects_zero():
    with pytest.raises(ValueError):
        bounded_history_reducer(0)
