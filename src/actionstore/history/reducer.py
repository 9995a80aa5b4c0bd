"""Reducer for the undo/redo slice."""

from __future__ import annotations

from dataclasses import replace

from actionstore.core.action import Action
from actionstore.core.reducer import Reducer
from actionstore.history.models import ClearUndo, PushUndo, Redo, Undo, UndoHistory


def history_reducer(state: UndoHistory | None, action: Action) -> UndoHistory:
    """Move records between the undo and redo stacks.

    PushUndo prepends to undo and empties redo (a fresh edit invalidates the
    redo future). Undo and Redo move the head of one stack onto the other and
    do nothing when their source stack is empty.
    """
    if state is None:
        state = UndoHistory()

    if isinstance(action, PushUndo):
        return UndoHistory(undo=(action.record, *state.undo), redo=())

    if isinstance(action, Undo):
        if not state.undo:
            return state
        head, *rest = state.undo
        return UndoHistory(undo=tuple(rest), redo=(head, *state.redo))

    if isinstance(action, Redo):
        if not state.redo:
            return state
        head, *rest = state.redo
        return UndoHistory(undo=(head, *state.undo), redo=tuple(rest))

    if isinstance(action, ClearUndo):
        if not state.undo and not state.redo:
            return state
        return UndoHistory()

    return state


def bounded_history_reducer(limit: int | None) -> Reducer:
    """History reducer that keeps at most ``limit`` undo records.

    The oldest records fall off the end. ``None`` means unbounded.
    """
    if limit is None:
        return history_reducer
    if limit < 1:
        raise ValueError(f"history limit must be at least 1, got {limit}")

    def reducer(state: UndoHistory | None, action: Action) -> UndoHistory:
        result = history_reducer(state, action)
        if len(result.undo) > limit:
            result = replace(result, undo=result.undo[:limit])
        return result

    return reducer
