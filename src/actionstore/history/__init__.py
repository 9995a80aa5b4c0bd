"""Undo/redo history: records, meta actions, reducer and inverse derivation.

Usage:
    from actionstore.history import InverseRegistry, Inversion, Undo, Redo

    store.dispatch(IncA())
    store.dispatch(Undo())
    store.dispatch(Redo())
"""

from actionstore.history.inverse import Derivation, InverseRegistry, Inversion
from actionstore.history.models import (
    ClearUndo,
    PushUndo,
    Redo,
    Undo,
    UndoHistory,
    UndoRecord,
)
from actionstore.history.reducer import bounded_history_reducer, history_reducer

__all__ = [
    "ClearUndo",
    "Derivation",
    "InverseRegistry",
    "Inversion",
    "PushUndo",
    "Redo",
    "Undo",
    "UndoHistory",
    "UndoRecord",
    "bounded_history_reducer",
    "history_reducer",
]
