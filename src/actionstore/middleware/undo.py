"""Undo/redo middleware: records inverses and replays them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from actionstore.history.models import PushUndo, Redo, Undo, UndoHistory

if TYPE_CHECKING:
    from actionstore.core.action import Action
    from actionstore.core.reducer import StateTree
    from actionstore.history.inverse import InverseRegistry
    from actionstore.middleware.protocol import DispatchAPI, Next

logger = logging.getLogger(__name__)


class UndoRedoMiddleware:
    """Maintains the undo/redo history slice.

    Per action:
      - Undo/Redo: if the relevant stack has a head record, dispatch its
        inverse (Undo) or forward (Redo) action flagged as a replay through
        the full pipeline, then forward the Undo/Redo itself so the history
        reducer moves the record between stacks. Empty stack: forward only.
      - Replays: forwarded with no history side effect.
      - Anything else: derive the inverse from the state *before* the action.
        If invertible, forward the action, then dispatch PushUndo with the
        record; otherwise just forward.

    Args:
        inverses: Derivations for invertible action types.
        history_slice: Name of the UndoHistory slice in the state tree.
    """

    def __init__(self, inverses: InverseRegistry, history_slice: str = "history") -> None:
        self._inverses = inverses
        self._history_slice = history_slice

    @property
    def inverses(self) -> InverseRegistry:
        return self._inverses

    def handle(self, store: DispatchAPI, action: Action, next_: Next) -> StateTree:
        if isinstance(action, (Undo, Redo)):
            history = self._history(store.state)
            stack = history.undo if isinstance(action, Undo) else history.redo
            if stack:
                record = stack[0]
                replay = record.inverse if isinstance(action, Undo) else record.forward
                logger.debug("%s %r via %s", action.kind, record.description, replay.kind)
                store.dispatch(replay.as_replay())
            return next_(action)

        if action.is_replay:
            return next_(action)

        record = self._inverses.derive(store.state, action)
        if record is None:
            return next_(action)

        next_(action)
        return store.dispatch(PushUndo(record))

    def _history(self, state: StateTree) -> UndoHistory:
        history = state.get(self._history_slice)
        if history is None:
            raise KeyError(f"State tree has no {self._history_slice!r} history slice")
        return history
