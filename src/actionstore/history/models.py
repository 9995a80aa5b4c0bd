"""Undo/redo data model and meta actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from actionstore.core.action import Action, action, decode_value, encode_value


@dataclass(frozen=True, slots=True)
class UndoRecord:
    """One reversible step.

    Attributes:
        inverse: Applied to the state produced by ``forward``, restores the
            state that existed before ``forward``.
        forward: The original action, re-applied by Redo.
        description: Human-readable label ("inc A", "append to B").
    """

    inverse: Action
    forward: Action
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "inverse": encode_value(self.inverse),
            "forward": encode_value(self.forward),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UndoRecord:
        return cls(
            inverse=decode_value(data["inverse"]),
            forward=decode_value(data["forward"]),
            description=data["description"],
        )


@dataclass(frozen=True, slots=True)
class UndoHistory:
    """Undo and redo stacks, both most-recent-first."""

    undo: tuple[UndoRecord, ...] = ()
    redo: tuple[UndoRecord, ...] = ()

    @property
    def can_undo(self) -> bool:
        return bool(self.undo)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo)

    def undo_description(self) -> str | None:
        """Label of the step Undo would revert, if any."""
        return self.undo[0].description if self.undo else None

    def redo_description(self) -> str | None:
        """Label of the step Redo would re-apply, if any."""
        return self.redo[0].description if self.redo else None


@action("PushUndo")
@dataclass(frozen=True, slots=True)
class PushUndo(Action):
    """Records a step. Clears the redo stack."""

    record: UndoRecord

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PushUndo:
        return cls(
            record=UndoRecord.from_dict(data["record"]),
            is_replay=data.get("is_replay", False),
        )


@action("Undo")
@dataclass(frozen=True, slots=True)
class Undo(Action):
    """Revert the most recent recorded step. No-op on an empty stack."""


@action("Redo")
@dataclass(frozen=True, slots=True)
class Redo(Action):
    """Re-apply the most recently undone step. No-op on an empty stack."""


@action("ClearUndo")
@dataclass(frozen=True, slots=True)
class ClearUndo(Action):
    """Forget both stacks."""
