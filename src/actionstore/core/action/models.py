"""Action base types.

Actions are immutable, serializable values. Every concrete action is a frozen
dataclass subclassing Action and registered under a string kind:

    @action("addToA")
    @dataclass(frozen=True, slots=True)
    class AddToA(Action):
        amount: int
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, TypeVar

A = TypeVar("A", bound="Action")


@dataclass(frozen=True, slots=True, kw_only=True)
class Action:
    """Base class for everything that can be dispatched.

    Attributes:
        is_replay: True only when the action is re-dispatched by an undo/redo
            replay. Original callers never set it.
    """

    kind: ClassVar[str] = ""

    is_replay: bool = False

    def as_replay(self: A) -> A:
        """Return a copy of this action flagged as an undo/redo replay."""
        return dataclasses.replace(self, is_replay=True)

    def as_original(self: A) -> A:
        """Return a copy of this action with the replay flag cleared."""
        if not self.is_replay:
            return self
        return dataclasses.replace(self, is_replay=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary, nested actions included."""
        data: dict[str, Any] = {"kind": self.kind}
        for f in fields(self):
            data[f.name] = encode_value(getattr(self, f.name))
        return data

    @classmethod
    def from_dict(cls: type[A], data: dict[str, Any]) -> A:
        """Create from dictionary. The ``kind`` key is ignored here.

        Subclasses holding non-action dataclasses override this.
        """
        kwargs = {k: decode_value(v) for k, v in data.items() if k != "kind"}
        return cls(**kwargs)


ACTION_TAG = "@action"
TUPLE_TAG = "@tuple"


def encode_value(value: Any) -> Any:
    """Encode a field value into plain data.

    Nested actions and tuples are wrapped in a single-key tag dict
    (``{"@action": {...}}``, ``{"@tuple": [...]}``) so that plain dicts and
    lists, whatever keys they carry, decode back unchanged.
    """
    if isinstance(value, Action):
        return {ACTION_TAG: value.to_dict()}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: encode_value(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return {TUPLE_TAG: [encode_value(v) for v in value]}
    if isinstance(value, list):
        return [encode_value(v) for v in value]
    if isinstance(value, dict):
        return {k: encode_value(v) for k, v in value.items()}
    return value


def decode_value(value: Any) -> Any:
    """Decode plain data produced by encode_value.

    Tagged dicts become actions or tuples; other dicts and lists keep their
    type. Anything else is returned as-is.
    """
    if isinstance(value, dict):
        if len(value) == 1 and ACTION_TAG in value:
            from actionstore.core.action.core import action_from_dict

            return action_from_dict(value[ACTION_TAG])
        if len(value) == 1 and TUPLE_TAG in value:
            return tuple(decode_value(v) for v in value[TUPLE_TAG])
        return {k: decode_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [decode_value(v) for v in value]
    return value


class UnknownActionError(KeyError):
    """Raised when decoding an action whose kind is not registered."""
