"""Inverse-action derivation.

An InverseRegistry maps action types to functions that look at the whole state
tree *before* the action is applied and return the action that would undo it.

Usage:
    inverses = InverseRegistry()

    @inverses.register(IncA)
    def _inc_a(state: StateTree, action: IncA) -> Inversion:
        return Inversion(SetA(a=state.thing.a), "inc A")

    record = inverses.derive(store.state, IncA())  # UndoRecord or None
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from actionstore.core.action import Action
from actionstore.core.reducer import StateTree
from actionstore.history.models import UndoRecord

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Action)

Derivation = Callable[[StateTree, Any], "Inversion | None"]
"""Signature: (state before the action, action) -> Inversion, or None if not invertible."""


@dataclass(frozen=True, slots=True)
class Inversion:
    """Result of a derivation: the inverse action and a label for the step."""

    inverse: Action
    description: str


class InverseRegistry:
    """Per-action-type inverse derivations.

    Types without a registered derivation are not invertible. Lookup walks the
    action's MRO, so a derivation registered for a base class covers its
    subclasses unless they register their own.
    """

    def __init__(self) -> None:
        self._derivations: dict[type[Action], Derivation] = {}

    def register(self, action_type: type[A]) -> Callable[[Derivation], Derivation]:
        """Decorator registering a derivation for action_type."""

        def decorator(fn: Derivation) -> Derivation:
            self.add(action_type, fn)
            return fn

        return decorator

    def add(self, action_type: type[Action], fn: Derivation) -> None:
        """Register fn as the derivation for action_type (replacing any previous one)."""
        if not (isinstance(action_type, type) and issubclass(action_type, Action)):
            raise TypeError(f"{action_type!r} is not an Action subclass")
        self._derivations[action_type] = fn

    def lookup(self, action_type: type[Action]) -> Derivation | None:
        for cls in action_type.__mro__:
            fn = self._derivations.get(cls)
            if fn is not None:
                return fn
        return None

    def is_invertible(self, action_type: type[Action]) -> bool:
        return self.lookup(action_type) is not None

    def derive(self, state: StateTree, action: Action) -> UndoRecord | None:
        """Build the undo record for action against the pre-action state.

        Returns None when the action is not invertible. A derivation that
        raises or returns something other than an Inversion of an Action is
        treated the same way: the failure is logged and the dispatch continues
        without a history entry.
        """
        fn = self.lookup(type(action))
        if fn is None:
            return None

        try:
            inversion = fn(state, action)
        except Exception:
            logger.warning(
                "Inverse derivation for %s failed; not recording it", action.kind, exc_info=True
            )
            return None

        if inversion is None:
            return None
        if not isinstance(inversion, Inversion) or not isinstance(inversion.inverse, Action):
            logger.warning(
                "Inverse derivation for %s returned %r instead of an Inversion of an Action;"
                " not recording it",
                action.kind,
                inversion,
            )
            return None
        return UndoRecord(
            inverse=inversion.inverse.as_original(),
            forward=action.as_original(),
            description=str(inversion.description),
        )

    def merge(self, other: InverseRegistry) -> InverseRegistry:
        """Return a new registry holding both sets of derivations (other wins)."""
        merged = InverseRegistry()
        merged._derivations.update(self._derivations)
        merged._derivations.update(other._derivations)
        return merged

    def __len__(self) -> int:
        return len(self._derivations)
