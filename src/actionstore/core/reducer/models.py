"""State tree: the immutable root value held by a store."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from actionstore.core.action.models import encode_value

if TYPE_CHECKING:
    from actionstore.core.action import Action

Reducer = Callable[[Any, "Action"], Any]
"""Signature: (substate or None, action) -> substate. Pure; identity on unknown actions."""


class StateTree(Mapping[str, Any]):
    """Immutable mapping of slice name to slice value.

    A new tree is built for every change; a tree that has been handed out is
    never modified, so a reader holding one always sees a consistent snapshot.

    Slices are reachable both as items and as attributes:
        tree["thing"].a == tree.thing.a
    """

    __slots__ = ("_slices",)

    def __init__(self, slices: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        merged = dict(slices or {})
        merged.update(kwargs)
        object.__setattr__(self, "_slices", merged)

    def __getitem__(self, name: str) -> Any:
        return self._slices[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._slices)

    def __len__(self) -> int:
        return len(self._slices)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._slices[name]
        except KeyError:
            raise AttributeError(f"StateTree has no slice {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("StateTree is immutable; dispatch an action instead")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("StateTree is immutable; dispatch an action instead")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StateTree):
            return self._slices == other._slices
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self) -> tuple[Any, ...]:
        return (StateTree, (self._slices,))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._slices.items())
        return f"StateTree({inner})"

    def replace(self, **changes: Any) -> StateTree:
        """Return a new tree with the given slices replaced or added."""
        return StateTree(self._slices, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain, JSON-serializable data."""
        return {name: _plain(value) for name, value in self._slices.items()}


def _plain(value: Any) -> Any:
    if isinstance(value, StateTree):
        return value.to_dict()
    return encode_value(value)


RESERVED_SLICE_NAMES = frozenset(name for name in dir(StateTree) if not name.startswith("_"))
"""Names that attribute access on a StateTree resolves to methods, not slices."""
