"""Reducer composition.

Usage:
    root = combine_reducers({"thing": thing_reducer, "history": history_reducer})
    tree = root(None, Init())  # every slice at its default
    tree = root(tree, IncA())
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from actionstore.core.reducer.models import RESERVED_SLICE_NAMES, Reducer, StateTree

if TYPE_CHECKING:
    from actionstore.core.action import Action


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """Build a root reducer from named slice reducers.

    Each slice reducer only ever sees its own slice. When no slice changes
    (by identity) the input tree itself is returned, so unknown actions are
    identity at the root as well.

    Args:
        reducers: Slice name -> slice reducer. Order is preserved in the tree.

    Returns:
        Reducer over StateTree values.

    Raises:
        ValueError: If no reducers are given, or a slice name would be
            shadowed by a StateTree method (``get``, ``items``, ``replace``, ...).
    """
    slices = dict(reducers)
    if not slices:
        raise ValueError("combine_reducers() needs at least one slice reducer")
    shadowed = sorted(RESERVED_SLICE_NAMES.intersection(slices))
    if shadowed:
        raise ValueError(f"Slice names {shadowed} clash with StateTree methods")

    def root(state: StateTree | None, action: Action) -> StateTree:
        previous = state if state is not None else StateTree()
        changed = False
        next_slices = {}
        for name, reducer in slices.items():
            before = previous.get(name)
            after = reducer(before, action)
            next_slices[name] = after
            if after is not before or name not in previous:
                changed = True
        if not changed and state is not None:
            return state
        return StateTree(next_slices)

    return root
