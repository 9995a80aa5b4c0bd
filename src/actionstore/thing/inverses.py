"""Inverse derivations for the thing slice.

Every inverse is an absolute "set" to the value read before the action ran,
so appending is undone by restoring the previous string rather than by
cutting characters off.
"""

from __future__ import annotations

from actionstore.core.reducer import StateTree
from actionstore.history.inverse import InverseRegistry, Inversion
from actionstore.thing.actions import AddToA, AppendToB, IncA, SetA, SetB

thing_inverses = InverseRegistry()


@thing_inverses.register(IncA)
def _inc_a(state: StateTree, action: IncA) -> Inversion:
    return Inversion(SetA(a=state.thing.a), "inc A")


@thing_inverses.register(AddToA)
def _add_to_a(state: StateTree, action: AddToA) -> Inversion:
    return Inversion(SetA(a=state.thing.a), f"add {action.amount} to A")


@thing_inverses.register(SetA)
def _set_a(state: StateTree, action: SetA) -> Inversion | None:
    if state.thing.a == action.a:
        return None
    return Inversion(SetA(a=state.thing.a), f"set A to {action.a}")


@thing_inverses.register(AppendToB)
def _append_to_b(state: StateTree, action: AppendToB) -> Inversion:
    return Inversion(SetB(b=state.thing.b), f"append {action.text!r} to B")


@thing_inverses.register(SetB)
def _set_b(state: StateTree, action: SetB) -> Inversion | None:
    if state.thing.b == action.b:
        return None
    return Inversion(SetB(b=state.thing.b), f"set B to {action.b!r}")
