"""Reducer for the thing slice."""

from __future__ import annotations

from dataclasses import replace

from actionstore.core.action import Action
from actionstore.thing.actions import (
    AddToA,
    AppendToB,
    IncA,
    LoadStuff,
    ResetStuff,
    SetA,
    SetB,
    SetStuff,
)
from actionstore.thing.models import LoadStatus, ThingState


def thing_reducer(state: ThingState | None, action: Action) -> ThingState:
    if state is None:
        state = ThingState()

    if isinstance(action, SetA):
        return replace(state, a=action.a)

    if isinstance(action, IncA):
        return replace(state, a=state.a + 1)

    if isinstance(action, AddToA):
        return replace(state, a=state.a + action.amount)

    if isinstance(action, SetB):
        return replace(state, b=action.b)

    if isinstance(action, AppendToB):
        return replace(state, b=state.b + action.text)

    if isinstance(action, LoadStuff):
        return replace(
            state,
            stuff=None,
            stuff_status=LoadStatus.LOADING,
            stuff_key=action.effect_key,
            stuff_error=None,
        )

    if isinstance(action, SetStuff):
        # Only the load we are waiting for may land; reset or a newer load wins.
        if action.effect_key != state.stuff_key or state.stuff_status is not LoadStatus.LOADING:
            return state
        if action.failed:
            return replace(state, stuff_status=LoadStatus.FAILED, stuff_error=action.error)
        return replace(state, stuff=action.result, stuff_status=LoadStatus.LOADED)

    if isinstance(action, ResetStuff):
        if state.stuff_status is LoadStatus.IDLE and state.stuff is None:
            return state
        return replace(
            state, stuff=None, stuff_status=LoadStatus.IDLE, stuff_key=None, stuff_error=None
        )

    return state
