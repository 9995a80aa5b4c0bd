"""Reducer for the count slice."""

from __future__ import annotations

from dataclasses import replace

from actionstore.core.action import Action
from actionstore.count.actions import CountReceived, FetchCount, IncrementCount
from actionstore.count.models import CountState
from actionstore.effects.models import LoadStatus


def count_reducer(state: CountState | None, action: Action) -> CountState:
    """Track the remote counter.

    The latest request wins: an answer to an older request arriving after a
    newer one was sent is dropped. The previous count stays visible while a
    request is in flight.
    """
    if state is None:
        state = CountState()

    if isinstance(action, (FetchCount, IncrementCount)):
        return replace(state, status=LoadStatus.LOADING, error=None, key=action.effect_key)

    if isinstance(action, CountReceived):
        if action.effect_key != state.key or state.status is not LoadStatus.LOADING:
            return state
        if action.failed:
            return replace(state, status=LoadStatus.FAILED, error=action.error)
        payload = action.result or {}
        return replace(
            state,
            count=payload.get("count"),
            id=payload.get("id", state.id),
            status=LoadStatus.LOADED,
            error=None,
        )

    return state
