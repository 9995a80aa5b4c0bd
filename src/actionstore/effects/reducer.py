"""Reducer for the pending-effects slice."""

from __future__ import annotations

import logging
from dataclasses import replace

from actionstore.core.action import Action
from actionstore.effects.models import (
    CancelEffect,
    EffectAction,
    EffectCompletion,
    EffectsState,
    EffectStatus,
    PendingEffect,
)

logger = logging.getLogger(__name__)


def effects_reducer(state: EffectsState | None, action: Action) -> EffectsState:
    """Track effects from scheduling to their terminal status.

    Terminal entries are kept so callers can read the final outcome. A
    completion for a cancelled or unknown key leaves the slice unchanged.
    """
    if state is None:
        state = EffectsState()

    if isinstance(action, EffectAction):
        entry = PendingEffect(
            key=action.effect_key,
            trigger=action.kind,
            request_kind=_request_kind(action),
        )
        return _with_entry(state, entry)

    if isinstance(action, EffectCompletion):
        if action.effect_key is None:
            return state
        entry = state.get(action.effect_key)
        if entry is None or entry.status is EffectStatus.CANCELLED:
            return state
        if action.failed:
            updated = replace(entry, status=EffectStatus.FAILED, result=None, error=action.error)
        else:
            updated = replace(entry, status=EffectStatus.SUCCEEDED, result=action.result, error=None)
        return _with_entry(state, updated)

    if isinstance(action, CancelEffect):
        entry = state.get(action.effect_key)
        if entry is None or entry.status is not EffectStatus.PENDING:
            return state
        return _with_entry(state, replace(entry, status=EffectStatus.CANCELLED))

    return state


def _with_entry(state: EffectsState, entry: PendingEffect) -> EffectsState:
    entries = dict(state.entries)
    entries[entry.key] = entry
    return EffectsState(entries=entries)


def _request_kind(action: EffectAction) -> str:
    # The request is rebuilt by the middleware; a broken one surfaces there as a failure.
    try:
        return action.effect_request().kind
    except Exception:
        logger.debug("Could not build the request of %s", action.kind, exc_info=True)
        return "?"
