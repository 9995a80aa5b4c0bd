"""Asynchronous effects: requests, pending-effect tracking, performers, runner.

Usage:
    from actionstore.effects import EffectAction, EffectRequest, TimerPerformer
"""

from actionstore.effects.models import (
    CancelEffect,
    EffectAction,
    EffectCompletion,
    EffectRequest,
    EffectsState,
    EffectStatus,
    LoadStatus,
    PendingEffect,
    RetryPolicy,
    new_effect_key,
)
from actionstore.effects.performers import (
    CallablePerformer,
    RetryingPerformer,
    RoutingPerformer,
    TimerPerformer,
)
from actionstore.effects.protocol import EffectPerformer
from actionstore.effects.reducer import effects_reducer
from actionstore.effects.runner import EffectRunner, SyncRunner

__all__ = [
    # Models
    "CancelEffect",
    "EffectAction",
    "EffectCompletion",
    "EffectRequest",
    "EffectsState",
    "EffectStatus",
    "LoadStatus",
    "PendingEffect",
    "RetryPolicy",
    "new_effect_key",
    # Performers
    "EffectPerformer",
    "CallablePerformer",
    "RetryingPerformer",
    "RoutingPerformer",
    "TimerPerformer",
    # Runtime
    "EffectRunner",
    "SyncRunner",
    "effects_reducer",
]
