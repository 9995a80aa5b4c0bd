"""Re-dispatching a recorded session into a store."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from actionstore.core.action import action_from_dict
from actionstore.effects.models import EffectCompletion

if TYPE_CHECKING:
    from actionstore.core.reducer import StateTree
    from actionstore.store.store import Store
    from actionstore.tracing.models import DispatchRecord

logger = logging.getLogger(__name__)


def replay_records(store: Store, records: Iterable[DispatchRecord]) -> StateTree:
    """Dispatch the caller-level actions of a recorded session into store.

    Nested records (undo replays, PushUndo, anything dispatched from inside
    middleware) are skipped because the pipeline derives them again. Effect
    completions are skipped too: replaying the effect action schedules the
    effect again on store's performer, which produces its own completion.

    Returns:
        The state tree after the last replayed action.

    Raises:
        UnknownActionError: If a record's kind is not registered.
    """
    state = store.state
    replayed = 0
    for record in sorted(records, key=lambda r: r.seq):
        if not record.top_level:
            continue
        action = action_from_dict(record.action)
        if isinstance(action, EffectCompletion):
            continue
        state = store.dispatch(action)
        replayed += 1
    logger.debug("Replayed %d recorded action(s)", replayed)
    return state
