"""Tracing: recording and replaying the actions a store dispatched.

Usage:
    from actionstore.tracing import InMemoryActionLog, replay_records

    log = InMemoryActionLog(capacity=500)
    store = create_store(action_log=log)
    ...
    fresh = create_store()
    replay_records(fresh, log.records())
"""

from actionstore.tracing.memory import InMemoryActionLog
from actionstore.tracing.models import DispatchRecord
from actionstore.tracing.protocol import ActionLog
from actionstore.tracing.replay import replay_records

__all__ = [
    "ActionLog",
    "DispatchRecord",
    "InMemoryActionLog",
    "replay_records",
]
