"""Store and dispatch pipeline.

Architecture Note:
    store/ is the stateful service layer. It owns the current state tree and
    is the only thing allowed to replace it.
"""

from actionstore.store.pipeline import compose
from actionstore.store.store import Listener, PipelineStatus, Store

__all__ = [
    "Listener",
    "PipelineStatus",
    "Store",
    "compose",
]
