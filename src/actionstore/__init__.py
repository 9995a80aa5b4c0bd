"""actionstore: action-sourced state container with undo/redo and async effects.

Usage:
    from actionstore import Undo, Redo, create_store
    from actionstore.thing import AppendToB, IncA, LoadStuff

    store = create_store()
    store.dispatch(IncA())        # thing.a 13 -> 14
    store.dispatch(AppendToB("+"))  # thing.b "hello" -> "hello+"
    store.dispatch(Undo())        # thing.b back to "hello"
    store.dispatch(Redo())

    store.dispatch(LoadStuff())   # thing.stuff_status LOADING
    await store.drain()           # thing.stuff == "Stuff"
"""

__version__ = "0.1.0"

# Core primitives
from actionstore.core import (
    Action,
    Init,
    Reducer,
    StateTree,
    UnknownActionError,
    action,
    action_from_dict,
    combine_reducers,
    get_registry,
)

# Effects
from actionstore.effects import (
    CancelEffect,
    EffectAction,
    EffectCompletion,
    EffectPerformer,
    EffectRequest,
    EffectRunner,
    EffectsState,
    EffectStatus,
    PendingEffect,
    effects_reducer,
)

# History
from actionstore.history import (
    ClearUndo,
    InverseRegistry,
    Inversion,
    PushUndo,
    Redo,
    Undo,
    UndoHistory,
    UndoRecord,
    history_reducer,
)

# Middleware
from actionstore.middleware import (
    EffectMiddleware,
    Middleware,
    TracingMiddleware,
    UndoRedoMiddleware,
)

# Store
from actionstore.store import PipelineStatus, Store

# Application wiring
from actionstore.app import create_store

__all__ = [
    # Version
    "__version__",
    # Core
    "Action",
    "Init",
    "Reducer",
    "StateTree",
    "UnknownActionError",
    "action",
    "action_from_dict",
    "combine_reducers",
    "get_registry",
    # Effects
    "CancelEffect",
    "EffectAction",
    "EffectCompletion",
    "EffectPerformer",
    "EffectRequest",
    "EffectRunner",
    "EffectsState",
    "EffectStatus",
    "PendingEffect",
    "effects_reducer",
    # History
    "ClearUndo",
    "InverseRegistry",
    "Inversion",
    "PushUndo",
    "Redo",
    "Undo",
    "UndoHistory",
    "UndoRecord",
    "history_reducer",
    # Middleware
    "Middleware",
    "EffectMiddleware",
    "TracingMiddleware",
    "UndoRedoMiddleware",
    # Store
    "PipelineStatus",
    "Store",
    "create_store",
]
