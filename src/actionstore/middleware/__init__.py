"""Middleware: interceptors composed around the root reducer.

Default order built by actionstore.app.create_store:
    TracingMiddleware (optional) -> EffectMiddleware -> UndoRedoMiddleware -> reducer
"""

from actionstore.middleware.effects import EffectMiddleware
from actionstore.middleware.protocol import DispatchAPI, Middleware, Next
from actionstore.middleware.tracing import TracingMiddleware
from actionstore.middleware.undo import UndoRedoMiddleware

__all__ = [
    "DispatchAPI",
    "EffectMiddleware",
    "Middleware",
    "Next",
    "TracingMiddleware",
    "UndoRedoMiddleware",
]
