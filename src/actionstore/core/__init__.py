"""Core functionalities: stateless actions, reducers and the state tree.

Architecture Note:
    core/ holds pure, stateless building blocks with no runtime state
    mutation. For stateful services, see store/, effects/ and middleware/.
"""

from actionstore.core.action import (
    Action,
    ActionRegistry,
    Init,
    UnknownActionError,
    action,
    action_from_dict,
    get_registry,
)
from actionstore.core.reducer import Reducer, StateTree, combine_reducers

__all__ = [
    # Action
    "Action",
    "ActionRegistry",
    "Init",
    "UnknownActionError",
    "action",
    "action_from_dict",
    "get_registry",
    # Reducer
    "Reducer",
    "StateTree",
    "combine_reducers",
]
