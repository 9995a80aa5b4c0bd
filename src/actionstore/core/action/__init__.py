from actionstore.core.action.core import (
    ActionRegistry,
    Init,
    action,
    action_from_dict,
    get_registry,
)
from actionstore.core.action.models import (
    Action,
    UnknownActionError,
    decode_value,
    encode_value,
)

__all__ = [
    "Action",
    "ActionRegistry",
    "Init",
    "UnknownActionError",
    "action",
    "action_from_dict",
    "decode_value",
    "encode_value",
    "get_registry",
]
