from actionstore.core.reducer.core import combine_reducers
from actionstore.core.reducer.models import RESERVED_SLICE_NAMES, Reducer, StateTree

__all__ = [
    "RESERVED_SLICE_NAMES",
    "Reducer",
    "StateTree",
    "combine_reducers",
]
