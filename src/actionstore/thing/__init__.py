"""Thing slice: counter ``a``, string ``b`` and a timed ``stuff`` load."""

from actionstore.thing.actions import (
    AddToA,
    AppendToB,
    IncA,
    LoadStuff,
    ResetStuff,
    SetA,
    SetB,
    SetStuff,
)
from actionstore.thing.inverses import thing_inverses
from actionstore.thing.models import LoadStatus, ThingState
from actionstore.thing.reducer import thing_reducer

__all__ = [
    "AddToA",
    "AppendToB",
    "IncA",
    "LoadStatus",
    "LoadStuff",
    "ResetStuff",
    "SetA",
    "SetB",
    "SetStuff",
    "ThingState",
    "thing_inverses",
    "thing_reducer",
]
