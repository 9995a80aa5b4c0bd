"""Count slice: a counter held by a remote server, read and incremented via effects."""

from actionstore.count.actions import (
    GET_COUNT,
    INC_COUNT,
    CountReceived,
    FetchCount,
    IncrementCount,
)
from actionstore.count.models import CountState
from actionstore.count.reducer import count_reducer
from actionstore.count.service import InMemoryCountService

__all__ = [
    "GET_COUNT",
    "INC_COUNT",
    "CountReceived",
    "CountState",
    "FetchCount",
    "IncrementCount",
    "InMemoryCountService",
    "count_reducer",
]
