"""State of the count slice."""

from __future__ import annotations

from dataclasses import dataclass

from actionstore.effects.models import LoadStatus


@dataclass(frozen=True, slots=True)
class CountState:
    """Last known value of the remote counter.

    Attributes:
        count: Counter value, None until first received.
        id: Server-side identifier of the counter.
        status: Status of the latest request.
        error: Failure description of the latest request, if it failed.
        key: effect_key of the request whose answer will be accepted.
    """

    count: int | None = None
    id: str | None = None
    status: LoadStatus = LoadStatus.IDLE
    error: str | None = None
    key: str | None = None
