"""State of the thing slice."""

from __future__ import annotations

from dataclasses import dataclass

from actionstore.effects.models import LoadStatus


@dataclass(frozen=True, slots=True)
class ThingState:
    """A counter, a string, and an asynchronously loaded value.

    Attributes:
        a: Integer; arbitrary precision, never wraps or saturates.
        b: String; appends are unbounded.
        stuff: Loaded value, None until a load succeeds.
        stuff_status: Where the current load stands.
        stuff_key: effect_key of the load whose completion will be accepted.
        stuff_error: Failure description of the last load, if it failed.
    """

    a: int = 13
    b: str = "hello"
    stuff: str | None = None
    stuff_status: LoadStatus = LoadStatus.IDLE
    stuff_key: str | None = None
    stuff_error: str | None = None

    @property
    def loading(self) -> bool:
        return self.stuff_status is LoadStatus.LOADING
