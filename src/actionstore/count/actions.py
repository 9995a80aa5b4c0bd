"""Actions of the count slice: a counter that lives on a remote server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from actionstore.core.action import action
from actionstore.effects.models import EffectAction, EffectCompletion, EffectRequest

GET_COUNT = "getCount"
INC_COUNT = "incCount"


@action("CountReceived")
@dataclass(frozen=True, slots=True)
class CountReceived(EffectCompletion):
    """Completion of a remote count operation. ``result`` is ``{"id", "count"}``."""


@action("FetchCount")
@dataclass(frozen=True, slots=True)
class FetchCount(EffectAction):
    """Read the remote counter."""

    completion: ClassVar[type[EffectCompletion]] = CountReceived

    def effect_request(self) -> EffectRequest:
        return EffectRequest("remote", {"operation": GET_COUNT})


@action("IncrementCount")
@dataclass(frozen=True, slots=True)
class IncrementCount(EffectAction):
    """Increment the remote counter and receive its new value."""

    completion: ClassVar[type[EffectCompletion]] = CountReceived

    def effect_request(self) -> EffectRequest:
        return EffectRequest("remote", {"operation": INC_COUNT})
