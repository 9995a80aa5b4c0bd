"""Actions of the thing slice."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from actionstore.core.action import Action, action
from actionstore.effects.models import EffectAction, EffectCompletion, EffectRequest


@action("incA")
@dataclass(frozen=True, slots=True)
class IncA(Action):
    """a += 1"""


@action("addToA")
@dataclass(frozen=True, slots=True)
class AddToA(Action):
    """a += amount"""

    amount: int


@action("setA")
@dataclass(frozen=True, slots=True)
class SetA(Action):
    a: int


@action("appendToB")
@dataclass(frozen=True, slots=True)
class AppendToB(Action):
    """b += text"""

    text: str


@action("setB")
@dataclass(frozen=True, slots=True)
class SetB(Action):
    b: str


@action("SetStuff")
@dataclass(frozen=True, slots=True)
class SetStuff(EffectCompletion):
    """Completion of LoadStuff. ``result`` is the loaded value."""


@action("LoadStuff")
@dataclass(frozen=True, slots=True)
class LoadStuff(EffectAction):
    """Marks stuff as loading and starts a timed load of ``value``.

    ``delay=None`` uses the timer performer's default delay.
    """

    completion: ClassVar[type[EffectCompletion]] = SetStuff

    delay: float | None = None
    value: str = "Stuff"

    def effect_request(self) -> EffectRequest:
        return EffectRequest("timer", {"delay": self.delay, "value": self.value})


@action("ResetStuff")
@dataclass(frozen=True, slots=True)
class ResetStuff(Action):
    """Forget stuff. A load still in flight is ignored when it completes."""
