"""Effect models: requests, effect/completion actions and pending-effect state.

An effect-initiating action knows which request it sends to the performer and
which completion action carries the outcome back:

    @action("LoadStuff")
    @dataclass(frozen=True, slots=True)
    class LoadStuff(EffectAction):
        completion: ClassVar[type[EffectCompletion]] = SetStuff
        delay: float | None = None

        def effect_request(self) -> EffectRequest:
            return EffectRequest("timer", {"delay": self.delay, "value": "Stuff"})
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, Literal

from actionstore.core.action import Action, action


def new_effect_key() -> str:
    """Fresh key for an effect. Two requests only share a key if a caller reuses one."""
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class EffectRequest:
    """Descriptor handed to an EffectPerformer.

    Attributes:
        kind: Routing key ("timer", "remote", ...).
        params: Kind-specific, JSON-serializable parameters.
    """

    kind: str
    params: dict[str, Any] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)


@dataclass(frozen=True, slots=True, kw_only=True)
class EffectCompletion(Action):
    """Base for actions that report the outcome of an effect.

    Attributes:
        effect_key: Key of the effect action that triggered the work.
        result: Performer result on success.
        error: Failure description; None on success.
    """

    effect_key: str | None = None
    result: Any = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class EffectAction(Action):
    """Base for effect-initiating actions.

    The effect middleware forwards the action to the reducers, then asks the
    performer to carry out ``effect_request()`` and dispatches exactly one
    completion built by ``complete()``.
    """

    completion: ClassVar[type[EffectCompletion]] = EffectCompletion

    effect_key: str = field(default_factory=new_effect_key)

    def effect_request(self) -> EffectRequest:
        raise NotImplementedError(f"{type(self).__name__} must define effect_request()")

    def complete(self, result: Any = None, error: str | None = None) -> EffectCompletion:
        """Build the completion action. Carries over effect_key and is_replay."""
        return self.completion(
            effect_key=self.effect_key,
            result=result,
            error=error,
            is_replay=self.is_replay,
        )


@action("CancelEffect")
@dataclass(frozen=True, slots=True)
class CancelEffect(Action):
    """Mark a pending effect cancelled. Its late completion changes nothing."""

    effect_key: str


class EffectStatus(Enum):
    """Lifecycle of a pending effect. Everything but PENDING is terminal."""

    PENDING = auto()
    SUCCEEDED = auto()
    FAILED = auto()
    CANCELLED = auto()

    @property
    def terminal(self) -> bool:
        return self is not EffectStatus.PENDING


class LoadStatus(Enum):
    """Request status as shown by a slice that loads data through effects."""

    IDLE = auto()
    LOADING = auto()
    LOADED = auto()
    FAILED = auto()


@dataclass(frozen=True, slots=True)
class PendingEffect:
    """One effect, from scheduling to its terminal status.

    Attributes:
        key: The triggering action's effect_key.
        trigger: Kind of the triggering action.
        request_kind: Kind of the request sent to the performer.
        status: Current status.
        result: Completion result once succeeded.
        error: Completion error once failed.
    """

    key: str
    trigger: str
    request_kind: str
    status: EffectStatus = EffectStatus.PENDING
    result: Any = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class EffectsState:
    """All effects seen by the store, keyed by effect_key.

    The mapping is never mutated; the reducer builds a new one on change.
    """

    entries: dict[str, PendingEffect] = field(default_factory=dict)

    def get(self, key: str) -> PendingEffect | None:
        return self.entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def pending_keys(self) -> tuple[str, ...]:
        return tuple(k for k, e in self.entries.items() if e.status is EffectStatus.PENDING)


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Configuration for RetryingPerformer.

    Retrying happens inside one performer call; the store still sees exactly
    one completion per effect action.
    """

    max_attempts: int = 1
    """Maximum attempts (1 = no retry). Default: no retry."""

    backoff: Literal["none", "linear", "exponential"] = "none"
    """Backoff strategy between retries."""

    base_delay: float = 0.1
    """Base delay in seconds for backoff calculation."""
