"""Protocol for the asynchronous collaborator that carries out effects.

This is the only place the store touches I/O. Inject a deterministic fake in
tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from actionstore.effects.models import EffectRequest


@runtime_checkable
class EffectPerformer(Protocol):
    """Performs one effect request and eventually returns its result.

    Example implementations:
        - TimerPerformer: waits, then returns a value
        - GraphQLPerformer: remote procedure call over HTTP
        - RoutingPerformer: delegates by request kind

    Raising from perform() signals failure; the effect middleware turns it
    into a completion action carrying the error.
    """

    async def perform(self, request: EffectRequest) -> Any:
        """Carry out the request.

        Args:
            request: What to do.

        Returns:
            The result placed on the completion action.
        """
        ...
