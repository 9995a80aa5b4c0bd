"""Effect middleware: runs the asynchronous side of effect-initiating actions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from actionstore.effects.models import EffectAction

if TYPE_CHECKING:
    from actionstore.core.action import Action
    from actionstore.core.reducer import StateTree
    from actionstore.effects.protocol import EffectPerformer
    from actionstore.middleware.protocol import DispatchAPI, Next

logger = logging.getLogger(__name__)


class EffectMiddleware:
    """Schedules the performer call for every EffectAction.

    The action itself is forwarded unchanged first, so reducers can mark the
    slice as loading. The performer call runs out-of-band on the store's
    runner; when it finishes, exactly one completion action (success or
    failure) is dispatched back through ``store.dispatch``. No retries happen
    here: a caller wanting another attempt dispatches the effect action again.
    """

    def __init__(self, performer: EffectPerformer) -> None:
        self._performer = performer

    @property
    def performer(self) -> EffectPerformer:
        return self._performer

    def handle(self, store: DispatchAPI, action: Action, next_: Next) -> StateTree:
        if not isinstance(action, EffectAction):
            return next_(action)

        state = next_(action)
        logger.debug("Scheduling effect %s (key=%s)", action.kind, action.effect_key)
        store.runner.submit(self._complete(store, action))
        return state

    async def _complete(self, store: DispatchAPI, action: EffectAction) -> None:
        try:
            request = action.effect_request()
            result = await self._performer.perform(request)
        except Exception as exc:
            logger.warning(
                "Effect %s (key=%s) failed: %s", action.kind, action.effect_key, _describe(exc)
            )
            completion = action.complete(error=_describe(exc))
        else:
            completion = action.complete(result=result)

        store.dispatch(completion)


def _describe(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__
