"""Built-in EffectPerformer implementations.

Usage:
    performer = RoutingPerformer({
        "timer": TimerPerformer(),
        "remote": RetryingPerformer(GraphQLPerformer(), RetryPolicy(max_attempts=3)),
    })
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import tenacity

from actionstore.effects.models import EffectRequest, RetryPolicy
from actionstore.effects.protocol import EffectPerformer

logger = logging.getLogger(__name__)


class TimerPerformer:
    """Waits ``params["delay"]`` seconds, then returns ``params["value"]``.

    Args:
        default_delay: Delay used when the request has none.
        sleep: Awaitable sleep function. Tests pass a fake clock's sleep.
    """

    def __init__(
        self,
        default_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._default_delay = default_delay
        self._sleep = sleep

    async def perform(self, request: EffectRequest) -> Any:
        delay = request.get("delay", self._default_delay)
        if delay is None:
            delay = self._default_delay
        await self._sleep(delay)
        return request.get("value")


class CallablePerformer:
    """Adapts a plain function (sync or async) taking an EffectRequest."""

    def __init__(self, fn: Callable[[EffectRequest], Any]) -> None:
        self._fn = fn

    async def perform(self, request: EffectRequest) -> Any:
        result = self._fn(request)
        if inspect.isawaitable(result):
            result = await result
        return result


class RoutingPerformer:
    """Delegates each request to the performer registered for its kind.

    A request whose kind has no route fails with LookupError.
    """

    def __init__(self, routes: Mapping[str, EffectPerformer] | None = None) -> None:
        self._routes: dict[str, EffectPerformer] = dict(routes or {})

    def route(self, kind: str, performer: EffectPerformer) -> None:
        """Register (or replace) the performer for a request kind."""
        self._routes[kind] = performer

    def kinds(self) -> frozenset[str]:
        return frozenset(self._routes)

    async def perform(self, request: EffectRequest) -> Any:
        performer = self._routes.get(request.kind)
        if performer is None:
            raise LookupError(f"No performer registered for effect kind {request.kind!r}")
        return await performer.perform(request)


class RetryingPerformer:
    """Retries a wrapped performer according to a RetryPolicy.

    Attempts happen inside a single perform() call, so the store still sees
    one completion per effect. When attempts are exhausted the last exception
    is raised.

    Args:
        inner: Performer to retry.
        policy: Attempts and backoff.
        retry_on: Exception types worth retrying. Others fail immediately.
    """

    def __init__(
        self,
        inner: EffectPerformer,
        policy: RetryPolicy | None = None,
        retry_on: tuple[type[BaseException], ...] = (Exception,),
    ) -> None:
        self._inner = inner
        self._policy = policy or RetryPolicy()
        self._retry_on = retry_on

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def perform(self, request: EffectRequest) -> Any:
        if self._policy.max_attempts <= 1:
            return await self._inner.perform(request)

        retryer = self._build_retryer(self._policy)
        async for attempt in retryer:
            with attempt:
                number = attempt.retry_state.attempt_number
                if number > 1:
                    logger.info(
                        "Retrying %s effect (attempt %d/%d)",
                        request.kind,
                        number,
                        self._policy.max_attempts,
                    )
                return await self._inner.perform(request)

        raise RuntimeError("retry loop ended without an attempt")  # pragma: no cover

    def _build_retryer(self, policy: RetryPolicy) -> tenacity.AsyncRetrying:
        """Build a tenacity retryer from RetryPolicy configuration."""
        stop = tenacity.stop_after_attempt(policy.max_attempts)

        wait: tenacity.wait.wait_base
        if policy.backoff == "exponential":
            wait = tenacity.wait_exponential(multiplier=policy.base_delay, min=policy.base_delay)
        elif policy.backoff == "linear":
            wait = tenacity.wait_incrementing(start=policy.base_delay, increment=policy.base_delay)
        else:
            wait = tenacity.wait_none()

        return tenacity.AsyncRetrying(
            stop=stop,
            wait=wait,
            retry=tenacity.retry_if_exception_type(self._retry_on),
            reraise=True,
        )
