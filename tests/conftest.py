"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

import asyncio
from typing import Any

from actionstore import create_store
from actionstore.config import StoreSettings
from actionstore.count import InMemoryCountService
from actionstore.effects import EffectRequest, RoutingPerformer, TimerPerformer


class FakeClock:
    """Deterministic clock: sleepers wake only when the test advances time."""

    def __init__(self) -> None:
        self.now = 0.0
        self._sleepers: list[tuple[float, asyncio.Future]] = []

    async def sleep(self, delay: float) -> None:
        future = asyncio.get_running_loop().create_future()
        self._sleepers.append((self.now + delay, future))
        await future

    @property
    def sleeping(self) -> int:
        return sum(1 for _, f in self._sleepers if not f.done())

    async def advance(self, seconds: float) -> None:
        """Move time forward and let woken coroutines run."""
        self.now += seconds
        for due, future in self._sleepers:
            if due <= self.now and not future.done():
                future.set_result(None)
        self._sleepers = [(d, f) for d, f in self._sleepers if not f.done()]
        await settle()


class GatedPerformer:
    """Performer whose calls finish only when the test resolves or fails them."""

    def __init__(self) -> None:
        self.requests: list[EffectRequest] = []
        self._gates: list[asyncio.Future] = []

    async def perform(self, request: EffectRequest) -> Any:
        gate = asyncio.get_running_loop().create_future()
        self.requests.append(request)
        self._gates.append(gate)
        return await gate

    def resolve(self, index: int, value: Any) -> None:
        self._gates[index].set_result(value)

    def fail(self, index: int, exc: BaseException) -> None:
        self._gates[index].set_exception(exc)


async def settle(rounds: int = 5) -> None:
    """Give scheduled tasks a few turns of the event loop."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def clock():
    """Fresh FakeClock."""
    return FakeClock()


@pytest.fixture
def gated():
    """Fresh GatedPerformer."""
    return GatedPerformer()


@pytest.fixture
def count_service():
    return InMemoryCountService(count=0, counter_id="YOUR_ID_HERE")


@pytest.fixture
def store(clock, count_service):
    """Application store with a fake clock for timers and an in-memory counter."""
    performer = RoutingPerformer(
        {
            "timer": TimerPerformer(default_delay=1.0, sleep=clock.sleep),
            "remote": count_service,
        }
    )
    return create_store(StoreSettings(), performer)
