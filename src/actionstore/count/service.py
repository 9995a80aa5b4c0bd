"""In-process stand-in for the remote counter server."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from actionstore.count.actions import GET_COUNT, INC_COUNT
from actionstore.effects.models import EffectRequest

logger = logging.getLogger(__name__)


class InMemoryCountService:
    """EffectPerformer answering ``remote`` requests from local memory.

    Supports the same operations as the counter server: ``getCount`` returns
    the current value, ``incCount`` increments it first.

    Args:
        count: Starting value.
        counter_id: Identifier reported with every answer.
        latency: Simulated round-trip time in seconds.
    """

    def __init__(self, count: int = 0, counter_id: str = "counter", latency: float = 0.0) -> None:
        self._count = count
        self._id = counter_id
        self._latency = latency

    @property
    def count(self) -> int:
        return self._count

    async def perform(self, request: EffectRequest) -> dict[str, Any]:
        operation = request.get("operation")
        if self._latency:
            await asyncio.sleep(self._latency)
        if operation == GET_COUNT:
            logger.debug("getCount")
        elif operation == INC_COUNT:
            logger.debug("incCount")
            self._count += 1
        else:
            raise ValueError(f"Unknown count operation {operation!r}")
        return {"id": self._id, "count": self._count}
