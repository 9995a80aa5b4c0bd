"""Data models for the action log.

Records are storage-agnostic and hold only JSON-serializable data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class DispatchRecord:
    """Record of one action passing through the pipeline.

    Attributes:
        seq: Order in which the action entered the pipeline.
        timestamp: Unix timestamp at entry.
        action: The action as produced by Action.to_dict().
        depth: Dispatch nesting level (1 = dispatched by a caller; deeper
            levels are replays, PushUndo records and other nested dispatches).
        duration_ms: Time spent in the rest of the pipeline.
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = DispatchRecord(
            seq=3,
            timestamp=1704067200.0,
            action={"kind": "incA", "is_replay": False},
            depth=1,
            duration_ms=0.04,
        )
    """

    seq: int
    timestamp: float
    action: dict[str, Any]
    depth: int = 1
    duration_ms: float | None = None
    metadata: dict[str, Any] | None = None

    @property
    def kind(self) -> str:
        return self.action.get("kind", "")

    @property
    def top_level(self) -> bool:
        return self.depth == 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "seq": self.seq,
            "timestamp": self.timestamp,
            "action": self.action,
            "depth": self.depth,
        }
        if self.duration_ms is not None:
            result["duration_ms"] = self.duration_ms
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DispatchRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            seq=data["seq"],
            timestamp=data["timestamp"],
            action=data["action"],
            depth=data.get("depth", 1),
            duration_ms=data.get("duration_ms"),
            metadata=data.get("metadata"),
        )
