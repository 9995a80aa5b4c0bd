"""Protocols for action log storage.

These protocols define the interface for action log backends, allowing
different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from actionstore.tracing.models import DispatchRecord


@runtime_checkable
class ActionLog(Protocol):
    """Protocol for storing and retrieving dispatch records.

    Usage:
        log = InMemoryActionLog(capacity=1000)
        store = create_store(action_log=log)
        ...
        for record in log.records(kind="incA"):
            print(record.seq, record.action)
    """

    def record(self, record: DispatchRecord) -> None:
        """Store a record.

        Note:
            Implementations may be bounded. Older records may be evicted when
            the limit is reached.
        """
        ...

    def get(self, seq: int) -> DispatchRecord | None:
        """Get the record with the given sequence number, if still stored."""
        ...

    def records(self, kind: str | None = None, top_level_only: bool = False) -> list[DispatchRecord]:
        """Stored records in sequence order.

        Args:
            kind: Only records of this action kind.
            top_level_only: Only records dispatched by callers (depth 1).
        """
        ...

    def clear(self) -> None:
        """Clear all stored records."""
        ...

    @property
    def count(self) -> int:
        """Number of records currently stored."""
        ...
