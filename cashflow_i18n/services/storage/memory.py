"""
In-memory audit storage.

Keeps the audit trail of one process. Nothing is persisted across restarts.
"""

from collections import Counter, deque
from typing import Optional
from uuid import UUID

from cashflow_i18n.models.audit import AuditEvent, AuditEventType
from cashflow_i18n.services.storage.interface import AuditStorageInterface


class InMemoryAuditStorage(AuditStorageInterface):
    """
    Rolling window of the most recent audit events.

    Args:
        max_events: Keep at most this many events; the oldest are dropped
                    first so new failures always show up. None means no limit.
    """

    def __init__(self, max_events: Optional[int] = None):
        if max_events is not None and max_events < 1:
            raise ValueError("max_events must be a positive integer or None")
        self._events: deque[AuditEvent] = deque(maxlen=max_events)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def max_events(self) -> Optional[int]:
        return self._events.maxlen

    async def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    async def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.correlation_id == correlation_id]

    async def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: UUID,
    ) -> list[AuditEvent]:
        return [
            e for e in self._events
            if e.entity_type == entity_type and e.entity_id == entity_id
        ]

    async def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        if limit <= 0:
            return []
        return list(reversed(self._events))[:limit]

    async def count_by_type(self) -> dict[AuditEventType, int]:
        return dict(Counter(e.event_type for e in self._events))
