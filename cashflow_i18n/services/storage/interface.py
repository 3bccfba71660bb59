"""
Abstract Storage Interface

DESIGN DECISION: The audit trail is written through an abstract interface.
This allows us to:
1. Keep events in memory for a single UI session (and in tests)
2. Swap in a persistent backend later without touching the audit logger

The interface is intentionally simple - just the operations the audit
logger and the monitoring page need.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from cashflow_i18n.models.audit import AuditEvent, AuditEventType


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Events are never modified. Bounded backends may drop the oldest ones.
    """

    @abstractmethod
    async def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Args:
            event: The audit event to log

        Returns:
            True if logged successfully

        Raises:
            StorageError: If the backend rejects the write
        """
        pass

    @abstractmethod
    async def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        """
        Get all events for a correlation ID (e.g., one UI session).

        Returns:
            List of related events in chronological order
        """
        pass

    @abstractmethod
    async def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: UUID,
    ) -> list[AuditEvent]:
        """
        Get all events for a specific entity.

        Returns:
            List of events in chronological order
        """
        pass

    @abstractmethod
    async def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Returns:
            List of recent events (newest first)
        """
        pass

    @abstractmethod
    async def count_by_type(self) -> dict[AuditEventType, int]:
        """
        Count stored events per event type.

        Used to monitor translation failure rates.
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass
