"""
Audit Models for the translation layer

Translation failures are non-fatal for the user (they just see the
untranslated text), so the audit trail is the only place they become
visible. Every remote call outcome, cache reset and language switch is
recorded here.

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Remote translation
    TRANSLATION_COMPLETED = "translation_completed"
    TRANSLATION_FAILED = "translation_failed"

    # Cache lifecycle
    CACHE_CLEARED = "cache_cleared"

    # Session
    SESSION_STARTED = "session_started"
    SESSION_CLOSED = "session_closed"
    LANGUAGE_CHANGED = "language_changed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'translation', 'cache', 'session')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Correlation - all events of one UI session share this
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., one UI session)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.translation_failed(key_details, "RateLimitedError", msg)
        event = AuditEventBuilder.language_changed("en", "es", session_id)
    """

    @staticmethod
    def translation_completed(
        key_details: dict,
        backend: str,
        backend_cached: bool,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSLATION_COMPLETED,
            severity=AuditSeverity.DEBUG,
            entity_type="translation",
            correlation_id=correlation_id,
            description=(
                f"Translated {key_details.get('source_language')} -> "
                f"{key_details.get('target_language')} via {backend}"
            ),
            details={
                **key_details,
                "backend": backend,
                "backend_cached": backend_cached,
            },
        )

    @staticmethod
    def translation_failed(
        key_details: dict,
        error_type: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSLATION_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="translation",
            correlation_id=correlation_id,
            description=(
                f"Translation {key_details.get('source_language')} -> "
                f"{key_details.get('target_language')} failed, showing original text"
            ),
            details=key_details,
            error_code=error_type,
            error_message=error_message,
        )

    @staticmethod
    def cache_cleared(
        entries_removed: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CACHE_CLEARED,
            entity_type="cache",
            correlation_id=correlation_id,
            description=f"Translation cache cleared ({entries_removed} entries)",
            details={"entries_removed": entries_removed},
            is_user_action=True,
        )

    @staticmethod
    def session_started(
        session_id: UUID,
        language: str,
        backend: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            entity_type="session",
            entity_id=session_id,
            correlation_id=session_id,
            description=f"Translation session started in '{language}'",
            details={"language": language, "backend": backend},
        )

    @staticmethod
    def session_closed(
        session_id: UUID,
        stats: dict,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_CLOSED,
            entity_type="session",
            entity_id=session_id,
            correlation_id=session_id,
            description="Translation session closed",
            details={"cache_stats": stats},
        )

    @staticmethod
    def language_changed(
        previous: str,
        current: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LANGUAGE_CHANGED,
            entity_type="session",
            entity_id=correlation_id,
            correlation_id=correlation_id,
            description=f"UI language changed from '{previous}' to '{current}'",
            details={"previous": previous, "current": current},
            is_user_action=True,
        )

