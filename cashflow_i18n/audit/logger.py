"""
Audit Logger

DESIGN DECISION: Translation failures never reach the user as errors, they
just see the original text. That makes the audit trail the only channel
where failure rates show up, so every remote call outcome is logged here
with its cache key and cause.

The audit logger:
- Is async so storage writes don't block the caller
- Gracefully handles failures (doesn't crash the app if logging fails)
- Supports correlation IDs to trace events of one UI session
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from cashflow_i18n.models.audit import AuditEvent, AuditEventBuilder
from cashflow_i18n.services.storage import AuditStorageInterface


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def set_log_level(level: str) -> None:
    """Route structured logs to stderr at the given stdlib level name."""
    logging.basicConfig(format="%(message)s", level=level.upper())
    logging.getLogger().setLevel(level.upper())


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging and log shipping)
    2. An optional audit storage backend (for monitoring in the UI)
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
        correlation_id: Optional[UUID] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
            correlation_id: Default correlation ID stamped on events
                    that don't carry their own.
        """
        self._storage = storage
        self._correlation_id = correlation_id
        self._logger = structlog.get_logger("cashflow_i18n.audit")

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    @property
    def correlation_id(self) -> Optional[UUID]:
        return self._correlation_id

    async def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        if event.correlation_id is None and self._correlation_id is not None:
            event = event.model_copy(update={"correlation_id": self._correlation_id})

        log_dict = event.to_log_dict()
        severity = event.severity.value

        if severity in ("error", "critical"):
            self._logger.error("audit_event", **log_dict)
        elif severity == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif severity == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage is not None:
            try:
                return await self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    async def log_translation_completed(
        self,
        key_details: dict,
        backend: str,
        backend_cached: bool = False,
    ) -> None:
        """Log a successful remote translation."""
        event = AuditEventBuilder.translation_completed(
            key_details=key_details,
            backend=backend,
            backend_cached=backend_cached,
        )
        await self.log(event)

    async def log_translation_failed(
        self,
        key_details: dict,
        error_type: str,
        error_message: str,
    ) -> None:
        """Log a remote translation that degraded to the original text."""
        event = AuditEventBuilder.translation_failed(
            key_details=key_details,
            error_type=error_type,
            error_message=error_message,
        )
        await self.log(event)

    async def log_cache_cleared(self, entries_removed: int) -> None:
        """Log an explicit cache reset."""
        await self.log(AuditEventBuilder.cache_cleared(entries_removed))

    async def log_language_changed(self, previous: str, current: str) -> None:
        """Log a UI language switch."""
        event = AuditEventBuilder.language_changed(
            previous=previous,
            current=current,
            correlation_id=self._correlation_id,
        )
        await self.log(event)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new UI session.
    """
    return uuid4()
