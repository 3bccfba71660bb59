"""Audit logging package."""

from cashflow_i18n.audit.logger import AuditLogger, create_correlation_id, set_log_level

__all__ = ["AuditLogger", "create_correlation_id", "set_log_level"]
