"""
Data Models Package

This package contains all Pydantic models used by the translation layer.
"""

from cashflow_i18n.models.translation import (
    DEFAULT_SOURCE_LANGUAGE,
    LANGUAGE_NAMES,
    CacheKey,
    CacheStats,
    Language,
    TranslationRequest,
    TranslationResponse,
    language_name,
)
from cashflow_i18n.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Translation models
    "DEFAULT_SOURCE_LANGUAGE",
    "LANGUAGE_NAMES",
    "CacheKey",
    "CacheStats",
    "Language",
    "TranslationRequest",
    "TranslationResponse",
    "language_name",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
