"""
Storage Services Package

Provides the abstract audit storage interface and the in-memory
implementation used for a single UI session.
"""

from cashflow_i18n.services.storage.interface import (
    AuditStorageInterface,
    StorageError,
)
from cashflow_i18n.services.storage.memory import InMemoryAuditStorage

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    # Exceptions
    "StorageError",
    # Implementations
    "InMemoryAuditStorage",
]
