"""Services package."""

from cashflow_i18n.services.storage import (
    AuditStorageInterface,
    InMemoryAuditStorage,
    StorageError,
)
from cashflow_i18n.services.translation import (
    EdgeFunctionTranslationService,
    GeminiTranslationService,
    InvalidTranslationRequestError,
    InvalidTranslationResponseError,
    PaymentRequiredError,
    RateLimitedError,
    TranslationBackend,
    TranslationError,
    TranslationTransportError,
    create_translation_backend,
)

__all__ = [
    # Storage services
    "AuditStorageInterface",
    "InMemoryAuditStorage",
    "StorageError",
    # Translation services
    "EdgeFunctionTranslationService",
    "GeminiTranslationService",
    "InvalidTranslationRequestError",
    "InvalidTranslationResponseError",
    "PaymentRequiredError",
    "RateLimitedError",
    "TranslationBackend",
    "TranslationError",
    "TranslationTransportError",
    "create_translation_backend",
]
