"""Translation backends package."""

from typing import Optional

from cashflow_i18n.config import Settings, get_settings
from cashflow_i18n.services.translation.edge_function import EdgeFunctionTranslationService
from cashflow_i18n.services.translation.gemini_service import (
    GeminiTranslationService,
    build_translation_prompt,
)
from cashflow_i18n.services.translation.interface import (
    InvalidTranslationRequestError,
    InvalidTranslationResponseError,
    PaymentRequiredError,
    RateLimitedError,
    TranslationBackend,
    TranslationError,
    TranslationTransportError,
)


def create_translation_backend(settings: Optional[Settings] = None) -> TranslationBackend:
    """Build the backend selected by TRANSLATION_BACKEND."""
    settings = settings or get_settings()
    translation = settings.translation

    if translation.backend == "gemini":
        return GeminiTranslationService(settings.gemini)
    return EdgeFunctionTranslationService(
        settings.edge_function,
        retry_attempts=translation.retry_attempts,
    )


__all__ = [
    # Backends
    "EdgeFunctionTranslationService",
    "GeminiTranslationService",
    "TranslationBackend",
    "build_translation_prompt",
    "create_translation_backend",
    # Exceptions
    "InvalidTranslationRequestError",
    "InvalidTranslationResponseError",
    "PaymentRequiredError",
    "RateLimitedError",
    "TranslationError",
    "TranslationTransportError",
]
