"""
Remote Translation Capability

DESIGN DECISION: The cache treats translation as an opaque request/response
call. Any transport works (HTTP edge function, direct LLM call, a stub in
tests) as long as it takes a TranslationRequest and returns a
TranslationResponse or raises a TranslationError.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cashflow_i18n.models.translation import TranslationRequest, TranslationResponse


class TranslationError(Exception):
    """Base exception for remote translation failures."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TranslationTransportError(TranslationError):
    """Network failure or timeout before a response arrived."""
    pass


class RateLimitedError(TranslationError):
    """The translation backend is rate limiting us (HTTP 429)."""
    pass


class PaymentRequiredError(TranslationError):
    """The backend's AI workspace is out of credits (HTTP 402)."""
    pass


class InvalidTranslationRequestError(TranslationError):
    """The backend rejected the request parameters (HTTP 400)."""
    pass


class InvalidTranslationResponseError(TranslationError):
    """The backend answered, but not with a usable translation."""
    pass


class TranslationBackend(ABC):
    """
    Abstract interface for a remote translation capability.

    Implementations must raise only TranslationError subclasses
    for remote or transport failures.
    """

    name: str = "backend"

    @abstractmethod
    async def translate(self, request: TranslationRequest) -> TranslationResponse:
        """
        Translate one text.

        Args:
            request: Text plus source and target language codes

        Returns:
            The translated text

        Raises:
            TranslationError: If the call fails for any reason
        """
        pass
