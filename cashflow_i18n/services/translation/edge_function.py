"""
Translation via the hosted `translate` edge function

The edge function owns the expensive part (LLM call plus its own
server-side translation table). From here it is a plain JSON POST:

    {text, targetLanguage, sourceLanguage}  ->  {translatedText, cached}

Errors come back as {error: "..."} with a status code; we map the
statuses the function actually emits (400, 402, 429, 500) to typed errors.
"""

from typing import Optional

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from cashflow_i18n.config import EdgeFunctionSettings, get_settings
from cashflow_i18n.models.translation import TranslationRequest, TranslationResponse
from cashflow_i18n.services.translation.interface import (
    InvalidTranslationRequestError,
    InvalidTranslationResponseError,
    PaymentRequiredError,
    RateLimitedError,
    TranslationBackend,
    TranslationError,
    TranslationTransportError,
)


_STATUS_ERRORS: dict[int, type[TranslationError]] = {
    400: InvalidTranslationRequestError,
    402: PaymentRequiredError,
    429: RateLimitedError,
}


class EdgeFunctionTranslationService(TranslationBackend):
    """
    Calls the translate edge function over HTTPS.

    Args:
        settings: Endpoint configuration. Defaults to SUPABASE_* env settings.
        retry_attempts: Attempts per call on transport errors (1 = no retry).
        retry_wait_seconds: Base of the exponential backoff between attempts.
        client: Shared httpx client. When omitted a short-lived client is
                opened per call, which keeps the service usable from
                independent event loops.
    """

    name = "edge_function"

    def __init__(
        self,
        settings: Optional[EdgeFunctionSettings] = None,
        retry_attempts: int = 1,
        retry_wait_seconds: float = 0.5,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or get_settings().edge_function
        self._retry_attempts = max(1, retry_attempts)
        self._retry_wait_seconds = retry_wait_seconds
        self._client = client

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.anon_key}",
            "apikey": self._settings.anon_key,
            "Content-Type": "application/json",
        }

    async def translate(self, request: TranslationRequest) -> TranslationResponse:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(
                multiplier=self._retry_wait_seconds,
                min=self._retry_wait_seconds,
                max=4,
            ),
            retry=retry_if_exception_type(TranslationTransportError),
            reraise=True,
        ):
            with attempt:
                response = await self._post(request)
        return self._parse(response)

    async def _post(self, request: TranslationRequest) -> httpx.Response:
        try:
            if self._client is not None:
                return await self._client.post(
                    self._settings.function_url,
                    json=request.to_wire(),
                    headers=self._headers(),
                    timeout=self._settings.timeout_seconds,
                )
            async with httpx.AsyncClient(timeout=self._settings.timeout_seconds) as client:
                return await client.post(
                    self._settings.function_url,
                    json=request.to_wire(),
                    headers=self._headers(),
                )
        except httpx.TimeoutException as e:
            raise TranslationTransportError(f"Translation request timed out: {e}")
        except httpx.HTTPError as e:
            raise TranslationTransportError(f"Translation request failed: {e}")

    def _parse(self, response: httpx.Response) -> TranslationResponse:
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_error:
            message = (
                payload.get("error") if isinstance(payload, dict) else None
            ) or response.reason_phrase or "Translation failed"
            error_cls = _STATUS_ERRORS.get(response.status_code, TranslationError)
            raise error_cls(message, status_code=response.status_code)

        if not isinstance(payload, dict):
            raise InvalidTranslationResponseError(
                "Translation response is not a JSON object",
                status_code=response.status_code,
            )

        translated = payload.get("translatedText")
        if not isinstance(translated, str) or not translated:
            raise InvalidTranslationResponseError(
                "Translation response has no translatedText",
                status_code=response.status_code,
            )

        return TranslationResponse(
            translated_text=translated,
            cached=bool(payload.get("cached", False)),
        )
