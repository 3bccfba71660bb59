"""
Shared fixtures.

No real API calls in tests: the remote translation capability is replaced
by FakeBackend, which records every request and can be told to fail or to
answer slowly for specific texts.
"""

import asyncio

import pytest

from cashflow_i18n.cache import TranslationCache
from cashflow_i18n.config import get_settings
from cashflow_i18n.models.translation import TranslationRequest, TranslationResponse
from cashflow_i18n.services.translation import TranslationBackend, TranslationError


class FakeBackend(TranslationBackend):
    """In-process translation backend: "[es] Hello" style answers."""

    name = "fake"

    def __init__(self, translations=None, delays=None, fail_on=(), error=None):
        self.calls: list[TranslationRequest] = []
        self.completed: list[str] = []
        self._translations = translations or {}
        self._delays = delays or {}
        self._fail_on = set(fail_on)
        self._error = error or TranslationError("backend unavailable", status_code=500)

    def fail(self, *texts):
        self._fail_on.update(texts)

    def recover(self, *texts):
        self._fail_on.difference_update(texts)

    def calls_for(self, text: str) -> int:
        return sum(1 for call in self.calls if call.text == text)

    async def translate(self, request: TranslationRequest) -> TranslationResponse:
        self.calls.append(request)
        await asyncio.sleep(self._delays.get(request.text, 0))
        if request.text in self._fail_on:
            raise self._error
        self.completed.append(request.text)
        translated = self._translations.get(
            (request.text, request.target_language),
            f"[{request.target_language}] {request.text}",
        )
        return TranslationResponse(translated_text=translated)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def cache(backend):
    return TranslationCache(backend)


@pytest.fixture
def clean_settings(monkeypatch):
    """Settings built from defaults only, reloaded for each test."""
    for name in (
        "TRANSLATION_BACKEND",
        "TRANSLATION_MAX_CACHE_ENTRIES",
        "TRANSLATION_DEFAULT_SOURCE_LANGUAGE",
        "TRANSLATION_RETRY_ATTEMPTS",
        "TRANSLATION_LANGUAGE_PREFERENCE_PATH",
        "TRANSLATION_MAX_AUDIT_EVENTS",
        "LOG_LEVEL",
        "DEBUG_MODE",
        "APP_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
