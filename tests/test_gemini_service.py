"""Tests for the direct Gemini translation backend (model is faked)."""

import asyncio
from types import SimpleNamespace

import pytest

from cashflow_i18n.models.translation import TranslationRequest
from cashflow_i18n.services.translation import (
    GeminiTranslationService,
    InvalidTranslationResponseError,
    TranslationError,
    build_translation_prompt,
)


class FakeModel:
    def __init__(self, text=None, error=None):
        self.prompts = []
        self._text = text
        self._error = error

    async def generate_content_async(self, prompt):
        self.prompts.append(prompt)
        if self._error:
            raise self._error
        return SimpleNamespace(text=self._text)


def translate(service, text="Hello", target="es", source="en"):
    request = TranslationRequest(text=text, target_language=target, source_language=source)
    return asyncio.run(service.translate(request))


class TestTranslationPrompt:
    """Tests for the translator prompt."""

    def test_prompt_names_languages(self):
        prompt = build_translation_prompt(
            TranslationRequest(text="Hello", target_language="es")
        )

        assert "from English to Spanish" in prompt
        assert prompt.endswith("Text to translate:\nHello")
        assert "Return ONLY the translated text" in prompt

    def test_unknown_language_code_used_verbatim(self):
        prompt = build_translation_prompt(
            TranslationRequest(text="Hello", target_language="sw")
        )
        assert "from English to sw" in prompt


class TestGeminiTranslationService:
    """Tests for GeminiTranslationService."""

    def test_returns_stripped_translation(self):
        model = FakeModel(text="  Hola\n")
        service = GeminiTranslationService(model=model)

        response = translate(service)

        assert response.translated_text == "Hola"
        assert response.cached is False
        assert len(model.prompts) == 1

    def test_empty_output_is_invalid(self):
        service = GeminiTranslationService(model=FakeModel(text="   "))

        with pytest.raises(InvalidTranslationResponseError):
            translate(service)

    def test_sdk_errors_become_translation_errors(self):
        service = GeminiTranslationService(model=FakeModel(error=RuntimeError("quota")))

        with pytest.raises(TranslationError) as exc_info:
            translate(service)

        assert "quota" in str(exc_info.value)

    def test_backend_name(self):
        assert GeminiTranslationService(model=FakeModel(text="x")).name == "gemini"
