"""
Direct translation with Gemini

Same translator instructions the edge function gives its model, without
the round trip through the backend. Useful when the backend project is
not reachable (local development, demos).
"""

from typing import Optional

import google.generativeai as genai

from cashflow_i18n.config import GeminiSettings, get_settings
from cashflow_i18n.models.translation import (
    TranslationRequest,
    TranslationResponse,
    language_name,
)
from cashflow_i18n.services.translation.interface import (
    InvalidTranslationResponseError,
    TranslationBackend,
    TranslationError,
)


TRANSLATOR_RULES = """CRITICAL RULES:
1. Return ONLY the translated text, nothing else
2. Preserve any formatting, punctuation, and special characters
3. Maintain the same tone and style as the original
4. Keep technical terms and brand names unchanged unless there's a standard translation
5. For UI elements, use concise, natural language
6. Do not add explanations, notes, or any additional text
7. If the text is already in the target language, return it unchanged"""


def build_translation_prompt(request: TranslationRequest) -> str:
    """Build the translator prompt for one request."""
    source = language_name(request.source_language)
    target = language_name(request.target_language)
    return (
        f"You are a professional translator. Translate the given text "
        f"from {source} to {target}.\n\n"
        f"{TRANSLATOR_RULES}\n\n"
        f"Text to translate:\n{request.text}"
    )


class GeminiTranslationService(TranslationBackend):
    """
    Translation backend calling Gemini directly.

    Args:
        settings: Model configuration. Defaults to GEMINI_* env settings.
        model: Pre-built model object (anything with generate_content_async).
    """

    name = "gemini"

    def __init__(
        self,
        settings: Optional[GeminiSettings] = None,
        model=None,
    ):
        self._model = model
        self._settings = settings
        if self._model is None:
            self._settings = settings or get_settings().gemini
            self._configure_genai()

    def _configure_genai(self):
        """Configure Google Generative AI."""
        genai.configure(api_key=self._settings.api_key)
        self._model = genai.GenerativeModel(
            model_name=self._settings.model_name,
            generation_config={
                "temperature": self._settings.temperature,
                "max_output_tokens": self._settings.max_tokens,
            }
        )

    async def translate(self, request: TranslationRequest) -> TranslationResponse:
        prompt = build_translation_prompt(request)

        try:
            response = await self._model.generate_content_async(prompt)
            text = response.text
        except Exception as e:
            raise TranslationError(f"Gemini translation failed: {e}")

        translated = (text or "").strip()
        if not translated:
            raise InvalidTranslationResponseError("Gemini returned an empty translation")

        return TranslationResponse(translated_text=translated)
