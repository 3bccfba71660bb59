"""
Translation Context

Binds the translation cache to the session's current UI language, so
callers only pass the text.
"""

from cashflow_i18n.cache import TranslationCache
from cashflow_i18n.context.language import LanguageContext
from cashflow_i18n.models.translation import DEFAULT_SOURCE_LANGUAGE


class TranslationContext:
    """Translate dynamic content into whatever language the UI is showing."""

    def __init__(
        self,
        language_context: LanguageContext,
        cache: TranslationCache,
        source_language: str = DEFAULT_SOURCE_LANGUAGE,
    ):
        self._language_context = language_context
        self._cache = cache
        self._source_language = source_language

    @property
    def is_translating(self) -> bool:
        return self._cache.loading

    @property
    def target_language(self) -> str:
        return self._language_context.language.value

    async def translate_text(self, text: str) -> str:
        """Text in the current UI language (unchanged when it already is)."""
        if not text or self.target_language == self._source_language:
            return text
        return await self._cache.translate(
            text,
            self.target_language,
            self._source_language,
        )

    async def translate_texts(self, texts: list[str]) -> list[str]:
        """Batch form of translate_text, order preserved."""
        if self.target_language == self._source_language:
            return list(texts)
        return await self._cache.translate_batch(
            texts,
            self.target_language,
            self._source_language,
        )
