"""Translation cache package."""

from cashflow_i18n.cache.translation_cache import TranslationCache

__all__ = ["TranslationCache"]
