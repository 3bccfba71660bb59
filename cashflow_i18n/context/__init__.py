"""Language and translation contexts package."""

from cashflow_i18n.context.language import (
    LanguageContext,
    UnsupportedLanguageError,
    parse_language,
)
from cashflow_i18n.context.translation import TranslationContext

__all__ = [
    "LanguageContext",
    "TranslationContext",
    "UnsupportedLanguageError",
    "parse_language",
]
