"""Configuration package."""

from cashflow_i18n.config.settings import (
    AppSettings,
    EdgeFunctionSettings,
    GeminiSettings,
    Settings,
    TranslationSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "EdgeFunctionSettings",
    "GeminiSettings",
    "Settings",
    "TranslationSettings",
    "get_settings",
    "validate_all_settings",
]
