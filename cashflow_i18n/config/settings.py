"""
Configuration Management for the Cash Flow AI translation layer

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Each remote collaborator gets its own settings class with its own env prefix,
so a missing key for one backend never blocks the others from loading.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EdgeFunctionSettings(BaseSettings):
    """Hosted `translate` edge function configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SUPABASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    url: str = Field(
        ...,
        description="Base URL of the backend project (https://<ref>.supabase.co)"
    )
    anon_key: str = Field(
        ...,
        description="Public anon key sent as bearer token and apikey header"
    )
    function_name: str = Field(
        default="translate",
        description="Name of the edge function that performs translation"
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="Request timeout for a single translation call"
    )

    @field_validator('url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so endpoint paths can be appended."""
        return v.rstrip("/")

    @property
    def function_url(self) -> str:
        """Full URL of the translation function."""
        return f"{self.url}/functions/v1/{self.function_name}"


class GeminiSettings(BaseSettings):
    """Gemini LLM configuration for direct translation."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    api_key: str = Field(
        ...,
        description="Gemini API key"
    )
    model_name: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model to use"
    )
    max_tokens: int = Field(
        default=1024,
        ge=64,
        le=8192,
        description="Maximum tokens in a translated response"
    )
    temperature: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Model temperature (lower = more literal translations)"
    )


class TranslationSettings(BaseSettings):
    """Client-side translation cache and backend selection."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    backend: Literal["edge_function", "gemini"] = Field(
        default="edge_function",
        description="Which remote translation capability to call"
    )
    default_source_language: str = Field(
        default="en",
        min_length=2,
        max_length=10,
        description="Source language used when a caller omits it"
    )
    max_cache_entries: Optional[int] = Field(
        default=1000,
        ge=0,
        description="LRU cap on cached translations (0 = unbounded)"
    )
    max_audit_events: int = Field(
        default=1000,
        ge=1,
        description="Most recent audit events kept in memory per session"
    )
    retry_attempts: int = Field(
        default=1,
        ge=1,
        le=5,
        description="Attempts per remote call on transport errors (1 = no retry)"
    )
    language_preference_path: Optional[Path] = Field(
        default=None,
        description="File where the user's UI language choice is remembered"
    )

    @field_validator('default_source_language')
    @classmethod
    def normalize_language(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def cache_limit(self) -> Optional[int]:
        """Cache cap suitable for TranslationCache (None = unbounded)."""
        return self.max_cache_entries or None


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for the structured log"
    )

    @field_validator('log_level')
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper()


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily to allow partial configuration

    @property
    def edge_function(self) -> EdgeFunctionSettings:
        return EdgeFunctionSettings()

    @property
    def gemini(self) -> GeminiSettings:
        return GeminiSettings()

    @property
    def translation(self) -> TranslationSettings:
        return TranslationSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error entries for the sections that failed.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("edge_function", "gemini", "translation", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
