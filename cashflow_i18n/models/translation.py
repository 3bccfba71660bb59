"""
Translation Models

These models describe a single translation request as it travels from the
UI to the remote translation capability and back.

DESIGN DECISION: The wire format of the translate function is camelCase
({text, targetLanguage, sourceLanguage} -> {translatedText}). We keep
snake_case attributes in Python and map the wire names with aliases.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_SOURCE_LANGUAGE = "en"

# Languages the translator prompt refers to by name.
# Any other code is passed through verbatim.
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "ar": "Arabic",
    "ru": "Russian",
}


def language_name(code: str) -> str:
    """Human-readable name for a language code, or the code itself."""
    return LANGUAGE_NAMES.get(code, code)


class Language(str, Enum):
    """UI languages the application ships static strings for."""
    EN = "en"
    ES = "es"

    @property
    def display_name(self) -> str:
        return {"en": "English", "es": "Español"}[self.value]

    @property
    def flag(self) -> str:
        return {"en": "🇺🇸", "es": "🇪🇸"}[self.value]


def _normalize_code(value: str) -> str:
    return value.strip().lower()


class CacheKey(BaseModel):
    """
    Identifies one translation request.

    Two requests with the same (source, target, text) are equivalent,
    whatever order they were made in. The model is frozen so it can be
    used as a dict key.
    """

    model_config = ConfigDict(frozen=True)

    source_language: str
    target_language: str
    text: str

    @classmethod
    def of(cls, text: str, target_language: str, source_language: str) -> "CacheKey":
        return cls(
            source_language=_normalize_code(source_language),
            target_language=_normalize_code(target_language),
            text=text,
        )

    def to_log_dict(self) -> dict:
        """Compact form for structured logs (text is truncated)."""
        return {
            "source_language": self.source_language,
            "target_language": self.target_language,
            "text_preview": self.text[:80],
            "text_length": len(self.text),
        }


class TranslationRequest(BaseModel):
    """Body sent to the remote translation capability."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(
        ...,
        min_length=1,
        description="Text in the source language"
    )
    target_language: str = Field(
        ...,
        alias="targetLanguage",
        min_length=2,
        description="Language code to translate into"
    )
    source_language: str = Field(
        default=DEFAULT_SOURCE_LANGUAGE,
        alias="sourceLanguage",
        min_length=2,
        description="Language code of the original text"
    )

    @field_validator("target_language", "source_language")
    @classmethod
    def normalize_codes(cls, v: str) -> str:
        return _normalize_code(v)

    @classmethod
    def from_key(cls, key: CacheKey) -> "TranslationRequest":
        return cls(
            text=key.text,
            target_language=key.target_language,
            source_language=key.source_language,
        )

    def to_wire(self) -> dict:
        """JSON body in the format the translate function expects."""
        return self.model_dump(by_alias=True)


class TranslationResponse(BaseModel):
    """Successful answer from the remote translation capability."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(
        ...,
        alias="translatedText",
        description="The translated string"
    )
    cached: bool = Field(
        default=False,
        description="Whether the backend served this from its own store"
    )


class CacheStats(BaseModel):
    """Counters describing how a TranslationCache has been used."""

    hits: int = 0
    misses: int = 0
    coalesced: int = 0
    failures: int = 0
    evictions: int = 0
    size: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses + self.coalesced

    @property
    def hit_rate(self) -> float:
        """Share of lookups answered without a new remote call."""
        if not self.lookups:
            return 0.0
        return (self.hits + self.coalesced) / self.lookups
