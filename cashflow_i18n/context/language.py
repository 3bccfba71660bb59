"""
Language Context

Holds the UI language of one session and resolves static UI strings.
The choice can be remembered in a small JSON file so the next session
starts in the same language.
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog

from cashflow_i18n.context.strings import lookup
from cashflow_i18n.models.translation import Language


logger = structlog.get_logger(__name__)


class UnsupportedLanguageError(ValueError):
    """Language code has no static UI strings."""

    def __init__(self, code: str):
        self.code = code
        supported = ", ".join(lang.value for lang in Language)
        super().__init__(f"Unsupported language '{code}' (supported: {supported})")


def parse_language(value: Union[Language, str]) -> Language:
    """Coerce a Language or code to Language, or raise UnsupportedLanguageError."""
    if isinstance(value, Language):
        return value
    try:
        return Language(str(value).strip().lower())
    except ValueError:
        raise UnsupportedLanguageError(str(value))


class LanguageContext:
    """
    Current UI language of a session.

    Args:
        language: Initial language. Wins over a saved preference.
        preference_path: JSON file remembering the last choice.
    """

    def __init__(
        self,
        language: Optional[Union[Language, str]] = None,
        preference_path: Optional[Path] = None,
    ):
        self._preference_path = Path(preference_path) if preference_path else None

        if language is not None:
            self._language = parse_language(language)
        else:
            self._language = self._load_preference() or Language.EN

    @property
    def language(self) -> Language:
        return self._language

    def set_language(self, language: Union[Language, str]) -> Language:
        """
        Switch the UI language and remember the choice.

        Returns:
            The previous language

        Raises:
            UnsupportedLanguageError: If the code has no UI strings
        """
        new_language = parse_language(language)
        previous = self._language
        self._language = new_language
        self._save_preference()
        return previous

    def t(self, key: str) -> str:
        """
        Static UI string for a dotted key, e.g. t("common.save").

        Falls back to English, then to the key itself.
        """
        return (
            lookup(self._language.value, key)
            or lookup(Language.EN.value, key)
            or key
        )

    def _load_preference(self) -> Optional[Language]:
        if not self._preference_path or not self._preference_path.exists():
            return None
        try:
            data = json.loads(self._preference_path.read_text(encoding="utf-8"))
            return parse_language(data.get("language", ""))
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(
                "language_preference_unreadable",
                path=str(self._preference_path),
                error=str(e),
            )
            return None

    def _save_preference(self) -> None:
        if not self._preference_path:
            return
        try:
            self._preference_path.parent.mkdir(parents=True, exist_ok=True)
            self._preference_path.write_text(
                json.dumps({"language": self._language.value}),
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning(
                "language_preference_not_saved",
                path=str(self._preference_path),
                error=str(e),
            )
