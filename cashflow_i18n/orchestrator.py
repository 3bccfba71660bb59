"""
Session Orchestrator for the translation layer

Ties together the language context, the translation cache and the remote
backend for one logical UI session.

DESIGN DECISION: Nothing here is global. Each session owns its own cache;
the UI creates one session and passes it to whatever needs translations.
"""

from typing import Optional, Union
from uuid import UUID

from cashflow_i18n.audit import AuditLogger, create_correlation_id, set_log_level
from cashflow_i18n.cache import TranslationCache
from cashflow_i18n.config import get_settings
from cashflow_i18n.context import LanguageContext, TranslationContext
from cashflow_i18n.models.audit import AuditEventBuilder
from cashflow_i18n.models.translation import CacheStats, Language
from cashflow_i18n.services.storage import InMemoryAuditStorage
from cashflow_i18n.services.translation import (
    TranslationBackend,
    create_translation_backend,
)


class TranslationSession:
    """
    Everything one UI session needs to show translated content.

    Flow:
    1. UI picks a language -> set_language
    2. UI renders dynamic text -> translate_text / translate_batch
    3. User resets translations -> clear_cache
    4. UI goes away -> close (late results are no longer cached)
    """

    def __init__(
        self,
        language_context: LanguageContext,
        cache: TranslationCache,
        audit_logger: AuditLogger,
        session_id: Optional[UUID] = None,
        source_language: str = "en",
    ):
        self._session_id = session_id or audit_logger.correlation_id or create_correlation_id()
        self._language_context = language_context
        self._cache = cache
        self._audit_logger = audit_logger
        self._translation_context = TranslationContext(
            language_context,
            cache,
            source_language=source_language,
        )

    @property
    def session_id(self) -> UUID:
        return self._session_id

    @property
    def language(self) -> Language:
        return self._language_context.language

    @property
    def language_context(self) -> LanguageContext:
        return self._language_context

    @property
    def cache(self) -> TranslationCache:
        return self._cache

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    @property
    def is_translating(self) -> bool:
        return self._translation_context.is_translating

    @property
    def stats(self) -> CacheStats:
        return self._cache.stats

    def t(self, key: str) -> str:
        return self._language_context.t(key)

    async def start(self) -> None:
        """Record the session start in the audit trail."""
        await self._audit_logger.log(AuditEventBuilder.session_started(
            session_id=self._session_id,
            language=self.language.value,
            backend=self._cache.backend.name,
        ))

    async def set_language(self, language: Union[Language, str]) -> Language:
        """
        Switch the UI language.

        Cached translations for other languages are kept; switching back
        is served from the cache.
        """
        previous = self._language_context.set_language(language)
        if previous != self.language:
            await self._audit_logger.log_language_changed(
                previous=previous.value,
                current=self.language.value,
            )
        return previous

    async def translate_text(self, text: str) -> str:
        return await self._translation_context.translate_text(text)

    async def translate_batch(self, texts: list[str]) -> list[str]:
        return await self._translation_context.translate_texts(texts)

    async def translate_to(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> str:
        """Translate into an explicit language, ignoring the UI language."""
        return await self._cache.translate(text, target_language, source_language)

    async def clear_cache(self) -> None:
        removed = len(self._cache)
        self._cache.clear_cache()
        await self._audit_logger.log_cache_cleared(removed)

    async def close(self) -> None:
        self._cache.close()
        await self._audit_logger.log(AuditEventBuilder.session_closed(
            session_id=self._session_id,
            stats=self._cache.stats.model_dump(),
        ))


def create_translation_session(
    backend: Optional[TranslationBackend] = None,
    use_storage: bool = True,
    language: Optional[Union[Language, str]] = None,
) -> TranslationSession:
    """
    Factory function to create a translation session.

    Args:
        backend: Translation backend to use. Built from settings if None.
        use_storage: Keep audit events in memory for the monitoring page.
                    Set to False for local-only logging.
        language: Initial UI language (otherwise the saved preference).

    Returns:
        A ready-to-use TranslationSession
    """
    settings = get_settings()
    translation_settings = settings.translation
    app_settings = settings.app
    set_log_level("DEBUG" if app_settings.debug_mode else app_settings.log_level)

    session_id = create_correlation_id()
    storage = (
        InMemoryAuditStorage(max_events=translation_settings.max_audit_events)
        if use_storage else None
    )
    audit_logger = AuditLogger(storage, correlation_id=session_id)

    if backend is None:
        backend = create_translation_backend(settings)

    cache = TranslationCache(
        backend,
        audit_logger=audit_logger,
        max_entries=translation_settings.cache_limit,
        default_source_language=translation_settings.default_source_language,
    )
    language_context = LanguageContext(
        language=language,
        preference_path=translation_settings.language_preference_path,
    )

    return TranslationSession(
        language_context,
        cache,
        audit_logger,
        session_id=session_id,
        source_language=translation_settings.default_source_language,
    )
