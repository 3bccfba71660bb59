"""
Translation Cache

Memoizes translations keyed by (source language, target language, text)
so the UI never pays for the same remote call twice in a session.

BEHAVIOR:
1. Cache hit -> returned without suspending (no await on that path)
2. Same key already in flight -> caller waits on the pending call
   instead of issuing a duplicate request
3. Miss -> one remote call; success is stored, failure is NOT stored and
   the caller gets the original text back
4. Batches run every element concurrently and keep input order

Failures never raise to the caller. The worst the user sees is untranslated
text; the failure itself goes to the structured log and the audit trail.

Concurrency model: a single event loop. Lookups, inserts and evictions
never await, so each of them is atomic with respect to other coroutines.
"""

import asyncio
from collections import OrderedDict
from typing import Optional, Sequence

import structlog

from cashflow_i18n.audit import AuditLogger
from cashflow_i18n.models.translation import (
    DEFAULT_SOURCE_LANGUAGE,
    CacheKey,
    CacheStats,
    TranslationRequest,
)
from cashflow_i18n.services.translation import TranslationBackend


class TranslationCache:
    """
    Session-scoped translation memo in front of a remote backend.

    One instance per UI session. Instances never share entries.

    Args:
        backend: The remote translation capability.
        audit_logger: Receives completed/failed translation events.
        max_entries: LRU cap on stored translations. None = unbounded.
        default_source_language: Used when a caller omits the source language.
    """

    def __init__(
        self,
        backend: TranslationBackend,
        audit_logger: Optional[AuditLogger] = None,
        max_entries: Optional[int] = None,
        default_source_language: str = DEFAULT_SOURCE_LANGUAGE,
    ):
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be a positive integer or None")

        self._backend = backend
        self._audit_logger = audit_logger
        self._max_entries = max_entries
        self._default_source_language = default_source_language

        self._store: OrderedDict[CacheKey, str] = OrderedDict()
        self._in_flight: dict[CacheKey, asyncio.Future] = {}
        self._outstanding = 0
        self._closed = False
        self._stats = CacheStats()
        self._logger = structlog.get_logger(__name__)

    def __len__(self) -> int:
        return len(self._store)

    @property
    def loading(self) -> bool:
        """True while any translate/translate_batch call is waiting on the backend."""
        return self._outstanding > 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def backend(self) -> TranslationBackend:
        return self._backend

    @property
    def max_entries(self) -> Optional[int]:
        return self._max_entries

    @property
    def stats(self) -> CacheStats:
        return self._stats.model_copy(update={"size": len(self._store)})

    def _key(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str],
    ) -> CacheKey:
        return CacheKey.of(
            text,
            target_language,
            source_language or self._default_source_language,
        )

    def peek(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> Optional[str]:
        """Cached translation or None. Does not refresh LRU order."""
        return self._store.get(self._key(text, target_language, source_language))

    async def translate(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
    ) -> str:
        """
        Translate text, using the cache when possible.

        Args:
            text: Text in the source language
            target_language: Language code to translate into
            source_language: Language code of text (defaults to "en")

        Returns:
            The translation, or text unchanged if translation is not
            needed or failed.
        """
        if not text or not text.strip():
            return text

        key = self._key(text, target_language, source_language)

        if key.source_language == key.target_language:
            return text

        cached = self._store.get(key)
        if cached is not None:
            self._store.move_to_end(key)
            self._stats.hits += 1
            self._logger.debug("translation_cache_hit", **key.to_log_dict())
            return cached

        pending = self._in_flight.get(key)
        if pending is not None:
            self._stats.coalesced += 1
            self._logger.debug("translation_request_coalesced", **key.to_log_dict())
            self._outstanding += 1
            try:
                # Shielded so one waiter going away can't cancel the shared call
                return await asyncio.shield(pending)
            finally:
                self._outstanding -= 1

        self._stats.misses += 1
        return await self._fetch(key)

    async def translate_batch(
        self,
        texts: Sequence[str],
        target_language: str,
        source_language: Optional[str] = None,
    ) -> list[str]:
        """
        Translate every text concurrently.

        Result i always corresponds to texts[i]. A failing element falls
        back to its original text without affecting the others.
        """
        if not texts:
            return []

        self._outstanding += 1
        try:
            results = await asyncio.gather(*(
                self.translate(text, target_language, source_language)
                for text in texts
            ))
        finally:
            self._outstanding -= 1

        return list(results)

    def clear_cache(self) -> None:
        """
        Drop every stored translation.

        Requests already in flight still complete and may store their
        result afterwards.
        """
        removed = len(self._store)
        self._store.clear()
        self._logger.info("translation_cache_cleared", entries_removed=removed)

    def close(self) -> None:
        """
        Mark the owning session as gone.

        Results that arrive later are still handed to their callers but are
        no longer stored.
        """
        self._closed = True

    async def _fetch(self, key: CacheKey) -> str:
        future = asyncio.get_running_loop().create_future()
        self._in_flight[key] = future
        self._outstanding += 1
        try:
            result = await self._call_backend(key)
            future.set_result(result)
            return result
        finally:
            self._outstanding -= 1
            if self._in_flight.get(key) is future:
                del self._in_flight[key]
            if not future.done():
                # Leader was cancelled; waiters get whatever was stored
                future.set_result(self._store.get(key, key.text))

    async def _call_backend(self, key: CacheKey) -> str:
        key_details = key.to_log_dict()

        try:
            request = TranslationRequest.from_key(key)
            response = await self._backend.translate(request)
        except Exception as e:
            self._stats.failures += 1
            self._logger.warning(
                "translation_failed",
                backend=self._backend.name,
                error_type=type(e).__name__,
                error=str(e),
                **key_details,
            )
            if self._audit_logger:
                await self._audit_logger.log_translation_failed(
                    key_details=key_details,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
            return key.text

        translated = response.translated_text

        if self._closed:
            self._logger.debug("translation_discarded_after_close", **key_details)
        else:
            self._put(key, translated)

        if self._audit_logger:
            await self._audit_logger.log_translation_completed(
                key_details=key_details,
                backend=self._backend.name,
                backend_cached=response.cached,
            )

        return translated

    def _put(self, key: CacheKey, translated: str) -> None:
        # Entries are never overwritten
        if key in self._store:
            return

        self._store[key] = translated

        if self._max_entries is None:
            return

        while len(self._store) > self._max_entries:
            evicted, _ = self._store.popitem(last=False)
            self._stats.evictions += 1
            self._logger.debug("translation_cache_evicted", **evicted.to_log_dict())
