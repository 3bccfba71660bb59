"""
Tests for Cash Flow AI translation layer

Test strategy:
1. Unit tests for individual components (models, contexts, backends)
2. Integration tests for flows (with a fake translation backend)
3. No real API calls in tests (use fakes and httpx.MockTransport)
"""

import pytest
from uuid import uuid4

from pydantic import ValidationError

from cashflow_i18n.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from cashflow_i18n.models.translation import (
    CacheKey,
    CacheStats,
    Language,
    TranslationRequest,
    TranslationResponse,
    language_name,
)


class TestTranslationModels:
    """Tests for translation-related Pydantic models."""

    def test_cache_key_equality(self):
        """Equal inputs produce equal, hashable keys."""
        first = CacheKey.of("Hello", "es", "en")
        second = CacheKey.of("Hello", "ES", " en ")

        assert first == second
        assert hash(first) == hash(second)
        assert {first: "Hola"}[second] == "Hola"

    def test_cache_key_distinguishes_every_component(self):
        """Changing any component changes the key."""
        base = CacheKey.of("Hello", "es", "en")

        assert base != CacheKey.of("Hello", "fr", "en")
        assert base != CacheKey.of("Hello", "es", "pt")
        assert base != CacheKey.of("hello", "es", "en")

    def test_cache_key_is_frozen(self):
        key = CacheKey.of("Hello", "es", "en")
        with pytest.raises(ValidationError):
            key.text = "Bye"

    def test_cache_key_log_dict_truncates_text(self):
        key = CacheKey.of("x" * 200, "es", "en")
        details = key.to_log_dict()

        assert len(details["text_preview"]) == 80
        assert details["text_length"] == 200
        assert details["target_language"] == "es"

    def test_request_wire_format(self):
        """Requests serialize to the camelCase body of the translate function."""
        request = TranslationRequest(text="Hello", target_language="ES")

        assert request.to_wire() == {
            "text": "Hello",
            "targetLanguage": "es",
            "sourceLanguage": "en",
        }

    def test_request_accepts_wire_names(self):
        request = TranslationRequest.model_validate(
            {"text": "Hola", "targetLanguage": "en", "sourceLanguage": "es"}
        )
        assert request.target_language == "en"
        assert request.source_language == "es"

    def test_request_rejects_empty_text(self):
        with pytest.raises(ValidationError):
            TranslationRequest(text="", target_language="es")

    def test_request_from_key(self):
        key = CacheKey.of("Save", "fr", "en")
        request = TranslationRequest.from_key(key)

        assert request.text == "Save"
        assert request.target_language == "fr"
        assert request.source_language == "en"

    def test_response_from_wire(self):
        response = TranslationResponse.model_validate(
            {"translatedText": "Hola", "cached": True}
        )
        assert response.translated_text == "Hola"
        assert response.cached is True

    def test_response_cached_defaults_false(self):
        assert TranslationResponse(translated_text="Hola").cached is False

    def test_language_names(self):
        assert language_name("es") == "Spanish"
        assert language_name("sw") == "sw"

    def test_language_enum(self):
        assert Language("es") is Language.ES
        assert Language.ES.display_name == "Español"
        assert Language.EN.value == "en"


class TestCacheStats:
    """Tests for cache counters."""

    def test_hit_rate_empty(self):
        assert CacheStats().hit_rate == 0.0

    def test_hit_rate_counts_coalesced_as_saved(self):
        stats = CacheStats(hits=2, misses=1, coalesced=1)

        assert stats.lookups == 4
        assert stats.hit_rate == pytest.approx(0.75)


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.CACHE_CLEARED,
            description="Translation cache cleared",
        )
        assert event.event_type == AuditEventType.CACHE_CLEARED
        assert event.severity == AuditSeverity.INFO
        assert event.event_id is not None
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test AuditEvent conversion to log dict."""
        correlation_id = uuid4()
        event = AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            description="Test event",
            correlation_id=correlation_id,
        )
        log_dict = event.to_log_dict()

        assert log_dict["event_type"] == "session_started"
        assert log_dict["description"] == "Test event"
        assert log_dict["correlation_id"] == str(correlation_id)
        assert "event_id" in log_dict
        assert "timestamp" in log_dict

    def test_audit_event_builder_translation_failed(self):
        """Failures carry the key and the cause."""
        key_details = CacheKey.of("Hello", "es", "en").to_log_dict()
        event = AuditEventBuilder.translation_failed(
            key_details=key_details,
            error_type="RateLimitedError",
            error_message="Rate limit exceeded",
        )

        assert event.event_type == AuditEventType.TRANSLATION_FAILED
        assert event.severity == AuditSeverity.WARNING
        assert event.error_code == "RateLimitedError"
        assert event.details["text_preview"] == "Hello"

    def test_audit_event_builder_translation_completed(self):
        key_details = CacheKey.of("Hello", "es", "en").to_log_dict()
        event = AuditEventBuilder.translation_completed(
            key_details=key_details,
            backend="edge_function",
            backend_cached=True,
        )

        assert event.severity == AuditSeverity.DEBUG
        assert event.details["backend"] == "edge_function"
        assert event.details["backend_cached"] is True

    def test_audit_event_builder_language_changed(self):
        session_id = uuid4()
        event = AuditEventBuilder.language_changed("en", "es", session_id)

        assert event.event_type == AuditEventType.LANGUAGE_CHANGED
        assert event.entity_id == session_id
        assert event.is_user_action is True
        assert event.details == {"previous": "en", "current": "es"}

    def test_audit_event_builder_cache_cleared(self):
        event = AuditEventBuilder.cache_cleared(entries_removed=3)

        assert event.details["entries_removed"] == 3
        assert event.is_user_action is True
