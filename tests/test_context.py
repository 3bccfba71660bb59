"""
Tests for LanguageContext and TranslationContext
"""

import asyncio
import json

import pytest

from cashflow_i18n.cache import TranslationCache
from cashflow_i18n.context import (
    LanguageContext,
    TranslationContext,
    UnsupportedLanguageError,
    parse_language,
)
from cashflow_i18n.context.strings import STATIC_STRINGS
from cashflow_i18n.models.translation import Language

from conftest import FakeBackend


class TestLanguageContext:
    """Tests for the UI language holder."""

    def test_defaults_to_english(self):
        assert LanguageContext().language == Language.EN

    def test_explicit_language(self):
        assert LanguageContext("es").language == Language.ES

    def test_set_language_returns_previous(self):
        context = LanguageContext()

        previous = context.set_language("es")

        assert previous == Language.EN
        assert context.language == Language.ES

    def test_set_language_accepts_enum_and_case(self):
        context = LanguageContext()

        context.set_language(Language.ES)
        assert context.language == Language.ES

        context.set_language("EN")
        assert context.language == Language.EN

    def test_unsupported_language(self):
        context = LanguageContext()

        with pytest.raises(UnsupportedLanguageError) as exc_info:
            context.set_language("fr")

        assert exc_info.value.code == "fr"
        assert context.language == Language.EN

    def test_parse_language(self):
        assert parse_language(" es ") == Language.ES
        with pytest.raises(UnsupportedLanguageError):
            parse_language("xx")


class TestLanguagePreference:
    """The language choice survives across contexts via a JSON file."""

    def test_choice_is_saved_and_restored(self, tmp_path):
        path = tmp_path / "prefs" / "language.json"

        LanguageContext(preference_path=path).set_language("es")

        assert json.loads(path.read_text()) == {"language": "es"}
        assert LanguageContext(preference_path=path).language == Language.ES

    def test_explicit_language_wins_over_preference(self, tmp_path):
        path = tmp_path / "language.json"
        path.write_text(json.dumps({"language": "es"}))

        assert LanguageContext("en", preference_path=path).language == Language.EN

    def test_corrupt_preference_falls_back_to_english(self, tmp_path):
        path = tmp_path / "language.json"
        path.write_text("not json")

        assert LanguageContext(preference_path=path).language == Language.EN

    def test_unsupported_saved_language_falls_back_to_english(self, tmp_path):
        path = tmp_path / "language.json"
        path.write_text(json.dumps({"language": "de"}))

        assert LanguageContext(preference_path=path).language == Language.EN


class TestStaticStrings:
    """t() lookups."""

    def test_english(self):
        assert LanguageContext("en").t("common.save") == "Save"

    def test_spanish(self):
        assert LanguageContext("es").t("common.save") == "Guardar"

    def test_every_english_string_has_a_spanish_translation(self):
        english = STATIC_STRINGS["en"]
        spanish = STATIC_STRINGS["es"]

        for section, strings in english.items():
            assert set(strings) == set(spanish[section]), section

    def test_cache_page_labels_in_spanish(self):
        context = LanguageContext("es")

        assert context.t("translator.failures") == "Traducciones fallidas"
        assert context.t("translator.evictions") == "Expulsiones"

    def test_missing_spanish_key_falls_back_to_english(self, monkeypatch):
        monkeypatch.delitem(STATIC_STRINGS["es"]["translator"], "failures")

        assert LanguageContext("es").t("translator.failures") == "Failed translations"

    def test_unknown_key_returns_key(self):
        assert LanguageContext("es").t("nope.missing") == "nope.missing"

    def test_section_key_is_not_a_string(self):
        assert LanguageContext("en").t("common") == "common"


class TestTranslationContext:
    """Tests for the language-bound translate_text."""

    def test_english_ui_skips_translation(self):
        backend = FakeBackend()
        context = TranslationContext(LanguageContext("en"), TranslationCache(backend))

        assert asyncio.run(context.translate_text("Hello")) == "Hello"
        assert backend.calls == []

    def test_empty_text_skips_translation(self):
        backend = FakeBackend()
        context = TranslationContext(LanguageContext("es"), TranslationCache(backend))

        assert asyncio.run(context.translate_text("")) == ""
        assert backend.calls == []

    def test_spanish_ui_translates(self):
        backend = FakeBackend(translations={("Hello", "es"): "Hola"})
        context = TranslationContext(LanguageContext("es"), TranslationCache(backend))

        assert asyncio.run(context.translate_text("Hello")) == "Hola"
        assert backend.calls[0].source_language == "en"

    def test_follows_language_switch(self):
        backend = FakeBackend()
        language = LanguageContext("en")
        context = TranslationContext(language, TranslationCache(backend))

        async def scenario():
            before = await context.translate_text("Hello")
            language.set_language("es")
            after = await context.translate_text("Hello")
            return before, after

        assert asyncio.run(scenario()) == ("Hello", "[es] Hello")

    def test_translate_texts(self):
        backend = FakeBackend()
        context = TranslationContext(LanguageContext("es"), TranslationCache(backend))

        result = asyncio.run(context.translate_texts(["a", "b"]))

        assert result == ["[es] a", "[es] b"]

    def test_translate_texts_in_source_language(self):
        backend = FakeBackend()
        context = TranslationContext(LanguageContext("en"), TranslationCache(backend))

        assert asyncio.run(context.translate_texts(["a", "b"])) == ["a", "b"]
        assert backend.calls == []

    def test_is_translating_mirrors_cache(self):
        backend = FakeBackend(delays={"Hello": 0.01})
        context = TranslationContext(LanguageContext("es"), TranslationCache(backend))

        async def scenario():
            task = asyncio.create_task(context.translate_text("Hello"))
            await asyncio.sleep(0)
            during = context.is_translating
            await task
            return during

        assert asyncio.run(scenario()) is True
        assert context.is_translating is False
