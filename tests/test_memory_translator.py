"""Tests for the in-memory translator."""

from translator.domain.models import Record
from translator.main import new_memory_translator


class TestRegisterResolve:
    def test_resolves_registered_message(self):
        t = new_memory_translator("en")
        t.register("en", "welcome", "Hello {name}, welcome!")
        assert t.resolve("en", "welcome") == "Hello {name}, welcome!"

    def test_first_registration_wins(self):
        t = new_memory_translator("en")
        t.register("en", "k", "first")
        t.register("en", "k", "second")
        assert t.resolve("en", "k") == "first"
        assert len(t) == 2

    def test_same_key_different_locales(self):
        t = new_memory_translator("en")
        t.register("en", "k", "english")
        t.register("ru", "k", "russian")
        assert t.resolve("ru", "k") == "russian"
        assert t.resolve("en", "k") == "english"

    def test_records_snapshot_in_insertion_order(self):
        t = new_memory_translator("en")
        t.register("en", "a", "A")
        t.register("ru", "b", "B")
        assert t.records() == (Record("en", "a", "A"), Record("ru", "b", "B"))


class TestFallback:
    def test_missing_locale_uses_fallback(self):
        t = new_memory_translator("en")
        t.register("en", "k", "english")
        assert t.resolve("fr", "k") == "english"

    def test_double_miss_returns_empty(self):
        t = new_memory_translator("en")
        t.register("de", "k", "german")
        assert t.resolve("fr", "k") == ""

    def test_fallback_is_a_single_hop(self):
        t = new_memory_translator("en")
        t.register("", "k", "default")
        assert t.resolve("fr", "k") == ""

    def test_missing_in_fallback_locale_itself(self):
        t = new_memory_translator("en")
        assert t.resolve("en", "k") == ""

    def test_registered_empty_message_is_returned_without_fallback(self):
        t = new_memory_translator("en")
        t.register("fr", "k", "")
        t.register("en", "k", "english")
        assert t.resolve("fr", "k") == ""

    def test_fallback_locale_is_fixed(self):
        t = new_memory_translator("ru")
        assert t.fallback_locale == "ru"


class TestTranslate:
    def test_translate_substitutes_placeholders(self):
        t = new_memory_translator("en")
        t.register("en", "greet", "Hello {name}!")
        assert t.translate("en", "greet", {"name": "John"}) == "Hello John!"

    def test_translate_through_fallback(self):
        t = new_memory_translator("en")
        t.register("en", "greet", "Hello {name}!")
        assert t.translate("fr", "greet", {"name": "Jean"}) == "Hello Jean!"

    def test_translate_miss_is_empty(self):
        t = new_memory_translator("en")
        assert t.translate("en", "nope", {"name": "John"}) == ""
