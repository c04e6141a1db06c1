"""Tests for translation.store module."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tests.factories.translation import make_dictionary, write_definition, write_legacy
from translation import DictionaryStore, DictionaryUnavailable, lang_merge
from translation.store import read_dictionary_file, read_json_dictionary


@pytest.mark.unit
class TestLangMerge:
    """Tests for lang_merge()."""

    def test_overlay_wins_per_language(self):
        """Overlay languages replace base languages, others are kept."""
        base = {"greet": {"en": "Hello", "no": "Hei"}}
        overlay = {"greet": {"en": "Hi"}}
        assert lang_merge(base, overlay) == {"greet": {"en": "Hi", "no": "Hei"}}

    def test_overlay_only_tags_are_not_added(self):
        """Tags absent from the base are ignored."""
        base = {"greet": {"en": "Hello", "no": "Hei"}}
        overlay = {"bye": {"en": "Bye"}}
        assert lang_merge(base, overlay) == base
        assert "bye" not in lang_merge(base, overlay)

    def test_adds_languages(self):
        """Overlay languages missing from the base are added."""
        base = {"greet": {"en": "Hello"}}
        overlay = {"greet": {"de": "Hallo"}}
        assert lang_merge(base, overlay) == {"greet": {"en": "Hello", "de": "Hallo"}}

    def test_inputs_are_not_modified(self):
        """lang_merge() returns a new dictionary."""
        base = {"greet": {"en": "Hello"}}
        overlay = {"greet": {"en": "Hi"}}
        lang_merge(base, overlay)
        assert base == {"greet": {"en": "Hello"}}
        assert overlay == {"greet": {"en": "Hi"}}


@pytest.mark.unit
class TestReadDictionaryFile:
    """Tests for the dictionary file readers."""

    def test_definition_only(self, tmp_path):
        """A definition without overlay is returned as is."""
        stem = write_definition(tmp_path, "login", make_dictionary())
        assert read_dictionary_file(stem) == make_dictionary()

    def test_definition_with_overlay(self, tmp_path):
        """The overlay is merged into the definition."""
        stem = write_definition(
            tmp_path,
            "login",
            {"login_button": {"en": "Login"}},
            translation={"login_button": {"no": "Logg inn"}},
        )
        assert read_dictionary_file(stem) == {
            "login_button": {"en": "Login", "no": "Logg inn"}
        }

    def test_invalid_definition(self, tmp_path):
        """An unparsable definition raises DictionaryUnavailable."""
        (tmp_path / "broken.definition.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(DictionaryUnavailable):
            read_json_dictionary(tmp_path / "broken")

    def test_empty_definition(self, tmp_path):
        """An empty definition raises DictionaryUnavailable."""
        (tmp_path / "empty.definition.json").write_text("{}", encoding="utf-8")
        with pytest.raises(DictionaryUnavailable):
            read_dictionary_file(tmp_path / "empty")

    def test_invalid_overlay_is_ignored(self, tmp_path):
        """A broken overlay leaves the definition untouched."""
        stem = write_definition(tmp_path, "login", {"login_button": {"en": "Login"}})
        Path(f"{stem}.translation.json").write_text("[1, 2", encoding="utf-8")
        assert read_dictionary_file(stem) == {"login_button": {"en": "Login"}}

    def test_invalid_entries_are_dropped(self, tmp_path):
        """Entries that are not language -> text mappings are skipped."""
        data = {
            "good": {"en": "Good"},
            "not_a_map": "text",
            "bad_text": {"en": 1},
            "empty": {},
        }
        (tmp_path / "mixed.definition.json").write_text(json.dumps(data), encoding="utf-8")
        assert read_dictionary_file(tmp_path / "mixed") == {"good": {"en": "Good"}}

    def test_legacy_format(self, tmp_path):
        """The legacy format is read when no definition exists."""
        write_legacy(tmp_path, "status", "<?php $lang = ['ok' => ['en' => 'OK']];")
        assert read_dictionary_file(tmp_path / "status") == {"ok": {"en": "OK"}}

    def test_definition_preferred_over_legacy(self, tmp_path):
        """The definition file wins when both formats exist."""
        write_definition(tmp_path, "status", {"ok": {"en": "From JSON"}})
        write_legacy(tmp_path, "status", "<?php $lang = ['ok' => ['en' => 'From PHP']];")
        assert read_dictionary_file(tmp_path / "status") == {"ok": {"en": "From JSON"}}

    def test_missing(self, tmp_path):
        """No dictionary file raises DictionaryUnavailable."""
        with pytest.raises(DictionaryUnavailable) as exc_info:
            read_dictionary_file(tmp_path / "nonexistent")
        assert exc_info.value.path == tmp_path / "nonexistent"


@pytest.mark.unit
class TestDictionaryStore:
    """Tests for DictionaryStore."""

    @pytest.fixture
    def module_dirs(self, tmp_path):
        resolver = MagicMock()
        resolver.resolve.side_effect = lambda module: tmp_path / "modules" / module
        return resolver

    @pytest.fixture
    def store(self, settings, module_dirs):
        return DictionaryStore(settings, module_dirs)

    def test_dictionary_dir(self, store, temp_dictionaries_dir):
        """dictionary_dir() reads dictionarydir from the configuration."""
        assert store.dictionary_dir() == (temp_dictionaries_dir / "dictionaries").resolve()

    def test_load(self, store):
        """load() returns the named dictionary."""
        dictionary = store.load("attributes")
        assert dictionary["attribute_mail"] == {"en": "Mail"}

    def test_load_is_cached(self, store):
        """load() returns the same object on repeated calls."""
        assert store.load("attributes") is store.load("attributes")
        assert "attributes" in store.cache

    def test_load_module_dictionary(self, store, module_dirs, tmp_path):
        """module:file names are read from the module's directory."""
        write_definition(tmp_path / "modules" / "saml", "errors", {"e1": {"en": "Error"}})
        assert store.load("saml:errors") == {"e1": {"en": "Error"}}
        module_dirs.resolve.assert_called_once_with("saml")

    def test_load_missing_is_empty(self, store):
        """A missing dictionary loads as empty."""
        assert store.load("nonexistent") == {}

    def test_failed_load_is_not_retried(self, store):
        """A failed load is cached and the file is not read again."""
        with patch(
            "translation.store.read_dictionary_file",
            side_effect=DictionaryUnavailable("x", "missing"),
        ) as read:
            assert store.load("nonexistent") == {}
            assert store.load("nonexistent") == {}
        read.assert_called_once()

    def test_read_file_bypasses_cache(self, store, temp_dictionaries_dir):
        """read_file() reads from disk without caching."""
        stem = temp_dictionaries_dir / "dictionaries" / "attributes"
        assert store.read_file(stem) is not store.read_file(stem)
        assert store.cache == {}

    def test_read_file_missing(self, store, tmp_path):
        """read_file() returns an empty dictionary for missing files."""
        assert store.read_file(tmp_path / "nonexistent") == {}
