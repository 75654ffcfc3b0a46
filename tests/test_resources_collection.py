"""Tests for ResourceBundleCollection fallback and duplicate rules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arblexengine.diagnostics import DiagnosticCode, DuplicateLocaleError, MissingFallbackError
from arblexengine.locale_utils import LocaleKey
from arblexengine.resources import ResourceBundle, ResourceBundleCollection
from tests.strategies import locale_keys

if TYPE_CHECKING:
    from tests.conftest import ArbWriter


def _bundle(filename: str, source: str = "{}") -> ResourceBundle:
    return ResourceBundle.from_source(source, filename)


class TestFallbacks:
    """Every language needs its bare-language bundle."""

    def test_language_with_fallback(self) -> None:
        """en_GB alongside en is accepted."""
        collection = ResourceBundleCollection([_bundle("app_en.arb"), _bundle("app_en_GB.arb")])
        assert collection.locales == (LocaleKey("en"), LocaleKey("en", country="GB"))

    def test_missing_fallback(self) -> None:
        """en_GB without en fails, naming the missing language."""
        with pytest.raises(MissingFallbackError) as exc_info:
            ResourceBundleCollection([_bundle("app_en_GB.arb"), _bundle("app_es.arb")])
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.MISSING_FALLBACK
        assert "Arb file for a fallback, en, does not exist" in diagnostic.message
        assert "[en_GB]" in diagnostic.message

    def test_missing_fallback_lists_every_variant(self) -> None:
        """All locales of the language appear in the message."""
        with pytest.raises(MissingFallbackError, match=r"\[zh_Hans, zh_Hant_TW\]"):
            ResourceBundleCollection(
                [_bundle("app_zh_Hans.arb"), _bundle("app_zh_Hant_TW.arb")]
            )

    def test_several_languages(self) -> None:
        """Each language is checked independently."""
        collection = ResourceBundleCollection(
            [_bundle("app_en.arb"), _bundle("app_en_GB.arb"), _bundle("app_es.arb")]
        )
        assert collection.languages == ("en", "es")
        assert collection.locales_for_language("en") == (
            LocaleKey("en"),
            LocaleKey("en", country="GB"),
        )
        assert collection.locales_for_language("fr") == ()

    @given(locales=st.lists(locale_keys(), min_size=1, max_size=6, unique=True))
    def test_fallback_rule(self, locales: list[LocaleKey]) -> None:
        """Construction succeeds exactly when every language has its base locale."""
        bundles = [_bundle(f"app_{locale}.arb") for locale in locales]
        has_fallbacks = all(locale.base_language in locales for locale in locales)
        if has_fallbacks:
            assert len(ResourceBundleCollection(bundles)) == len(locales)
        else:
            with pytest.raises(MissingFallbackError):
                ResourceBundleCollection(bundles)


class TestDuplicates:
    """One bundle per exact locale."""

    def test_duplicate_locale(self) -> None:
        """Two files resolving to the same locale are rejected."""
        with pytest.raises(DuplicateLocaleError) as exc_info:
            ResourceBundleCollection(
                [_bundle("app_en.arb"), _bundle("strings.arb", '{"@@locale": "en"}')]
            )
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.message == "Multiple arb files with the same 'en' locale detected."
        assert diagnostic.location == "strings.arb"


class TestLookups:
    """Accessors and dunder methods."""

    def test_bundle_for(self) -> None:
        """Bundles are found by exact locale."""
        english = _bundle("app_en.arb")
        collection = ResourceBundleCollection([english])
        assert collection.bundle_for(LocaleKey("en")) is english
        assert collection.bundle_for(LocaleKey("en", country="US")) is None

    def test_iteration_and_len(self) -> None:
        """Iteration yields bundles in the order supplied."""
        bundles = [_bundle("app_fr.arb"), _bundle("app_de.arb")]
        collection = ResourceBundleCollection(bundles)
        assert list(collection) == bundles
        assert collection.bundles == tuple(bundles)
        assert len(collection) == 2

    def test_repr_without_directory(self) -> None:
        """In-memory collections report only their size."""
        collection = ResourceBundleCollection([_bundle("app_fr.arb")])
        assert repr(collection) == "ResourceBundleCollection(1 locales)"
        assert collection.directory is None


class TestFromDirectory:
    """Loading every ARB file in a directory."""

    def test_loads_sorted_arb_files(self, write_arb: ArbWriter) -> None:
        """Only .arb files are loaded, in path order."""
        write_arb("app_es.arb", {"hello": "Hola"})
        write_arb("app_en_GB.arb", {"hello": "Hello"})
        path = write_arb("app_en.arb", {"hello": "Hello"})
        (path.parent / "notes.txt").write_text("not an arb file", encoding="utf-8")
        (path.parent / "app_fr.arb.bak").write_text("{", encoding="utf-8")

        collection = ResourceBundleCollection.from_directory(path.parent)
        assert [str(locale) for locale in collection.locales] == ["en", "en_GB", "es"]
        assert collection.directory == path.parent

    def test_subdirectories_ignored(self, write_arb: ArbWriter) -> None:
        """Nested directories are not searched."""
        path = write_arb("app_en.arb", {})
        nested = path.parent / "nested.arb"
        nested.mkdir()
        (nested / "app_de.arb").write_text("{}", encoding="utf-8")
        collection = ResourceBundleCollection.from_directory(str(path.parent))
        assert collection.locales == (LocaleKey("en"),)

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory is an empty collection."""
        assert len(ResourceBundleCollection.from_directory(tmp_path)) == 0

    def test_logs_summary(self, write_arb: ArbWriter, caplog: pytest.LogCaptureFixture) -> None:
        """Loading logs the locales found."""
        path = write_arb("app_en.arb", {})
        with caplog.at_level(logging.INFO, logger="arblexengine.resources.collection"):
            ResourceBundleCollection.from_directory(path.parent)
        assert "Loaded 1 arb files" in caplog.text
