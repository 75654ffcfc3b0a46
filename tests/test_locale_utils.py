"""Tests for locale tag normalization, parsing and file name detection."""

from __future__ import annotations

import pytest
from hypothesis import event, given

from arblexengine.locale_utils import (
    LocaleKey,
    is_iso639_language,
    locale_from_filename,
    normalize_locale,
    try_parse_locale,
)
from tests.strategies import locale_keys


class TestNormalizeLocale:
    """normalize_locale() separator conversion."""

    def test_hyphen_converted(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("en-US") == "en_US"
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_underscore_unchanged(self) -> None:
        """Underscore form passes through."""
        assert normalize_locale("pt_BR") == "pt_BR"

    def test_case_untouched(self) -> None:
        """Normalization does not change case."""
        assert normalize_locale("en-us") == "en_us"


class TestLocaleKeyParse:
    """LocaleKey.parse() canonicalization and rejection."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en", LocaleKey("en")),
            ("en_US", LocaleKey("en", country="US")),
            ("en-US", LocaleKey("en", country="US")),
            ("EN_us", LocaleKey("en", country="US")),
            ("zh_Hans", LocaleKey("zh", script="Hans")),
            ("zh-hant-tw", LocaleKey("zh", script="Hant", country="TW")),
            ("es_419", LocaleKey("es", country="419")),
            ("fil", LocaleKey("fil")),
        ],
    )
    def test_valid_tags(self, tag: str, expected: LocaleKey) -> None:
        """Well-formed tags parse to canonical keys."""
        assert LocaleKey.parse(tag) == expected

    @pytest.mark.parametrize(
        "tag",
        [
            "",
            "e",
            "abcdefghi_US",
            "en__US",
            "en_US_POSIX",
            "en US",
            "en.UTF-8",
            "en@euro",
            "12",
            "en_U",
            "ëñ",
        ],
    )
    def test_invalid_tags_raise(self, tag: str) -> None:
        """Malformed tags raise ValueError."""
        with pytest.raises(ValueError, match="locale|Locale|language"):
            LocaleKey.parse(tag)

    def test_try_parse_returns_none(self) -> None:
        """try_parse_locale() swallows ValueError into None."""
        assert try_parse_locale("not a locale") is None
        assert try_parse_locale("de_AT") == LocaleKey("de", country="AT")


class TestLocaleKeyProperties:
    """LocaleKey string forms and fallback relation."""

    def test_str_joins_with_underscore(self) -> None:
        """str() is the canonical underscore form."""
        assert str(LocaleKey("zh", "Hans", "CN")) == "zh_Hans_CN"
        assert str(LocaleKey("en")) == "en"
        assert str(LocaleKey("en", country="GB")) == "en_GB"

    def test_to_bcp47(self) -> None:
        """to_bcp47() uses hyphens."""
        assert LocaleKey("sr", "Latn", "RS").to_bcp47() == "sr-Latn-RS"

    def test_base_language(self) -> None:
        """base_language strips script and country."""
        key = LocaleKey("zh", "Hant", "TW")
        assert key.base_language == LocaleKey("zh")
        assert key.base_language.is_base_language
        assert not key.is_base_language

    def test_hashable_and_equal(self) -> None:
        """Structural equality makes keys usable as dict keys."""
        mapping = {LocaleKey("en", country="US"): 1}
        assert mapping[LocaleKey.parse("en-US")] == 1

    @given(key=locale_keys())
    def test_parse_str_roundtrip(self, key: LocaleKey) -> None:
        """Parsing the canonical form yields the same key."""
        event(f"has_country={key.country is not None}")
        assert LocaleKey.parse(str(key)) == key
        assert LocaleKey.parse(key.to_bcp47()) == key


class TestIsIso639Language:
    """ISO 639-1 membership."""

    def test_common_languages(self) -> None:
        """Two-letter codes of major languages are listed."""
        for language in ("en", "es", "zh", "ar", "he", "ja"):
            assert is_iso639_language(language)

    def test_three_letter_extras(self) -> None:
        """fil and gsw are recognized besides two-letter codes."""
        assert is_iso639_language("fil")
        assert is_iso639_language("gsw")

    def test_non_languages(self) -> None:
        """Common file name words are not languages."""
        for word in ("app", "intl", "messages", "xx"):
            assert not is_iso639_language(word)


class TestLocaleFromFilename:
    """locale_from_filename() suffix scan."""

    @pytest.mark.parametrize(
        ("stem", "expected"),
        [
            ("app_en", LocaleKey("en")),
            ("app_en_US", LocaleKey("en", country="US")),
            ("intl_zh_Hant_TW", LocaleKey("zh", "Hant", "TW")),
            ("my_app_fr", LocaleKey("fr")),
            ("app_es_419", LocaleKey("es", country="419")),
            ("strings_fil", LocaleKey("fil")),
        ],
    )
    def test_locale_suffix_detected(self, stem: str, expected: LocaleKey) -> None:
        """First underscore whose suffix is an ISO 639-1 locale wins."""
        assert locale_from_filename(stem) == expected

    @pytest.mark.parametrize("stem", ["app", "messages", "app_", "app_xx", "app_english"])
    def test_no_locale(self, stem: str) -> None:
        """Stems without a recognizable suffix yield None."""
        assert locale_from_filename(stem) is None
