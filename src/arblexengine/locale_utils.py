"""Locale utilities for ARB file locales.

Centralizes locale tag normalization and parsing. ARB files and their file
names spell locales with either separator ("en-US" or "en_US") and in any
case; everything downstream works with the canonical ``LocaleKey`` form.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .constants import ISO_639_1_LANGUAGES

__all__ = [
    "LocaleKey",
    "is_iso639_language",
    "locale_from_filename",
    "normalize_locale",
    "try_parse_locale",
]

# ASCII alphanumeric subtags joined by underscores. Babel's parser accepts
# encodings (".UTF-8") and modifiers ("@euro"); ARB locale tags do not.
_LOCALE_TAG_PATTERN = re.compile(r"[A-Za-z0-9]+(?:_[A-Za-z0-9]+)*")


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the underscore form.

    BCP-47 uses hyphens (en-US), while ARB file names and Babel use
    underscores (en_US). Case is left untouched.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@dataclass(frozen=True, slots=True)
class LocaleKey:
    """Parsed locale identity: language plus optional script and country.

    Equality and hashing are structural, so a ``LocaleKey`` can key the
    bundle and message maps directly.

    Attributes:
        language: Lowercase language subtag ("en", "zh", "fil")
        script: Title-case script subtag ("Hans"), if any
        country: Uppercase region subtag ("US") or UN M.49 digits ("419")
    """

    language: str
    script: str | None = None
    country: str | None = None

    def __str__(self) -> str:
        return "_".join(
            part for part in (self.language, self.script, self.country) if part
        )

    @classmethod
    def parse(cls, tag: str) -> LocaleKey:
        """Parse a locale tag written with "-" or "_" separators.

        Case is canonicalized (``zh-hans-cn`` becomes ``zh_Hans_CN``).

        Raises:
            ValueError: If the tag is not a well-formed language[_Script][_REGION]
        """
        # Lazy import: Babel loads its locale data index at import time
        from babel.core import parse_locale  # noqa: PLC0415

        normalized = normalize_locale(tag)
        if not _LOCALE_TAG_PATTERN.fullmatch(normalized):
            msg = f"Invalid locale tag: {tag!r}"
            raise ValueError(msg)

        try:
            parsed = parse_locale(normalized)
        except ValueError as e:
            msg = f"Invalid locale tag: {tag!r}"
            raise ValueError(msg) from e
        # parse_locale returns a 5-tuple only when a modifier is present
        language, country, script, variant = parsed[:4]
        if variant is not None:
            msg = f"Locale variants are not supported: {tag!r}"
            raise ValueError(msg)
        if not (2 <= len(language) <= 3 or 5 <= len(language) <= 8):
            msg = f"Invalid language subtag in locale tag: {tag!r}"
            raise ValueError(msg)
        return cls(language=language, script=script, country=country)

    @property
    def base_language(self) -> LocaleKey:
        """Fallback locale holding only the language subtag."""
        return LocaleKey(self.language)

    @property
    def is_base_language(self) -> bool:
        return self.script is None and self.country is None

    def to_bcp47(self) -> str:
        """Hyphen-separated form, e.g. ``zh-Hans-CN``."""
        return str(self).replace("_", "-")


def try_parse_locale(tag: str) -> LocaleKey | None:
    """Parse a locale tag, returning None instead of raising."""
    try:
        return LocaleKey.parse(tag)
    except ValueError:
        return None


def is_iso639_language(language: str) -> bool:
    """Check whether a language subtag is in the recognized ISO 639-1 set."""
    return language in ISO_639_1_LANGUAGES


def locale_from_filename(stem: str) -> LocaleKey | None:
    """Derive a locale from an ARB file name stem.

    Scans for the first underscore whose remaining suffix parses as a locale
    with an ISO 639-1 language. ``app_en_US`` yields ``en_US``;
    ``my_app_fr`` yields ``fr`` (``app_fr`` is rejected since "app" is not a
    language code); ``messages`` yields None.

    Args:
        stem: File name without directory and ``.arb`` extension

    Returns:
        The first matching locale, or None if no suffix qualifies
    """
    for index, char in enumerate(stem):
        if char != "_":
            continue
        candidate = try_parse_locale(stem[index + 1 :])
        if candidate is not None and is_iso639_language(candidate.language):
            return candidate
    return None
