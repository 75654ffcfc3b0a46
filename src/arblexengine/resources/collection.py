"""Locale-indexed set of ARB bundles.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from arblexengine.constants import ARB_FILE_PATTERN
from arblexengine.diagnostics import DuplicateLocaleError, ErrorTemplate, MissingFallbackError
from arblexengine.locale_utils import LocaleKey
from arblexengine.resources.bundle import ResourceBundle

__all__ = ["ResourceBundleCollection"]

logger = logging.getLogger(__name__)

_ARB_FILE_RE = re.compile(ARB_FILE_PATTERN)


class ResourceBundleCollection:
    """All bundles of one application, one per exact locale.

    Every language present must have its bare-language bundle: if
    ``app_en_GB.arb`` exists, ``app_en.arb`` must too, so lookups for any
    English locale have a fallback.

    Iteration order is the order bundles were supplied (path order for
    :meth:`from_directory`).

    Example:
        >>> collection = ResourceBundleCollection.from_directory("lib/l10n")
        >>> [str(locale) for locale in collection.locales]
        ['en', 'en_GB', 'es']
        >>> collection.languages
        ('en', 'es')

    Raises:
        DuplicateLocaleError: If two bundles resolve to the same locale
        MissingFallbackError: If a language lacks its bare-language bundle
    """

    __slots__ = ("_directory", "_language_to_locales", "_locale_to_bundle")

    def __init__(
        self, bundles: Iterable[ResourceBundle], *, directory: Path | None = None
    ) -> None:
        self._directory = directory
        self._locale_to_bundle: dict[LocaleKey, ResourceBundle] = {}
        self._language_to_locales: dict[str, list[LocaleKey]] = {}

        for bundle in bundles:
            if bundle.locale in self._locale_to_bundle:
                raise DuplicateLocaleError(
                    ErrorTemplate.duplicate_locale(str(bundle.locale), str(bundle.path))
                )
            self._locale_to_bundle[bundle.locale] = bundle
            self._language_to_locales.setdefault(bundle.locale.language, []).append(
                bundle.locale
            )

        for language, locales in self._language_to_locales.items():
            if LocaleKey(language) not in self._locale_to_bundle:
                raise MissingFallbackError(
                    ErrorTemplate.missing_fallback(language, (str(locale) for locale in locales))
                )

    @classmethod
    def from_directory(cls, directory: str | Path) -> ResourceBundleCollection:
        """Load every ``*.arb`` file in a directory (not recursive).

        Files are loaded in POSIX path order, which fixes which error is
        reported first when several files are broken.

        Raises:
            OSError: If the directory cannot be listed
            ArbError: Any bundle or collection error
        """
        directory = Path(directory)
        paths = sorted(
            (path for path in directory.iterdir()
             if path.is_file() and _ARB_FILE_RE.search(path.as_posix())),
            key=Path.as_posix,
        )
        collection = cls((ResourceBundle.from_file(path) for path in paths), directory=directory)
        logger.info(
            "Loaded %d arb files from %s: %s",
            len(collection),
            directory,
            ", ".join(str(locale) for locale in collection.locales),
        )
        return collection

    def __len__(self) -> int:
        return len(self._locale_to_bundle)

    def __iter__(self) -> Iterator[ResourceBundle]:
        return iter(self._locale_to_bundle.values())

    def __repr__(self) -> str:
        if self._directory is None:
            return f"ResourceBundleCollection({len(self)} locales)"
        return f"ResourceBundleCollection({self._directory}, {len(self)} locales)"

    @property
    def directory(self) -> Path | None:
        return self._directory

    @property
    def locales(self) -> tuple[LocaleKey, ...]:
        return tuple(self._locale_to_bundle)

    @property
    def bundles(self) -> tuple[ResourceBundle, ...]:
        return tuple(self._locale_to_bundle.values())

    @property
    def languages(self) -> tuple[str, ...]:
        """Language subtags, in order of first appearance."""
        return tuple(self._language_to_locales)

    def bundle_for(self, locale: LocaleKey) -> ResourceBundle | None:
        return self._locale_to_bundle.get(locale)

    def locales_for_language(self, language: str) -> tuple[LocaleKey, ...]:
        """All locales sharing a language subtag (empty if the language is absent)."""
        return tuple(self._language_to_locales.get(language, ()))
