"""ARB resource files: per-file bundles and the locale-indexed collection.

Python 3.13+.
"""

from .bundle import ResourceBundle, resolve_locale
from .collection import ResourceBundleCollection
from .types import ArbResources, ArbSource, LocaleTag, PlaceholderName, ResourceId

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Bundles
    "ResourceBundle",
    "ResourceBundleCollection",
    "resolve_locale",
    # Type aliases
    "ArbResources",
    "ArbSource",
    "LocaleTag",
    "PlaceholderName",
    "ResourceId",
]
