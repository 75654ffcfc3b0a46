"""Type aliases for the ARB resource domain.

Provides semantic type aliases used throughout the resources and model
packages and by user code annotating compiler call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "ArbResources",
    "ArbSource",
    "LocaleTag",
    "PlaceholderName",
    "ResourceId",
]

type ResourceId = str
"""Key of a translatable resource in an ARB file (e.g., 'helloWorld')."""

type PlaceholderName = str
"""Name of a message argument (e.g., 'count' in '{count}')."""

type LocaleTag = str
"""Locale tag as written in @@locale or a file name (e.g., 'en_US', 'zh-Hans')."""

type ArbSource = str
"""Raw ARB file text (a JSON object)."""

type ArbResources = Mapping[str, object]
"""Decoded top-level ARB object: resources, @-attributes and @@-metadata."""
