"""Hypothesis strategies for ARBLexEngine property-based testing.

Strategies are organized by domain:

- arb: locale keys, placeholder names, ICU message templates

Usage:
    from tests.strategies import icu_messages, locale_keys

Event-Emitting Strategies:
    These strategies emit hypothesis.event() calls so coverage of the
    generated shapes is visible in statistics output:
    - icu_messages, locale_keys
"""

from .arb import (
    ARB_SCRIPTS,
    ARB_TERRITORIES,
    icu_messages,
    iso_languages,
    locale_keys,
    placeholder_names,
    plain_text,
)

__all__ = [
    "ARB_SCRIPTS",
    "ARB_TERRITORIES",
    "icu_messages",
    "iso_languages",
    "locale_keys",
    "placeholder_names",
    "plain_text",
]
