"""Enumerations for ARBLexEngine type-safe constants.

Uses StrEnum so members compare equal to the raw strings found in ARB files
and generated code.

Python 3.13+.
"""

from enum import StrEnum


class PlaceholderType(StrEnum):
    """Placeholder types understood by the formatting predicates.

    ARB files may declare other type names; those are kept verbatim as plain
    strings. StrEnum keeps ``PlaceholderType.NUM == "num"`` true.
    """

    OBJECT = "Object"
    """Default for placeholders used only as plain interpolations."""

    STRING = "String"
    """Default (and only allowed) type for select selectors."""

    INT = "int"
    NUM = "num"
    """Default type for plural selectors."""

    DOUBLE = "double"

    DATETIME = "DateTime"
    """Requires date formatting."""


class PlaceholderRole(StrEnum):
    """Role a placeholder plays as the selector of a branching expression.

    StrEnum provides automatic string conversion: str(PlaceholderRole.PLURAL) == "plural"
    """

    PLURAL = "plural"
    """Selector of a plural expression: {count, plural, other{...}}"""

    SELECT = "select"
    """Selector of a select expression: {gender, select, other{...}}"""


# Placeholder types that take part in number formatting.
NUMERIC_PLACEHOLDER_TYPES: frozenset[str] = frozenset({
    PlaceholderType.INT,
    PlaceholderType.NUM,
    PlaceholderType.DOUBLE,
})

# Types a plural selector may declare.
PLURAL_PLACEHOLDER_TYPES: frozenset[str] = frozenset({
    PlaceholderType.INT,
    PlaceholderType.NUM,
})


__all__ = [
    "NUMERIC_PLACEHOLDER_TYPES",
    "PLURAL_PLACEHOLDER_TYPES",
    "PlaceholderRole",
    "PlaceholderType",
]
