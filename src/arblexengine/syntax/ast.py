"""Message template AST node definitions.

Covers the ICU message subset used by ARB files: literal text, simple
placeholders, plural expressions and select expressions.
Includes type guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    "Identifier",
    # Pattern structure
    "Pattern",
    "TextElement",
    "PlaceholderReference",
    # Branching expressions
    "PluralExpression",
    "SelectExpression",
    "Variant",
    # Type aliases
    "BranchExpression",
    "PatternElement",
    "ASTNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Character offsets into the raw message string.

    Offsets count the characters exactly as written in the ARB file,
    including escape quotes, so they can be used for error carets.

    Attributes:
        start: Starting offset (inclusive)
        end: Ending offset (exclusive)

    Example:
        Source: "Hi {name}"
        PlaceholderReference span: Span(start=3, end=9)
        Identifier "name" span: Span(start=4, end=8)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Identifier:
    """Identifier: [a-zA-Z_][a-zA-Z0-9_]*"""

    name: str
    span: Span


# ============================================================================
# PATTERN STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Pattern:
    """Sequence of text and expressions: a whole message or one case body."""

    elements: tuple["PatternElement", ...]
    span: Span

    @staticmethod
    def guard(node: object) -> TypeIs["Pattern"]:
        return isinstance(node, Pattern)


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text with escapes already resolved.

    Example:
        Source "It''s {n}" with escaping enabled gives TextElement("It's ")
    """

    value: str
    span: Span

    @staticmethod
    def guard(elem: object) -> TypeIs["TextElement"]:
        """Type guard for TextElement."""
        return isinstance(elem, TextElement)


@dataclass(frozen=True, slots=True)
class PlaceholderReference:
    """Simple argument interpolation.

    Example:
        Hello {name}
    """

    name: Identifier
    span: Span

    @staticmethod
    def guard(elem: object) -> TypeIs["PlaceholderReference"]:
        return isinstance(elem, PlaceholderReference)


# ============================================================================
# BRANCHING EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Variant:
    """One case of a plural or select expression.

    Attributes:
        key: Case key as written ("=0", "one", "other", "male")
        value: Case body
        span: Whole case including key and braces
    """

    key: str
    value: Pattern
    span: Span

    @property
    def is_other(self) -> bool:
        return self.key == "other"


@dataclass(frozen=True, slots=True)
class PluralExpression:
    """Plural expression.

    Example:
        {count, plural, =0{no items} one{1 item} other{{count} items}}
    """

    selector: Identifier
    variants: tuple[Variant, ...]
    span: Span

    @staticmethod
    def guard(elem: object) -> TypeIs["PluralExpression"]:
        """Type guard for PluralExpression."""
        return isinstance(elem, PluralExpression)


@dataclass(frozen=True, slots=True)
class SelectExpression:
    """Select expression.

    Example:
        {gender, select, male{he} female{she} other{they}}
    """

    selector: Identifier
    variants: tuple[Variant, ...]
    span: Span

    @staticmethod
    def guard(elem: object) -> TypeIs["SelectExpression"]:
        """Type guard for SelectExpression."""
        return isinstance(elem, SelectExpression)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type BranchExpression = PluralExpression | SelectExpression
type PatternElement = TextElement | PlaceholderReference | PluralExpression | SelectExpression
type ASTNode = (
    Pattern
    | TextElement
    | PlaceholderReference
    | PluralExpression
    | SelectExpression
    | Variant
    | Identifier
    | Span
)
