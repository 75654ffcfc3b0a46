"""Depth-first traversal of message template ASTs.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from typing import assert_never

from arblexengine.enums import PlaceholderRole
from arblexengine.syntax.ast import (
    Identifier,
    Pattern,
    PatternElement,
    PlaceholderReference,
    PluralExpression,
    SelectExpression,
    TextElement,
)

__all__ = ["iter_placeholder_names", "iter_selector_references"]


def iter_selector_references(pattern: Pattern) -> Iterator[tuple[PlaceholderRole, Identifier]]:
    """Yield the selector of every plural and select expression.

    Uses an explicit stack, so arbitrarily nested case bodies never touch
    the recursion limit. Selectors nested inside case bodies are included.

    Example:
        >>> pattern = MessageParser().parse("m", "f.arb", "{n, plural, other{{g, select, other{x}}}}")
        >>> [(role.value, ident.name) for role, ident in iter_selector_references(pattern)]
        [('plural', 'n'), ('select', 'g')]
    """
    stack: list[Pattern | PatternElement] = [pattern]
    while stack:
        node = stack.pop()
        match node:
            case Pattern(elements=elements):
                stack.extend(reversed(elements))
            case TextElement() | PlaceholderReference():
                pass
            case PluralExpression(selector=selector, variants=variants):
                yield PlaceholderRole.PLURAL, selector
                stack.extend(variant.value for variant in reversed(variants))
            case SelectExpression(selector=selector, variants=variants):
                yield PlaceholderRole.SELECT, selector
                stack.extend(variant.value for variant in reversed(variants))
            case _:
                assert_never(node)


def iter_placeholder_names(pattern: Pattern) -> Iterator[str]:
    """Yield every placeholder name the pattern references, in source order.

    Includes both simple ``{name}`` references and plural/select selectors.
    Names may repeat.
    """
    stack: list[Pattern | PatternElement] = [pattern]
    while stack:
        node = stack.pop()
        match node:
            case Pattern(elements=elements):
                stack.extend(reversed(elements))
            case TextElement():
                pass
            case PlaceholderReference(name=name):
                yield name.name
            case PluralExpression(selector=selector, variants=variants) | SelectExpression(
                selector=selector, variants=variants
            ):
                yield selector.name
                stack.extend(variant.value for variant in reversed(variants))
            case _:
                assert_never(node)
