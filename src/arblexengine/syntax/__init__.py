"""Message template syntax: AST, parser and traversal.

Python 3.13+. Zero external dependencies.
"""

from arblexengine.syntax.ast import (
    ASTNode,
    BranchExpression,
    Identifier,
    Pattern,
    PatternElement,
    PlaceholderReference,
    PluralExpression,
    SelectExpression,
    Span,
    TextElement,
    Variant,
)
from arblexengine.syntax.cursor import Cursor, ParseResult
from arblexengine.syntax.parser import MessageParser, ParseContext, TemplateParser
from arblexengine.syntax.walk import iter_placeholder_names, iter_selector_references


def parse(
    source: str,
    *,
    resource_id: str = "message",
    filename: str = "<string>",
    use_escaping: bool = False,
) -> Pattern:
    """Parse a single message string with the default parser.

    Raises:
        TemplateSyntaxError: If the message is malformed
    """
    return MessageParser().parse(resource_id, filename, source, use_escaping=use_escaping)


# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Parsing
    "parse",
    "MessageParser",
    "TemplateParser",
    "ParseContext",
    "Cursor",
    "ParseResult",
    # Traversal
    "iter_placeholder_names",
    "iter_selector_references",
    # AST
    "ASTNode",
    "BranchExpression",
    "Identifier",
    "Pattern",
    "PatternElement",
    "PlaceholderReference",
    "PluralExpression",
    "SelectExpression",
    "Span",
    "TextElement",
    "Variant",
]
