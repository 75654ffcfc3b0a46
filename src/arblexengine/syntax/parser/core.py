"""Message template parser entry point.

The parser turns one raw ARB message string into a :class:`Pattern` AST.
It is injected into :class:`~arblexengine.model.message.Message` through the
:class:`TemplateParser` protocol, so any object with a compatible ``parse``
method can stand in for :class:`MessageParser`.

See Also:
    - :mod:`arblexengine.syntax.ast` - AST node type definitions
    - :mod:`arblexengine.syntax.parser.rules` - Grammar rules
"""

from typing import Protocol

from arblexengine.constants import MAX_DEPTH
from arblexengine.syntax.ast import Pattern
from arblexengine.syntax.cursor import Cursor
from arblexengine.syntax.parser.rules import ParseContext, parse_pattern

__all__ = ["MessageParser", "TemplateParser"]


class TemplateParser(Protocol):
    """Protocol for message template parsers."""

    def parse(
        self,
        resource_id: str,
        filename: str,
        source: str,
        *,
        use_escaping: bool = False,
    ) -> Pattern:
        """Parse one message string.

        Raises:
            TemplateSyntaxError: If the message is malformed
        """
        ...


class MessageParser:
    """ICU message parser for ARB templates.

    Stateless apart from its nesting limit; one instance can parse any
    number of messages.

    Example:
        >>> pattern = MessageParser().parse("title", "app_en.arb", "Hi {name}")
        >>> [type(e).__name__ for e in pattern.elements]
        ['TextElement', 'PlaceholderReference']
    """

    __slots__ = ("_max_nesting_depth",)

    def __init__(self, *, max_nesting_depth: int = MAX_DEPTH) -> None:
        """Initialize parser.

        Args:
            max_nesting_depth: Maximum nesting of plural/select expressions

        Raises:
            ValueError: If max_nesting_depth is not positive
        """
        if max_nesting_depth < 1:
            msg = f"max_nesting_depth must be positive, got {max_nesting_depth}"
            raise ValueError(msg)
        self._max_nesting_depth = max_nesting_depth

    @property
    def max_nesting_depth(self) -> int:
        return self._max_nesting_depth

    def parse(
        self,
        resource_id: str,
        filename: str,
        source: str,
        *,
        use_escaping: bool = False,
    ) -> Pattern:
        """Parse a message string into a Pattern.

        Args:
            resource_id: Resource id, used in error rendering
            filename: ARB file name, used in error rendering
            source: Raw message text
            use_escaping: Treat single quotes as escape delimiters

        Raises:
            TemplateSyntaxError: At the first syntax problem
        """
        context = ParseContext(
            resource_id=resource_id,
            filename=filename,
            use_escaping=use_escaping,
            max_nesting_depth=self._max_nesting_depth,
        )
        return parse_pattern(Cursor(source, 0), context).value
