"""Position handling for the message template parser.

A ``Cursor`` is a frozen (source, offset) pair. Moving it yields a new
cursor, so rules can keep an earlier position around for error reporting
(the opening brace of an expression, the start of a case key) at no cost.
Offsets are character offsets into the raw message string and are exactly
what error carets point at.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]

# Separators allowed between the tokens of a {...} expression
_EXPRESSION_WHITESPACE = frozenset(" \t\r\n")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Read position inside one message string.

    Example:
        >>> cursor = Cursor("{n}", 0)
        >>> cursor.current, cursor.advance().current
        ('{', 'n')
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: At end of input; callers test ``is_eof`` first
        """
        if self.pos >= len(self.source):
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character ``offset`` places ahead, or None past the end."""
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        """Cursor ``count`` characters further on, clamped to end of input."""
        return Cursor(self.source, min(len(self.source), self.pos + count))

    def slice_to(self, end_pos: int) -> str:
        """Text from this cursor up to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Cursor at the next character that is not expression whitespace.

        Example:
            >>> Cursor("  \\n count", 0).skip_whitespace().pos
            4
        """
        end = self.pos
        while end < len(self.source) and self.source[end] in _EXPRESSION_WHITESPACE:
            end += 1
        return self if end == self.pos else Cursor(self.source, end)

    def expect(self, char: str) -> "Cursor | None":
        """Consume ``char`` if it is next.

        Returns:
            Cursor past ``char``, or None when the next character differs
        """
        if self.peek() != char:
            return None
        return self.advance()


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """A rule's output together with the cursor just past the consumed text."""

    value: T
    cursor: Cursor
