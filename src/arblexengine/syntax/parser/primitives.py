"""Primitive parsing utilities for the message template parser.

Low-level parsers for identifiers and case keys. Each returns a
ParseResult on success or None when the input does not start with the
expected token; callers decide which error to raise.
"""

from arblexengine.syntax.ast import Identifier, Span
from arblexengine.syntax.cursor import Cursor, ParseResult

__all__ = [
    "is_identifier_char",
    "is_identifier_start",
    "parse_case_key",
    "parse_identifier",
]

# ASCII only: placeholder names become parameter names in generated code.
_ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_DIGITS: str = "0123456789"


def is_identifier_start(ch: str) -> bool:
    return ch in _ASCII_LETTERS or ch == "_"


def is_identifier_char(ch: str) -> bool:
    return ch in _ASCII_LETTERS or ch in _ASCII_DIGITS or ch == "_"


def _scan_digits(cursor: Cursor) -> Cursor:
    while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
        cursor = cursor.advance()
    return cursor


def parse_identifier(cursor: Cursor) -> ParseResult[Identifier] | None:
    """Parse identifier: [a-zA-Z_][a-zA-Z0-9_]*

    Examples:
        count → Identifier("count")
        user_name2 → Identifier("user_name2")
    """
    if cursor.is_eof or not is_identifier_start(cursor.current):
        return None

    start_pos = cursor.pos
    cursor = cursor.advance()
    while not cursor.is_eof and is_identifier_char(cursor.current):
        cursor = cursor.advance()

    name = Cursor(cursor.source, start_pos).slice_to(cursor.pos)
    return ParseResult(Identifier(name, Span(start_pos, cursor.pos)), cursor)


def parse_case_key(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a plural/select case key.

    Accepted shapes: ``=N`` (exact plural match), an identifier
    (``one``, ``other``, ``male``) or a bare digit run (select on numbers).
    Whether a key is meaningful for the expression kind is decided by
    the caller.
    """
    if cursor.is_eof:
        return None

    start = cursor
    if cursor.current == "=":
        end = _scan_digits(cursor.advance())
        if end.pos == cursor.pos + 1:
            return None
        return ParseResult(start.slice_to(end.pos), end)

    identifier = parse_identifier(cursor)
    if identifier is not None:
        return ParseResult(identifier.value.name, identifier.cursor)

    end = _scan_digits(cursor)
    if end.pos == cursor.pos:
        return None
    return ParseResult(start.slice_to(end.pos), end)
