"""Grammar rules for the message template parser.

Grammar:
    message     := (text | expression)*
    expression  := "{" ws ident ws ( "}" | "," ws kind ws "," ws case+ "}" )
    kind        := "plural" | "select"
    case        := key ws "{" message "}" ws

Unlike a recovering parser, every rule raises TemplateSyntaxError at the
first problem, positioned at the offending character. An ARB message that
does not parse can never produce correct generated code.
"""

from dataclasses import dataclass

from arblexengine.constants import MAX_DEPTH, OTHER_CASE, PLURAL_CATEGORIES
from arblexengine.diagnostics import Diagnostic, ErrorTemplate, TemplateSyntaxError
from arblexengine.enums import PlaceholderRole
from arblexengine.syntax.ast import (
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
from arblexengine.syntax.parser.primitives import parse_case_key, parse_identifier

__all__ = [
    "ParseContext",
    "parse_expression",
    "parse_pattern",
    "parse_text",
    "parse_variant",
]

_QUOTE = "'"


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing one message string.

    Attributes:
        resource_id: Resource id of the message (for error rendering)
        filename: ARB file name holding the message (for error rendering)
        use_escaping: Treat single quotes as escape delimiters
        max_nesting_depth: Maximum nesting of plural/select expressions
        current_depth: Current nesting depth (0 = top level)
    """

    resource_id: str
    filename: str
    use_escaping: bool = False
    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_expression(self) -> "ParseContext":
        """Create new context with incremented depth for case bodies."""
        return ParseContext(
            resource_id=self.resource_id,
            filename=self.filename,
            use_escaping=self.use_escaping,
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )

    def error(self, diagnostic: Diagnostic, cursor: Cursor) -> TemplateSyntaxError:
        """Build a positional syntax error at the cursor's offset."""
        return TemplateSyntaxError(
            diagnostic, self.filename, self.resource_id, cursor.source, cursor.pos
        )


def _expected(context: ParseContext, cursor: Cursor, expected: str) -> TemplateSyntaxError:
    if cursor.is_eof:
        return context.error(ErrorTemplate.unexpected_eof(expected), cursor)
    return context.error(ErrorTemplate.unexpected_token(expected, cursor.current), cursor)


# =============================================================================
# Pattern Parsing
# =============================================================================


def parse_pattern(
    cursor: Cursor, context: ParseContext, *, nested: bool = False
) -> ParseResult[Pattern]:
    """Parse text and expressions up to EOF, or up to the closing brace of a case.

    Args:
        cursor: Current position in source
        context: Parse context
        nested: True inside a case body; stops before "}" without consuming it

    Raises:
        TemplateSyntaxError: On a stray "}" at top level, or EOF inside a case
    """
    start_pos = cursor.pos
    elements: list[PatternElement] = []

    while True:
        if cursor.is_eof:
            if nested:
                raise _expected(context, cursor, "}")
            break
        ch = cursor.current
        if ch == "}":
            if nested:
                break
            raise context.error(ErrorTemplate.unexpected_character(ch), cursor)
        if ch == "{":
            expression = parse_expression(cursor, context)
            elements.append(expression.value)
            cursor = expression.cursor
        else:
            text = parse_text(cursor, context)
            elements.append(text.value)
            cursor = text.cursor

    return ParseResult(Pattern(tuple(elements), Span(start_pos, cursor.pos)), cursor)


def parse_text(cursor: Cursor, context: ParseContext) -> ParseResult[TextElement]:
    """Parse literal text up to the next brace.

    With escaping enabled, ``''`` yields one quote and ``'...'`` yields its
    contents verbatim (braces included). Without escaping, quotes are plain
    characters.

    Raises:
        TemplateSyntaxError: On a quote with no closing partner
    """
    start_pos = cursor.pos
    chunks: list[str] = []
    run_start = cursor

    while not cursor.is_eof and cursor.current not in "{}":
        if not (context.use_escaping and cursor.current == _QUOTE):
            cursor = cursor.advance()
            continue

        chunks.append(run_start.slice_to(cursor.pos))
        if cursor.peek(1) == _QUOTE:
            chunks.append(_QUOTE)
            cursor = cursor.advance(2)
        else:
            closing = cursor.source.find(_QUOTE, cursor.pos + 1)
            if closing == -1:
                raise context.error(ErrorTemplate.unmatched_quote(), cursor)
            chunks.append(cursor.advance().slice_to(closing))
            cursor = Cursor(cursor.source, closing + 1)
        run_start = cursor

    chunks.append(run_start.slice_to(cursor.pos))
    value = "".join(chunks)
    return ParseResult(TextElement(value, Span(start_pos, cursor.pos)), cursor)


# =============================================================================
# Expression Parsing
# =============================================================================


def parse_expression(cursor: Cursor, context: ParseContext) -> ParseResult[PatternElement]:
    """Parse a braced expression: placeholder, plural or select.

    Examples:
        {name}
        {count, plural, =0{none} other{{count}}}
        {gender, select, male{he} other{they}}

    Raises:
        TemplateSyntaxError: On malformed expressions or excessive nesting
    """
    open_brace = cursor
    if context.is_depth_exceeded():
        raise context.error(
            ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth), open_brace
        )

    cursor = cursor.advance().skip_whitespace()
    selector = parse_identifier(cursor)
    if selector is None:
        raise _expected(context, cursor, "identifier")
    cursor = selector.cursor.skip_whitespace()

    if (closed := cursor.expect("}")) is not None:
        span = Span(open_brace.pos, closed.pos)
        return ParseResult(PlaceholderReference(selector.value, span), closed)

    if (after_comma := cursor.expect(",")) is None:
        raise _expected(context, cursor, "}")
    cursor = after_comma.skip_whitespace()

    keyword = parse_identifier(cursor)
    if keyword is None:
        raise _expected(context, cursor, "identifier")
    if keyword.value.name not in (PlaceholderRole.PLURAL, PlaceholderRole.SELECT):
        raise context.error(ErrorTemplate.unknown_expression_kind(keyword.value.name), cursor)
    role = PlaceholderRole(keyword.value.name)
    cursor = keyword.cursor.skip_whitespace()

    if (after_comma := cursor.expect(",")) is None:
        raise _expected(context, cursor, ",")
    cursor = after_comma.skip_whitespace()

    variants: list[Variant] = []
    seen_keys: set[str] = set()
    case_context = context.enter_expression()
    while True:
        if cursor.is_eof:
            raise _expected(context, cursor, "}")
        if cursor.current == "}":
            break
        variant_start = cursor
        variant = parse_variant(cursor, case_context, role)
        if variant.value.key in seen_keys:
            raise context.error(ErrorTemplate.duplicate_case(variant.value.key), variant_start)
        seen_keys.add(variant.value.key)
        variants.append(variant.value)
        cursor = variant.cursor.skip_whitespace()

    if OTHER_CASE not in seen_keys:
        raise context.error(ErrorTemplate.missing_other_case(role), open_brace)

    closed = cursor.advance()
    span = Span(open_brace.pos, closed.pos)
    if role is PlaceholderRole.PLURAL:
        return ParseResult(PluralExpression(selector.value, tuple(variants), span), closed)
    return ParseResult(SelectExpression(selector.value, tuple(variants), span), closed)


def parse_variant(
    cursor: Cursor, context: ParseContext, role: PlaceholderRole
) -> ParseResult[Variant]:
    """Parse one case: key "{" message "}".

    Plural keys must be ``=N`` or a CLDR category; select keys may be any
    identifier or digit run.
    """
    start = cursor
    key = parse_case_key(cursor)
    if key is None:
        raise _expected(context, cursor, "case key")
    if role is PlaceholderRole.PLURAL and not (
        key.value.startswith("=") or key.value in PLURAL_CATEGORIES
    ):
        raise context.error(ErrorTemplate.invalid_plural_case(key.value), start)
    if role is PlaceholderRole.SELECT and key.value.startswith("="):
        raise context.error(ErrorTemplate.unexpected_character("="), start)

    cursor = key.cursor.skip_whitespace()
    if (body_start := cursor.expect("{")) is None:
        raise _expected(context, cursor, "{")

    body = parse_pattern(body_start, context, nested=True)
    # parse_pattern(nested=True) only returns when positioned on "}"
    closed = body.cursor.advance()
    return ParseResult(Variant(key.value, body.value, Span(start.pos, closed.pos)), closed)
