"""Rendering of diagnostics for terminals, logs and tooling.

RUST mirrors rustc output (header, location arrow, help and note lines),
SIMPLE fits one log line, and JSON feeds CI annotations and editors.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, assert_never

from .codes import Diagnostic

if TYPE_CHECKING:
    from .errors import ArbError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ELLIPSIS = "..."


class OutputFormat(StrEnum):
    """Rendering style of :class:`DiagnosticFormatter`."""

    RUST = "rust"
    """Multi-line compiler style (default)."""

    SIMPLE = "simple"
    """One line per diagnostic."""

    JSON = "json"
    """One JSON object per diagnostic."""


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders diagnostics, and the errors carrying them, as text.

    Attributes:
        output_format: Rendering style
        sanitize: Cut message and hint text to max_content_length characters
        max_content_length: Cut-off applied when sanitize is set

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.missing_value("title"))
        'MISSING_VALUE: A value for resource "title" was not found.'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        match self.output_format:
            case OutputFormat.RUST:
                return self._rust_style(diagnostic)
            case OutputFormat.SIMPLE:
                return self._one_line(diagnostic)
            case OutputFormat.JSON:
                return json.dumps(self._fields(diagnostic), ensure_ascii=False)
            case _:
                assert_never(self.output_format)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def format_exception(self, error: "ArbError") -> str:
        """Render a raised error in the configured style.

        Errors built from a plain string carry no diagnostic and are returned
        as their text. Positional errors add where the problem is: the
        message line and caret (RUST) or ``file:resource:offset`` (SIMPLE,
        JSON).
        """
        from .errors import ArbPositionError  # noqa: PLC0415 - circular

        diagnostic = error.diagnostic
        if diagnostic is None:
            return str(error)
        if not isinstance(error, ArbPositionError):
            return self.format(diagnostic)

        position = f"{error.filename}:{error.resource_id}:{error.offset}"
        match self.output_format:
            case OutputFormat.RUST:
                _, caret_lines = error.render().split("\n", 1)
                return f"{self._rust_style(diagnostic)}\n{caret_lines}"
            case OutputFormat.SIMPLE:
                return f"{position}: {self._one_line(diagnostic)}"
            case OutputFormat.JSON:
                fields = self._fields(diagnostic)
                fields["position"] = position
                return json.dumps(fields, ensure_ascii=False)
            case _:
                assert_never(self.output_format)

    def _rust_style(self, diagnostic: Diagnostic) -> str:
        """Header line followed by optional location, help and note lines.

        Example output:
            error[DUPLICATE_LOCALE]: Multiple arb files with the same 'en' locale detected.
              --> l10n/strings.arb
              = help: Ensure that there is exactly one arb file for each locale.
        """
        header = f"{diagnostic.severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"
        lines = [header]
        if diagnostic.location:
            lines.append(f"  --> {diagnostic.location}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return "\n".join(lines)

    def _one_line(self, diagnostic: Diagnostic) -> str:
        # Several ARB messages wrap with " \n"; collapse every whitespace run
        text = " ".join(self._clip(diagnostic.message).split())
        prefix = f"{diagnostic.location}: " if diagnostic.location else ""
        return f"{prefix}{diagnostic.code.name}: {text}"

    def _fields(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        fields: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": diagnostic.severity,
            "message": self._clip(diagnostic.message),
        }
        optional = {
            "location": diagnostic.location,
            "hint": self._clip(diagnostic.hint) if diagnostic.hint else None,
            "help_url": diagnostic.help_url,
        }
        fields.update({key: value for key, value in optional.items() if value})
        return fields

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return text[: self.max_content_length] + _ELLIPSIS
