"""Error codes and the structured record attached to every ARB error.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every error kind.

    Ranges:
        1000-1099: Resource file errors (decoding, locale resolution)
        1100-1199: Collection errors (duplicate locales, fallback anchors)
        2000-2999: Message and attribute validation errors
        3000-3999: Template syntax errors (parser failures)
        4000-4999: Placeholder inference errors (plural/select usage)
    """

    # Resource file errors (1000-1099)
    MALFORMED_RESOURCE_FILE = 1001
    INVALID_LOCALE = 1002
    UNDETERMINED_LOCALE = 1003
    LOCALE_MISMATCH = 1004
    TEMPLATE_NOT_FOUND = 1005

    # Collection errors (1100-1199)
    DUPLICATE_LOCALE = 1101
    MISSING_FALLBACK = 1102

    # Message and attribute validation errors (2000-2999)
    MISSING_VALUE = 2001
    INVALID_VALUE_TYPE = 2002
    MISSING_RESOURCE_ATTRIBUTE = 2003
    MALFORMED_MAP = 2004
    ATTRIBUTE_TYPE = 2005

    # Template syntax errors (3000-3999)
    UNEXPECTED_CHARACTER = 3001
    UNEXPECTED_TOKEN = 3002
    UNEXPECTED_EOF = 3003
    UNMATCHED_QUOTE = 3004
    MISSING_OTHER_CASE = 3005
    INVALID_PLURAL_CASE = 3006
    DUPLICATE_CASE = 3007
    NESTING_DEPTH_EXCEEDED = 3008

    # Placeholder inference errors (4000-4999)
    UNKNOWN_PLACEHOLDER = 4001
    CONFLICTING_PLACEHOLDER_ROLE = 4002
    INVALID_PLACEHOLDER_TYPE = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One error, as data.

    Built by :class:`~arblexengine.diagnostics.templates.ErrorTemplate` and
    rendered by :class:`~arblexengine.diagnostics.formatter.DiagnosticFormatter`.

    Attributes:
        code: Error kind
        message: Text shown to the developer
        hint: How to fix the problem, if there is a standard fix
        help_url: Link to the ARB format description, where relevant
        location: File path (or "file:resource" pair) the error refers to
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Render with the default (Rust-style) formatter.

        Example output:
            error[TEMPLATE_NOT_FOUND]: The template arb file l10n/app_en.arb does not exist.
              --> l10n/app_en.arb
              = help: Check the arb directory and template file name
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
