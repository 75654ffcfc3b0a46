"""Diagnostic system for ARB resource errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArbError,
    ArbPositionError,
    AttributeTypeError,
    ConflictingPlaceholderRoleError,
    DuplicateLocaleError,
    InvalidLocaleError,
    InvalidPlaceholderTypeError,
    InvalidValueTypeError,
    LocaleMismatchError,
    MalformedMapError,
    MalformedResourceFileError,
    MissingFallbackError,
    MissingResourceAttributeError,
    MissingTemplateError,
    MissingValueError,
    TemplateSyntaxError,
    UndeterminedLocaleError,
    UnknownPlaceholderError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArbError",
    "ArbPositionError",
    "AttributeTypeError",
    "ConflictingPlaceholderRoleError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateLocaleError",
    "ErrorTemplate",
    "InvalidLocaleError",
    "InvalidPlaceholderTypeError",
    "InvalidValueTypeError",
    "LocaleMismatchError",
    "MalformedMapError",
    "MalformedResourceFileError",
    "MissingFallbackError",
    "MissingResourceAttributeError",
    "MissingTemplateError",
    "MissingValueError",
    "OutputFormat",
    "TemplateSyntaxError",
    "UndeterminedLocaleError",
    "UnknownPlaceholderError",
]
