"""ARB exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust-inspired error messages.
All exceptions accept a Diagnostic (or a plain message) and keep it for
programmatic inspection.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ArbError(Exception):
    """Base exception for all ARB resource errors.

    Every error is fatal to the compilation that raised it; none are
    recovered internally.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ArbError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ArbPositionError(ArbError):
    """Error located at a character offset inside one message string.

    Renders as the error text, then the offending message prefixed by
    ``[filename:resource_id]``, then a caret under the offending character:

        ICU Syntax Error: Expected "}" but found no tokens.
        [app_en.arb:title] {count, plural, other{items}
                                                       ^

    Attributes:
        error: Error text without location
        filename: Name of the ARB file holding the message
        resource_id: Resource id of the message
        message_string: Raw message text
        offset: Zero-based character offset of the error in message_string
    """

    def __init__(
        self,
        error: str | Diagnostic,
        filename: str,
        resource_id: str,
        message_string: str,
        offset: int,
    ) -> None:
        self.error = error.message if isinstance(error, Diagnostic) else error
        self.filename = filename
        self.resource_id = resource_id
        self.message_string = message_string
        self.offset = offset
        super().__init__(error)
        # Replace the diagnostic rendering with the caret rendering
        self.args = (self.render(),)

    def render(self) -> str:
        indent = " " * (4 + len(self.filename) + len(self.resource_id) + self.offset)
        return (
            f"{self.error}\n"
            f"[{self.filename}:{self.resource_id}] {self.message_string}\n"
            f"{indent}^"
        )


# ----------------------------------------------------------------------
# Resource files
# ----------------------------------------------------------------------


class MalformedResourceFileError(ArbError):
    """ARB file is not valid UTF-8 JSON, or its top level is not an object."""


class InvalidLocaleError(ArbError):
    """@@locale is not a string or not a well-formed locale tag."""


class UndeterminedLocaleError(ArbError):
    """Neither @@locale nor the file name yields a locale."""


class LocaleMismatchError(ArbError):
    """@@locale and the file name suffix disagree."""


class MissingTemplateError(ArbError):
    """The configured template ARB file does not exist."""


# ----------------------------------------------------------------------
# Collections
# ----------------------------------------------------------------------


class DuplicateLocaleError(ArbError):
    """Two ARB files resolve to the same exact locale."""


class MissingFallbackError(ArbError):
    """A script or country locale exists without its bare-language fallback.

    Example:
        app_en_GB.arb present, app_en.arb absent.
    """


# ----------------------------------------------------------------------
# Messages and attributes
# ----------------------------------------------------------------------


class MissingValueError(ArbError):
    """Template bundle lacks a value for a resource id."""


class InvalidValueTypeError(ArbError):
    """A resource value is present but is not a string."""


class MissingResourceAttributeError(ArbError):
    """A required @id attribute block is absent."""


class MalformedMapError(ArbError):
    """An attribute block, placeholder map or optionalParameters is not an object."""


class AttributeTypeError(ArbError):
    """A metadata attribute has the wrong JSON type or is empty.

    Examples: a numeric description, an empty placeholder "type", or an
    isCustomDateFormat other than "true"/"false".
    """


# ----------------------------------------------------------------------
# Templates and placeholders
# ----------------------------------------------------------------------


class TemplateSyntaxError(ArbPositionError):
    """Message text could not be parsed."""


class UnknownPlaceholderError(ArbPositionError):
    """A plural or select selector names a placeholder missing from @id."""


class ConflictingPlaceholderRoleError(ArbError):
    """One placeholder selects a plural in some locale and a select in another."""


class InvalidPlaceholderTypeError(ArbError):
    """Declared type is incompatible with the placeholder's plural/select role."""
