"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Each method documents one error case and returns its Diagnostic.
    """

    _ARB_SPEC_URL = (
        "https://github.com/google/app-resource-bundle/wiki/"
        "ApplicationResourceBundleSpecification"
    )

    # ------------------------------------------------------------------
    # Resource files
    # ------------------------------------------------------------------

    @staticmethod
    def malformed_resource_file(path: str, detail: str) -> Diagnostic:
        """ARB file could not be decoded as a JSON object.

        Args:
            path: Path of the offending file
            detail: Decoder error text
        """
        msg = f"The arb file {path} has the following formatting issue: \n{detail}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_RESOURCE_FILE,
            message=msg,
            hint="An arb file must be a UTF-8 encoded JSON object",
            help_url=ErrorTemplate._ARB_SPEC_URL,
            location=path,
        )

    @staticmethod
    def invalid_locale(value: object, path: str) -> Diagnostic:
        """Declared @@locale is not a string or not a well-formed locale tag."""
        msg = f"The @@locale value {value!r} in {path} is not a valid locale."
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a tag such as 'en', 'en_US' or 'zh_Hans_CN'",
            location=path,
        )

    @staticmethod
    def undetermined_locale(path: str) -> Diagnostic:
        msg = (
            "The following .arb file's locale could not be determined: \n"
            f"{path} \n"
            "Make sure that the locale is specified in the file's '@@locale' "
            "property or as part of the filename (e.g. file_en.arb)"
        )
        return Diagnostic(
            code=DiagnosticCode.UNDETERMINED_LOCALE,
            message=msg,
            location=path,
        )

    @staticmethod
    def locale_mismatch(declared: str, from_filename: str, path: str) -> Diagnostic:
        """@@locale and the file name suffix name different locales.

        Args:
            declared: Raw @@locale value
            from_filename: Locale parsed from the file name
            path: Path of the offending file
        """
        msg = (
            "The locale specified in @@locale and the arb filename do not match. \n"
            "Please make sure that they match, since this prevents any confusion \n"
            "with which locale to use. Otherwise, specify the locale in either the \n"
            "filename of the @@locale key only.\n"
            f"Current @@locale value: {declared}\n"
            f"Current filename extension: {from_filename}"
        )
        return Diagnostic(
            code=DiagnosticCode.LOCALE_MISMATCH,
            message=msg,
            location=path,
        )

    @staticmethod
    def template_not_found(path: str) -> Diagnostic:
        msg = f"The template arb file {path} does not exist."
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_NOT_FOUND,
            message=msg,
            hint="Check the arb directory and template file name",
            location=path,
        )

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    @staticmethod
    def duplicate_locale(locale: str, path: str | None = None) -> Diagnostic:
        msg = f"Multiple arb files with the same '{locale}' locale detected."
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LOCALE,
            message=msg,
            hint="Ensure that there is exactly one arb file for each locale.",
            location=path,
        )

    @staticmethod
    def missing_fallback(language: str, locales: Iterable[str]) -> Diagnostic:
        """Locales for a language exist but the bare language locale does not.

        Args:
            language: Language subtag lacking a fallback file
            locales: Every locale found for that language
        """
        listed = ", ".join(locales)
        msg = (
            f"Arb file for a fallback, {language}, does not exist, even though \n"
            f"the following locale(s) exist: [{listed}]. \n"
            "When locales specify a script code or country code, a \n"
            "base locale (without the script code or country code) should \n"
            "exist as the fallback."
        )
        return Diagnostic(
            code=DiagnosticCode.MISSING_FALLBACK,
            message=msg,
            hint=f"Please create a {{fileName}}_{language}.arb file.",
        )

    # ------------------------------------------------------------------
    # Messages and attributes
    # ------------------------------------------------------------------

    @staticmethod
    def missing_value(resource_id: str) -> Diagnostic:
        msg = f'A value for resource "{resource_id}" was not found.'
        return Diagnostic(code=DiagnosticCode.MISSING_VALUE, message=msg)

    @staticmethod
    def invalid_value_type(resource_id: str, location: str | None = None) -> Diagnostic:
        msg = f'The value of "{resource_id}" is not a string.'
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE_TYPE,
            message=msg,
            location=location,
        )

    @staticmethod
    def missing_resource_attribute(resource_id: str) -> Diagnostic:
        msg = f'Resource attribute "@{resource_id}" was not found.'
        return Diagnostic(
            code=DiagnosticCode.MISSING_RESOURCE_ATTRIBUTE,
            message=msg,
            hint="Please ensure that each resource has a corresponding @resource.",
            help_url=ErrorTemplate._ARB_SPEC_URL,
        )

    @staticmethod
    def malformed_resource_attribute(resource_id: str) -> Diagnostic:
        msg = (
            f'The resource attribute "@{resource_id}" is not a properly formatted Map. '
            "Ensure that it is a map with keys that are strings."
        )
        return Diagnostic(code=DiagnosticCode.MALFORMED_MAP, message=msg)

    @staticmethod
    def malformed_placeholders(resource_id: str) -> Diagnostic:
        msg = (
            f'The "placeholders" attribute for message {resource_id}, is not '
            "properly formatted. Ensure that it is a map with string valued keys."
        )
        return Diagnostic(code=DiagnosticCode.MALFORMED_MAP, message=msg)

    @staticmethod
    def malformed_placeholder(resource_id: str, name: str) -> Diagnostic:
        msg = (
            f'The value of the "{name}" placeholder attribute for message '
            f'"{resource_id}", is not properly formatted. Ensure that it is a map '
            "with string valued keys."
        )
        return Diagnostic(code=DiagnosticCode.MALFORMED_MAP, message=msg)

    @staticmethod
    def malformed_optional_parameters(resource_id: str, name: str) -> Diagnostic:
        msg = (
            f'The "optionalParameters" value of the "{name}" placeholder in message '
            f"{resource_id} is not a properly formatted Map. Ensure that it is a map "
            "with keys that are strings."
        )
        return Diagnostic(code=DiagnosticCode.MALFORMED_MAP, message=msg)

    @staticmethod
    def null_optional_parameter(resource_id: str, name: str, parameter: str) -> Diagnostic:
        msg = (
            f'The optional parameter "{parameter}" of the "{name}" placeholder in '
            f"message {resource_id} has no value."
        )
        return Diagnostic(code=DiagnosticCode.MALFORMED_MAP, message=msg)

    @staticmethod
    def invalid_description(resource_id: str) -> Diagnostic:
        msg = f'The description for "@{resource_id}" is not a properly formatted String.'
        return Diagnostic(code=DiagnosticCode.ATTRIBUTE_TYPE, message=msg)

    @staticmethod
    def invalid_string_attribute(resource_id: str, name: str, attribute: str) -> Diagnostic:
        msg = (
            f'The "{attribute}" value of the "{name}" placeholder in message {resource_id} '
            "must be a non-empty string."
        )
        return Diagnostic(code=DiagnosticCode.ATTRIBUTE_TYPE, message=msg)

    @staticmethod
    def invalid_boolean_attribute(resource_id: str, name: str, attribute: str) -> Diagnostic:
        msg = (
            f'The "{attribute}" value of the "{name}" placeholder in message {resource_id} '
            "must be a boolean value."
        )
        return Diagnostic(
            code=DiagnosticCode.ATTRIBUTE_TYPE,
            message=msg,
            hint='Use the string "true" or "false"',
        )

    # ------------------------------------------------------------------
    # Template syntax
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_character(found: str) -> Diagnostic:
        msg = f"ICU Syntax Error: Unexpected character {found!r}."
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_CHARACTER, message=msg)

    @staticmethod
    def unexpected_token(expected: str, found: str) -> Diagnostic:
        msg = f'ICU Syntax Error: Expected "{expected}" but found {found!r}.'
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_TOKEN, message=msg)

    @staticmethod
    def unknown_expression_kind(found: str) -> Diagnostic:
        msg = f'ICU Syntax Error: Expected "plural" or "select" but found "{found}".'
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_TOKEN, message=msg)

    @staticmethod
    def unexpected_eof(expected: str) -> Diagnostic:
        msg = f'ICU Syntax Error: Expected "{expected}" but found no tokens.'
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_EOF, message=msg)

    @staticmethod
    def unmatched_quote() -> Diagnostic:
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_QUOTE,
            message="ICU Lexing Error: Unmatched single quotes.",
            hint="Escape a literal single quote by doubling it: ''",
        )

    @staticmethod
    def missing_other_case(kind: str) -> Diagnostic:
        msg = f'ICU Syntax Error: {kind.capitalize()} expressions must have an "other" case.'
        return Diagnostic(code=DiagnosticCode.MISSING_OTHER_CASE, message=msg)

    @staticmethod
    def invalid_plural_case(key: str) -> Diagnostic:
        msg = f'ICU Syntax Error: Plural expressions do not support the case "{key}".'
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLURAL_CASE,
            message=msg,
            hint="Use =N or one of zero, one, two, few, many, other",
        )

    @staticmethod
    def duplicate_case(key: str) -> Diagnostic:
        msg = f'ICU Syntax Error: The case "{key}" appears more than once.'
        return Diagnostic(code=DiagnosticCode.DUPLICATE_CASE, message=msg)

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        msg = f"ICU Syntax Error: Expressions are nested more than {max_depth} levels deep."
        return Diagnostic(code=DiagnosticCode.NESTING_DEPTH_EXCEEDED, message=msg)

    # ------------------------------------------------------------------
    # Placeholder inference
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_placeholder(role: str) -> Diagnostic:
        """Plural or select selector names an undeclared placeholder.

        Args:
            role: "plural" or "select"
        """
        msg = f"Make sure that the specified {role} placeholder is defined in your arb file."
        return Diagnostic(code=DiagnosticCode.UNKNOWN_PLACEHOLDER, message=msg)

    @staticmethod
    def conflicting_placeholder_role(resource_id: str, name: str) -> Diagnostic:
        return Diagnostic(
            code=DiagnosticCode.CONFLICTING_PLACEHOLDER_ROLE,
            message="Placeholder is used as both a plural and select in certain languages.",
            location=f"{resource_id}:{name}",
        )

    @staticmethod
    def invalid_plural_type(resource_id: str, name: str) -> Diagnostic:
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLACEHOLDER_TYPE,
            message="Placeholders used in plurals must be of type 'num' or 'int'",
            location=f"{resource_id}:{name}",
        )

    @staticmethod
    def invalid_select_type(resource_id: str, name: str) -> Diagnostic:
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLACEHOLDER_TYPE,
            message="Placeholders used in selects must be of type 'String'",
            location=f"{resource_id}:{name}",
        )
