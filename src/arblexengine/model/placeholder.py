"""Placeholder metadata declared in a template resource's ``@id`` block.

Each entry of ``@id.placeholders`` describes one message argument:

    "@helloWorldOn": {
      "placeholders": {
        "date": {"type": "DateTime", "format": "yMMMMd"},
        "count": {"type": "double", "format": "compactCurrency",
                  "optionalParameters": {"decimalDigits": 2}}
      }
    }

An empty map declares an argument whose type is decided later by how
messages use it.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from arblexengine.constants import (
    NUMBER_FORMATS_WITH_NAMED_PARAMETERS,
    VALID_DATE_FORMATS,
    VALID_NUMBER_FORMATS,
)
from arblexengine.diagnostics import AttributeTypeError, ErrorTemplate, MalformedMapError
from arblexengine.enums import NUMERIC_PLACEHOLDER_TYPES, PlaceholderType

__all__ = ["OptionalParameter", "Placeholder"]


@dataclass(frozen=True, slots=True)
class OptionalParameter:
    """Named argument passed to a number formatter constructor.

    Example:
        "optionalParameters": {"decimalDigits": 2} → OptionalParameter("decimalDigits", 2)
    """

    name: str
    value: object


def _string_attribute(
    resource_id: str, name: str, attributes: Mapping[str, object], attribute: str
) -> str | None:
    value = attributes.get(attribute)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise AttributeTypeError(
            ErrorTemplate.invalid_string_attribute(resource_id, name, attribute)
        )
    return value


def _boolean_attribute(
    resource_id: str, name: str, attributes: Mapping[str, object], attribute: str
) -> bool | None:
    # Only the strings "true"/"false" are accepted; JSON booleans are not.
    value = attributes.get(attribute)
    if value is None:
        return None
    if not isinstance(value, str) or value not in ("true", "false"):
        raise AttributeTypeError(
            ErrorTemplate.invalid_boolean_attribute(resource_id, name, attribute)
        )
    return value == "true"


def _optional_parameters(
    resource_id: str, name: str, attributes: Mapping[str, object]
) -> tuple[OptionalParameter, ...]:
    value = attributes.get("optionalParameters")
    if value is None:
        return ()
    if not isinstance(value, Mapping):
        raise MalformedMapError(ErrorTemplate.malformed_optional_parameters(resource_id, name))

    parameters: list[OptionalParameter] = []
    for parameter_name, parameter_value in value.items():
        if parameter_value is None:
            raise MalformedMapError(
                ErrorTemplate.null_optional_parameter(resource_id, name, parameter_name)
            )
        parameters.append(OptionalParameter(parameter_name, parameter_value))
    return tuple(parameters)


class Placeholder:
    """One message argument declared by the template bundle.

    Attribute values are validated at construction. ``type``,
    ``is_plural`` and ``is_select`` stay mutable: they are settled by
    :class:`~arblexengine.model.message.Message` once every locale's
    message has been parsed.

    Attributes:
        resource_id: Resource the placeholder belongs to
        name: Placeholder name as used in ``{name}``
        example: Example value for translators
        type: Declared or inferred type name ("num", "String", "DateTime", ...)
        format: Formatter constructor name ("yMMMMd", "compactCurrency", ...)
        is_custom_date_format: Whether format is a raw date pattern
        optional_parameters: Named formatter arguments, in declaration order
        is_plural: Used as a plural selector in some locale
        is_select: Used as a select selector in some locale

    Raises:
        AttributeTypeError: If example, type or format is not a non-empty
            string, or isCustomDateFormat is not "true" or "false"
        MalformedMapError: If optionalParameters is not a map, or one of its
            values is null
    """

    __slots__ = (
        "example",
        "format",
        "is_custom_date_format",
        "is_plural",
        "is_select",
        "name",
        "optional_parameters",
        "resource_id",
        "type",
    )

    def __init__(self, resource_id: str, name: str, attributes: Mapping[str, object]) -> None:
        self.resource_id = resource_id
        self.name = name
        self.example = _string_attribute(resource_id, name, attributes, "example")
        self.type: str | None = _string_attribute(resource_id, name, attributes, "type")
        self.format = _string_attribute(resource_id, name, attributes, "format")
        self.optional_parameters = _optional_parameters(resource_id, name, attributes)
        self.is_custom_date_format = _boolean_attribute(
            resource_id, name, attributes, "isCustomDateFormat"
        )
        self.is_plural = False
        self.is_select = False

    def __repr__(self) -> str:
        return (
            f"Placeholder({self.resource_id!r}, {self.name!r}, type={self.type!r}, "
            f"format={self.format!r})"
        )

    @property
    def requires_formatting(self) -> bool:
        return self.requires_date_formatting or self.requires_num_formatting

    @property
    def requires_date_formatting(self) -> bool:
        return self.type == PlaceholderType.DATETIME

    @property
    def requires_num_formatting(self) -> bool:
        return self.type in NUMERIC_PLACEHOLDER_TYPES and self.format is not None

    @property
    def has_valid_number_format(self) -> bool:
        return self.format in VALID_NUMBER_FORMATS

    @property
    def has_number_format_with_parameters(self) -> bool:
        """Whether the number formatter takes named (not positional) arguments."""
        return self.format in NUMBER_FORMATS_WITH_NAMED_PARAMETERS

    @property
    def has_valid_date_format(self) -> bool:
        return self.format in VALID_DATE_FORMATS
