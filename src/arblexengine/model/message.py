"""Cross-locale model of one resource.

A :class:`Message` joins the template bundle's definition of a resource
(value, description, placeholder metadata) with every locale's translation
of it, parses all translations, and settles each placeholder's type from
how the translations use it:

    "itemCount": "{count, plural, =0{No items} other{{count} items}}",
    "@itemCount": {"placeholders": {"count": {}}}

Here ``count`` selects a plural, so its type is inferred as ``num``.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from arblexengine.diagnostics import (
    AttributeTypeError,
    ConflictingPlaceholderRoleError,
    ErrorTemplate,
    InvalidPlaceholderTypeError,
    InvalidValueTypeError,
    MalformedMapError,
    MissingResourceAttributeError,
    MissingValueError,
    UnknownPlaceholderError,
)
from arblexengine.enums import PLURAL_PLACEHOLDER_TYPES, PlaceholderRole, PlaceholderType
from arblexengine.locale_utils import LocaleKey
from arblexengine.model.placeholder import Placeholder
from arblexengine.resources import (
    PlaceholderName,
    ResourceBundle,
    ResourceBundleCollection,
    ResourceId,
)
from arblexengine.syntax import MessageParser, Pattern, TemplateParser, iter_selector_references

__all__ = ["Message"]

logger = logging.getLogger(__name__)


def _value(bundle: ResourceBundle, resource_id: ResourceId) -> str:
    value = bundle.resources.get(resource_id)
    if value is None:
        raise MissingValueError(ErrorTemplate.missing_value(resource_id))
    if not isinstance(value, str):
        raise InvalidValueTypeError(ErrorTemplate.invalid_value_type(resource_id, str(bundle.path)))
    return value


def _attributes(
    bundle: ResourceBundle, resource_id: ResourceId, is_resource_attribute_required: bool
) -> Mapping[str, object] | None:
    attributes = bundle.attributes_for(resource_id)
    if attributes is None:
        if is_resource_attribute_required:
            raise MissingResourceAttributeError(
                ErrorTemplate.missing_resource_attribute(resource_id)
            )
        return None
    if not isinstance(attributes, Mapping):
        raise MalformedMapError(ErrorTemplate.malformed_resource_attribute(resource_id))
    return attributes


def _description(attributes: Mapping[str, object] | None, resource_id: ResourceId) -> str | None:
    if attributes is None:
        return None
    value = attributes.get("description")
    if value is None:
        return None
    if not isinstance(value, str):
        raise AttributeTypeError(ErrorTemplate.invalid_description(resource_id))
    return value


def _placeholders(
    attributes: Mapping[str, object] | None, resource_id: ResourceId
) -> dict[PlaceholderName, Placeholder]:
    if attributes is None:
        return {}
    declared = attributes.get("placeholders")
    if declared is None:
        return {}
    if not isinstance(declared, Mapping):
        raise MalformedMapError(ErrorTemplate.malformed_placeholders(resource_id))

    placeholders: dict[PlaceholderName, Placeholder] = {}
    for name, placeholder_attributes in declared.items():
        if not isinstance(placeholder_attributes, Mapping):
            raise MalformedMapError(ErrorTemplate.malformed_placeholder(resource_id, name))
        placeholders[name] = Placeholder(resource_id, name, placeholder_attributes)
    return placeholders


class Message:
    """All translations of one resource id, parsed and type-checked.

    Construction runs the whole validation pipeline and raises at the first
    problem. Afterwards every placeholder has a settled ``type``.

    Attributes:
        resource_id: Resource id shared by all bundles
        value: Template-locale message text
        description: Description from the template's ``@id`` block
        placeholders: Declared placeholders by name, in declaration order
        messages: Raw translation per locale (None where untranslated)
        parsed_messages: Parsed translation per locale (None where untranslated)
        use_escaping: Whether single quotes were treated as escapes

    Raises:
        MissingValueError: Template bundle does not define resource_id
        InvalidValueTypeError: A translation is not a string
        MissingResourceAttributeError: ``@id`` absent while required
        MalformedMapError: ``@id``, ``placeholders`` or a placeholder entry
            is not a map
        AttributeTypeError: Malformed description or placeholder attribute
        TemplateSyntaxError: A translation does not parse
        UnknownPlaceholderError: A plural/select selector is not declared
        ConflictingPlaceholderRoleError: A placeholder is both plural and
            select selector
        InvalidPlaceholderTypeError: Declared type conflicts with the role
    """

    __slots__ = (
        "description",
        "messages",
        "parsed_messages",
        "placeholders",
        "resource_id",
        "use_escaping",
        "value",
    )

    def __init__(
        self,
        template_bundle: ResourceBundle,
        bundles: ResourceBundleCollection,
        resource_id: ResourceId,
        is_resource_attribute_required: bool,
        *,
        use_escaping: bool = False,
        parser: TemplateParser | None = None,
    ) -> None:
        if not resource_id:
            msg = "resource_id must be a non-empty string"
            raise ValueError(msg)

        self.resource_id = resource_id
        self.use_escaping = use_escaping
        self.value = _value(template_bundle, resource_id)
        attributes = _attributes(template_bundle, resource_id, is_resource_attribute_required)
        self.description = _description(attributes, resource_id)
        self.placeholders = _placeholders(attributes, resource_id)
        self.messages: dict[LocaleKey, str | None] = {}
        self.parsed_messages: dict[LocaleKey, Pattern | None] = {}

        parser = parser if parser is not None else MessageParser()
        filenames: dict[LocaleKey, str] = {}
        for bundle in bundles:
            filenames[bundle.locale] = bundle.filename
            translation = bundle.translation_for(resource_id)
            self.messages[bundle.locale] = translation
            self.parsed_messages[bundle.locale] = (
                None
                if translation is None
                else parser.parse(
                    resource_id, bundle.filename, translation, use_escaping=use_escaping
                )
            )

        self._mark_selector_roles(filenames)
        self._settle_placeholder_types()
        logger.debug(
            "Built message %s: %d placeholders, %d/%d locales translated",
            resource_id,
            len(self.placeholders),
            sum(1 for pattern in self.parsed_messages.values() if pattern is not None),
            len(self.parsed_messages),
        )

    def __repr__(self) -> str:
        return f"Message({self.resource_id!r}, placeholders={list(self.placeholders)!r})"

    def _mark_selector_roles(self, filenames: Mapping[LocaleKey, str]) -> None:
        """Flag placeholders used as plural or select selectors in any locale."""
        for locale, pattern in self.parsed_messages.items():
            if pattern is None:
                continue
            for role, selector in iter_selector_references(pattern):
                placeholder = self.placeholders.get(selector.name)
                if placeholder is None:
                    source = self.messages[locale]
                    assert source is not None  # parsed implies present
                    raise UnknownPlaceholderError(
                        ErrorTemplate.unknown_placeholder(role),
                        filenames[locale],
                        self.resource_id,
                        source,
                        selector.span.start,
                    )
                if role is PlaceholderRole.PLURAL:
                    placeholder.is_plural = True
                else:
                    placeholder.is_select = True

    def _settle_placeholder_types(self) -> None:
        for placeholder in self.placeholders.values():
            if placeholder.is_plural and placeholder.is_select:
                raise ConflictingPlaceholderRoleError(
                    ErrorTemplate.conflicting_placeholder_role(self.resource_id, placeholder.name)
                )
            if placeholder.is_plural:
                if placeholder.type is None:
                    placeholder.type = PlaceholderType.NUM
                elif placeholder.type not in PLURAL_PLACEHOLDER_TYPES:
                    raise InvalidPlaceholderTypeError(
                        ErrorTemplate.invalid_plural_type(self.resource_id, placeholder.name)
                    )
            elif placeholder.is_select:
                if placeholder.type is None:
                    placeholder.type = PlaceholderType.STRING
                elif placeholder.type != PlaceholderType.STRING:
                    raise InvalidPlaceholderTypeError(
                        ErrorTemplate.invalid_select_type(self.resource_id, placeholder.name)
                    )
            elif placeholder.type is None:
                placeholder.type = PlaceholderType.OBJECT

    @property
    def placeholders_require_formatting(self) -> bool:
        return any(placeholder.requires_formatting for placeholder in self.placeholders.values())

    @property
    def untranslated_locales(self) -> tuple[LocaleKey, ...]:
        """Locales whose bundle lacks this resource."""
        return tuple(locale for locale, text in self.messages.items() if text is None)
