"""Tests for Message construction and placeholder type inference."""

from __future__ import annotations

import json

import pytest

from arblexengine.diagnostics import (
    AttributeTypeError,
    ConflictingPlaceholderRoleError,
    DiagnosticCode,
    InvalidPlaceholderTypeError,
    InvalidValueTypeError,
    MalformedMapError,
    MissingResourceAttributeError,
    MissingValueError,
    TemplateSyntaxError,
    UnknownPlaceholderError,
)
from arblexengine.locale_utils import LocaleKey
from arblexengine.model import Message
from arblexengine.resources import ResourceBundle, ResourceBundleCollection
from arblexengine.syntax import Pattern, Span, TextElement

EN = LocaleKey("en")
ES = LocaleKey("es")


def _build(
    template: dict[str, object],
    *others: tuple[str, dict[str, object]],
    resource_id: str = "greeting",
    required: bool = False,
    **kwargs: object,
) -> Message:
    template_bundle = ResourceBundle.from_source(json.dumps(template), "app_en.arb")
    bundles = [template_bundle] + [
        ResourceBundle.from_source(json.dumps(contents), filename) for filename, contents in others
    ]
    return Message(
        template_bundle,
        ResourceBundleCollection(bundles),
        resource_id,
        required,
        **kwargs,  # type: ignore[arg-type]
    )


class TestMessageBasics:
    """Values, descriptions and per-locale translations."""

    def test_value_and_description(self) -> None:
        """Template value and description are read from the template bundle."""
        message = _build({"greeting": "Hello", "@greeting": {"description": "Says hello"}})
        assert message.resource_id == "greeting"
        assert message.value == "Hello"
        assert message.description == "Says hello"
        assert message.placeholders == {}

    def test_translations_per_locale(self) -> None:
        """Every bundle contributes its text and parsed pattern."""
        message = _build({"greeting": "Hello"}, ("app_es.arb", {"greeting": "Hola"}))
        assert message.messages == {EN: "Hello", ES: "Hola"}
        assert message.parsed_messages[ES] == Pattern((TextElement("Hola", Span(0, 4)),), Span(0, 4))

    def test_untranslated_locales(self) -> None:
        """Bundles lacking the resource are recorded as untranslated."""
        message = _build({"greeting": "Hello"}, ("app_es.arb", {"other": "Otro"}))
        assert message.messages[ES] is None
        assert message.parsed_messages[ES] is None
        assert message.untranslated_locales == (ES,)

    def test_attributes_optional_by_default(self) -> None:
        """Without @greeting there is no description and no placeholder."""
        message = _build({"greeting": "Hello"})
        assert message.description is None
        assert message.placeholders == {}

    def test_required_attributes(self) -> None:
        """A missing @greeting fails when attributes are required."""
        with pytest.raises(MissingResourceAttributeError, match='"@greeting" was not found'):
            _build({"greeting": "Hello"}, required=True)

    def test_missing_value(self) -> None:
        """The template must define the resource."""
        with pytest.raises(MissingValueError):
            _build({"other": "x"})

    def test_template_value_not_string(self) -> None:
        """A non-string template value is rejected."""
        with pytest.raises(InvalidValueTypeError):
            _build({"greeting": ["Hello"]})

    def test_translation_not_string(self) -> None:
        """A non-string translation is rejected."""
        with pytest.raises(InvalidValueTypeError):
            _build({"greeting": "Hello"}, ("app_es.arb", {"greeting": 3}))

    def test_empty_resource_id(self) -> None:
        """An empty resource id is a programming error."""
        with pytest.raises(ValueError, match="resource_id"):
            _build({"": "x"}, resource_id="")

    def test_repr(self) -> None:
        """repr lists placeholder names."""
        message = _build(
            {"greeting": "Hi {name}", "@greeting": {"placeholders": {"name": {}}}}
        )
        assert repr(message) == "Message('greeting', placeholders=['name'])"


class TestAttributeValidation:
    """Malformed @-attribute blocks."""

    @pytest.mark.parametrize("attributes", ["text", 3, ["x"]])
    def test_attributes_not_map(self, attributes: object) -> None:
        """@greeting must be a map."""
        with pytest.raises(MalformedMapError, match="is not a properly formatted Map"):
            _build({"greeting": "Hello", "@greeting": attributes})

    def test_placeholders_not_map(self) -> None:
        """placeholders must be a map."""
        with pytest.raises(MalformedMapError, match='"placeholders" attribute'):
            _build({"greeting": "Hello", "@greeting": {"placeholders": ["name"]}})

    def test_placeholder_entry_not_map(self) -> None:
        """Each placeholder entry must be a map."""
        with pytest.raises(MalformedMapError, match='"name" placeholder attribute'):
            _build({"greeting": "Hi {name}", "@greeting": {"placeholders": {"name": "String"}}})

    def test_description_not_string(self) -> None:
        """description must be a string."""
        with pytest.raises(AttributeTypeError, match="description"):
            _build({"greeting": "Hello", "@greeting": {"description": 5}})

    def test_optional_parameters_string(self) -> None:
        """optionalParameters given as a string is malformed."""
        with pytest.raises(MalformedMapError):
            _build(
                {
                    "greeting": "{amount}",
                    "@greeting": {
                        "placeholders": {
                            "amount": {
                                "type": "double",
                                "format": "currency",
                                "optionalParameters": "decimalDigits",
                            }
                        }
                    },
                }
            )


class TestTypeInference:
    """Settling placeholder types from selector roles."""

    def test_defaults_by_role(self) -> None:
        """Plural selectors become num, select selectors String, others Object."""
        message = _build(
            {
                "greeting": (
                    "{name}: {count, plural, one{one} other{{count}}} "
                    "{gender, select, other{x}}"
                ),
                "@greeting": {"placeholders": {"name": {}, "count": {}, "gender": {}}},
            }
        )
        placeholders = message.placeholders
        assert placeholders["name"].type == "Object"
        assert placeholders["count"].type == "num"
        assert placeholders["count"].is_plural
        assert placeholders["gender"].type == "String"
        assert placeholders["gender"].is_select

    def test_declared_int_kept_for_plural(self) -> None:
        """A declared int plural selector keeps its type."""
        message = _build(
            {
                "greeting": "{n, plural, other{x}}",
                "@greeting": {"placeholders": {"n": {"type": "int"}}},
            }
        )
        assert message.placeholders["n"].type == "int"

    def test_declared_type_kept_for_plain_placeholder(self) -> None:
        """Plain placeholders keep whatever type is declared."""
        message = _build(
            {
                "greeting": "{when}",
                "@greeting": {"placeholders": {"when": {"type": "DateTime", "format": "yMd"}}},
            }
        )
        assert message.placeholders["when"].type == "DateTime"
        assert message.placeholders_require_formatting

    def test_role_from_other_locale(self) -> None:
        """A role used only in a translation still settles the type."""
        message = _build(
            {"greeting": "{count} items", "@greeting": {"placeholders": {"count": {}}}},
            ("app_es.arb", {"greeting": "{count, plural, one{una cosa} other{{count} cosas}}"}),
        )
        assert message.placeholders["count"].type == "num"
        assert not message.placeholders_require_formatting

    def test_plural_with_string_type(self) -> None:
        """A plural selector declared as String is rejected."""
        with pytest.raises(InvalidPlaceholderTypeError, match="'num' or 'int'"):
            _build(
                {
                    "greeting": "{n, plural, other{x}}",
                    "@greeting": {"placeholders": {"n": {"type": "String"}}},
                }
            )

    @pytest.mark.parametrize("declared", ["int", "num", "Object", "DateTime"])
    def test_select_with_non_string_type(self, declared: str) -> None:
        """A select selector must be a String."""
        with pytest.raises(InvalidPlaceholderTypeError, match="'String'"):
            _build(
                {
                    "greeting": "{g, select, other{x}}",
                    "@greeting": {"placeholders": {"g": {"type": declared}}},
                }
            )

    def test_conflicting_roles_across_locales(self) -> None:
        """A plural in one locale and a select in another conflict."""
        with pytest.raises(ConflictingPlaceholderRoleError) as exc_info:
            _build(
                {
                    "greeting": "{x, plural, other{many}}",
                    "@greeting": {"placeholders": {"x": {}}},
                },
                ("app_es.arb", {"greeting": "{x, select, other{varios}}"}),
            )
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.CONFLICTING_PLACEHOLDER_ROLE
        assert diagnostic.location == "greeting:x"


class TestTemplateErrors:
    """Positional errors from parsing and selector resolution."""

    def test_unknown_selector(self) -> None:
        """An undeclared selector is reported at its name."""
        source = "You have {count, plural, other{{count} items}}"
        with pytest.raises(UnknownPlaceholderError) as exc_info:
            _build({"greeting": source})
        error = exc_info.value
        assert error.filename == "app_en.arb"
        assert error.offset == source.index("count")
        _, message_line, caret_line = str(error).split("\n")
        assert message_line == f"[app_en.arb:greeting] {source}"
        assert message_line[caret_line.index("^")] == "c"

    def test_unknown_selector_in_translation(self) -> None:
        """The translation's file name is used in the error."""
        with pytest.raises(UnknownPlaceholderError) as exc_info:
            _build(
                {"greeting": "Hi"},
                ("app_es.arb", {"greeting": "{g, select, other{Hola}}"}),
            )
        assert exc_info.value.filename == "app_es.arb"
        assert str(exc_info.value).startswith(
            "Make sure that the specified select placeholder is defined"
        )

    def test_plain_undeclared_placeholder_allowed(self) -> None:
        """Simple references need no declaration."""
        message = _build({"greeting": "Hi {name}"})
        assert message.placeholders == {}

    def test_syntax_error_in_translation(self) -> None:
        """Syntax errors name the translation file."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            _build({"greeting": "Hi"}, ("app_es.arb", {"greeting": "Hola {"}))
        assert exc_info.value.filename == "app_es.arb"
        assert exc_info.value.offset == 6

    def test_escaping_flag(self) -> None:
        """Quotes are escapes only when requested."""
        template = {"greeting": "It''s '{here}'"}
        escaped = _build(template, use_escaping=True)
        assert escaped.use_escaping
        assert escaped.parsed_messages[EN].elements[0].value == "It's {here}"  # type: ignore[union-attr]
        plain = _build(template)
        assert len(plain.parsed_messages[EN].elements) == 3  # type: ignore[union-attr]

    def test_custom_parser(self) -> None:
        """Any object with a compatible parse method may be injected."""
        calls: list[tuple[str, str, str, bool]] = []

        class RecordingParser:
            def parse(
                self, resource_id: str, filename: str, source: str, *, use_escaping: bool = False
            ) -> Pattern:
                calls.append((resource_id, filename, source, use_escaping))
                return Pattern((), Span(0, 0))

        _build({"greeting": "{broken"}, parser=RecordingParser())
        assert calls == [("greeting", "app_en.arb", "{broken", False)]
