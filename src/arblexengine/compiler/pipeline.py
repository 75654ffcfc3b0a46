"""End-to-end compilation of an ARB directory into message models.

Steps:
    1. Load the template bundle named by the configuration
    2. Load every ARB file of the directory into a collection
    3. Build one :class:`~arblexengine.model.Message` per template resource

Compilation is fail-fast: the first error aborts it. Files are processed in
path order, so the same broken directory always reports the same error.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from arblexengine.compiler.config import CompilerConfig
from arblexengine.diagnostics import ArbError, ErrorTemplate, MissingTemplateError
from arblexengine.locale_utils import LocaleKey
from arblexengine.model import Message
from arblexengine.resources import ResourceBundle, ResourceBundleCollection, ResourceId
from arblexengine.syntax import MessageParser

__all__ = ["CompilationResult", "compile_resources"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompilationResult:
    """Validated resources of one ARB directory.

    Attributes:
        template_bundle: Bundle defining resource ids and placeholder metadata
        bundles: Every bundle in the directory, by locale
        messages: One model per template resource id, in template file order
    """

    template_bundle: ResourceBundle
    bundles: ResourceBundleCollection
    messages: tuple[Message, ...]

    @property
    def supported_locales(self) -> tuple[LocaleKey, ...]:
        """All locales, template locale first."""
        template_locale = self.template_bundle.locale
        others = tuple(locale for locale in self.bundles.locales if locale != template_locale)
        return (template_locale, *others)

    @property
    def requires_formatting(self) -> bool:
        """Whether any placeholder needs date or number formatting."""
        return any(message.placeholders_require_formatting for message in self.messages)

    def message(self, resource_id: ResourceId) -> Message:
        """Look up the model of a resource.

        Raises:
            KeyError: If the template does not define resource_id
        """
        for message in self.messages:
            if message.resource_id == resource_id:
                return message
        raise KeyError(resource_id)

    def untranslated_messages(self) -> dict[LocaleKey, tuple[ResourceId, ...]]:
        """Resource ids missing per non-template locale.

        Locales translating every resource are omitted.
        """
        untranslated: dict[LocaleKey, tuple[ResourceId, ...]] = {}
        for locale in self.bundles.locales:
            if locale == self.template_bundle.locale:
                continue
            missing = tuple(
                message.resource_id
                for message in self.messages
                if message.messages.get(locale) is None
            )
            if missing:
                untranslated[locale] = missing
        return untranslated


def compile_resources(config: CompilerConfig) -> CompilationResult:
    """Load, validate and model every resource of an ARB directory.

    Args:
        config: Directory, template file and parsing options

    Returns:
        CompilationResult holding bundles and message models

    Raises:
        MissingTemplateError: If the template file does not exist
        ArbError: The first resource, collection, syntax or placeholder
            error encountered
    """
    template_path = config.template_path
    if not template_path.is_file():
        logger.error("Template arb file not found: %s", template_path)
        raise MissingTemplateError(ErrorTemplate.template_not_found(str(template_path)))

    parser = MessageParser(max_nesting_depth=config.max_nesting_depth)
    try:
        template_bundle = ResourceBundle.from_file(template_path)
        bundles = ResourceBundleCollection.from_directory(config.arb_dir)
        messages = tuple(
            Message(
                template_bundle,
                bundles,
                resource_id,
                config.required_resource_attributes,
                use_escaping=config.use_escaping,
                parser=parser,
            )
            for resource_id in template_bundle.resource_ids
        )
    except ArbError as e:
        logger.error("Failed to compile arb files in %s: %s", config.arb_dir, e)
        raise

    result = CompilationResult(template_bundle, bundles, messages)
    for locale, missing in result.untranslated_messages().items():
        logger.warning(
            "Locale %s is missing %d of %d messages: %s",
            locale,
            len(missing),
            len(messages),
            ", ".join(missing),
        )
    logger.info(
        "Compiled %d messages for %d locales from %s",
        len(messages),
        len(bundles),
        config.arb_dir,
    )
    return result
