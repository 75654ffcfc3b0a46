"""Single ARB file loaded into memory.

A bundle is the decoded JSON object of one ``.arb`` file together with the
locale it provides. The locale comes from the file's ``@@locale`` key, from
its file name (``app_en_US.arb``), or both, in which case they must agree.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from arblexengine.constants import ARB_LOCALE_KEY, ATTRIBUTE_PREFIX
from arblexengine.diagnostics import (
    ErrorTemplate,
    InvalidLocaleError,
    InvalidValueTypeError,
    LocaleMismatchError,
    MalformedResourceFileError,
    UndeterminedLocaleError,
)
from arblexengine.locale_utils import (
    LocaleKey,
    locale_from_filename,
    normalize_locale,
    try_parse_locale,
)
from arblexengine.resources.types import ArbResources, ArbSource, ResourceId

__all__ = ["ResourceBundle", "resolve_locale"]

logger = logging.getLogger(__name__)


def resolve_locale(resources: ArbResources, path: Path) -> LocaleKey:
    """Determine the locale of an ARB file.

    Args:
        resources: Decoded top-level ARB object
        path: File path; its stem is scanned for a locale suffix

    Returns:
        Locale from @@locale if present, else from the file name

    Raises:
        InvalidLocaleError: If @@locale is not a string or not a valid tag
        LocaleMismatchError: If @@locale and the file name disagree
        UndeterminedLocaleError: If neither source yields a locale
    """
    declared = resources.get(ARB_LOCALE_KEY)
    if declared is not None and not isinstance(declared, str):
        raise InvalidLocaleError(ErrorTemplate.invalid_locale(declared, str(path)))

    from_filename = locale_from_filename(path.stem)

    if declared is None:
        if from_filename is None:
            raise UndeterminedLocaleError(ErrorTemplate.undetermined_locale(str(path)))
        return from_filename

    if from_filename is not None and normalize_locale(declared) != str(from_filename):
        raise LocaleMismatchError(
            ErrorTemplate.locale_mismatch(declared, str(from_filename), str(path))
        )

    locale = try_parse_locale(declared)
    if locale is None:
        raise InvalidLocaleError(ErrorTemplate.invalid_locale(declared, str(path)))
    return locale


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ResourceBundle:
    """Decoded ARB file with its resolved locale.

    Immutable after construction. Use :meth:`from_file` or
    :meth:`from_source` rather than the constructor.

    Attributes:
        path: Location of the ARB file
        locale: Resolved locale
        resources: Read-only view of the decoded top-level object
        resource_ids: Keys not starting with "@", in file order
    """

    path: Path
    locale: LocaleKey
    resources: ArbResources
    resource_ids: tuple[ResourceId, ...]

    @classmethod
    def from_file(cls, path: str | Path) -> ResourceBundle:
        """Load and decode an ARB file.

        Raises:
            MalformedResourceFileError: If the file is not UTF-8 JSON object text
            InvalidLocaleError, LocaleMismatchError, UndeterminedLocaleError:
                If the locale cannot be resolved (see :func:`resolve_locale`)
            OSError: If the file cannot be read
        """
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedResourceFileError(
                ErrorTemplate.malformed_resource_file(str(path), str(e))
            ) from e
        return cls.from_source(source, path)

    @classmethod
    def from_source(cls, source: ArbSource, path: str | Path) -> ResourceBundle:
        """Decode ARB text already in memory.

        Args:
            source: ARB file contents
            path: Path the contents belong to (used for locale and errors)
        """
        path = Path(path)
        try:
            decoded = json.loads(source)
        except json.JSONDecodeError as e:
            raise MalformedResourceFileError(
                ErrorTemplate.malformed_resource_file(str(path), str(e))
            ) from e
        if not isinstance(decoded, dict):
            detail = f"Expected a JSON object at the top level, found {type(decoded).__name__}"
            raise MalformedResourceFileError(
                ErrorTemplate.malformed_resource_file(str(path), detail)
            )

        locale = resolve_locale(decoded, path)
        resource_ids = tuple(key for key in decoded if not key.startswith(ATTRIBUTE_PREFIX))
        logger.debug("Loaded %s: locale %s, %d resources", path, locale, len(resource_ids))
        return cls(
            path=path,
            locale=locale,
            resources=MappingProxyType(decoded),
            resource_ids=resource_ids,
        )

    def __repr__(self) -> str:
        return f"ResourceBundle({self.locale}, {self.path})"

    @property
    def filename(self) -> str:
        return self.path.name

    def translation_for(self, resource_id: ResourceId) -> str | None:
        """Message text for a resource id.

        Returns:
            The message string, or None if this bundle does not define it

        Raises:
            InvalidValueTypeError: If the value is present but not a string
        """
        value = self.resources.get(resource_id)
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidValueTypeError(
                ErrorTemplate.invalid_value_type(resource_id, str(self.path))
            )
        return value

    def attributes_for(self, resource_id: ResourceId) -> object:
        """Raw ``@resource_id`` attribute value, or None if absent."""
        return self.resources.get(f"{ATTRIBUTE_PREFIX}{resource_id}")
