"""Helper method descriptors for code generators.

When a message is rendered as generated code, nested plural/select
expressions become helper functions. A :class:`HelperMethod` describes one
piece of such a rendering: a call to a named helper, a bare placeholder, or
a literal string.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import KW_ONLY, dataclass

from arblexengine.model.placeholder import Placeholder

__all__ = ["HelperMethod"]


def _parameter(placeholder: Placeholder) -> str:
    if placeholder.requires_formatting:
        return f"String {placeholder.name}String"
    return f"{placeholder.type} {placeholder.name}"


def _argument(placeholder: Placeholder) -> str:
    if placeholder.requires_formatting:
        return f"{placeholder.name}String"
    return placeholder.name


@dataclass(frozen=True, slots=True)
class HelperMethod:
    """One rendered fragment: helper call, placeholder, or literal.

    Exactly one of ``helper``, ``placeholder`` and ``string`` is set.
    Placeholders needing date or number formatting are passed to helpers as
    their preformatted ``<name>String`` form.

    Example:
        >>> count = message.placeholders["count"]  # type num, no format
        >>> method = HelperMethod((count,), helper="_itemCount0")
        >>> method.helper_or_placeholder
        '_itemCount0(count)'
        >>> method.method_parameters
        'num count'

    Raises:
        ValueError: If not exactly one of helper, placeholder, string is set
    """

    dependent_placeholders: tuple[Placeholder, ...]
    _: KW_ONLY
    helper: str | None = None
    placeholder: Placeholder | None = None
    string: str | None = None

    def __post_init__(self) -> None:
        set_count = sum(
            value is not None for value in (self.helper, self.placeholder, self.string)
        )
        if set_count != 1:
            msg = (
                "Exactly one of helper, placeholder or string must be set, "
                f"got {set_count}"
            )
            raise ValueError(msg)

    @property
    def helper_or_placeholder(self) -> str:
        """Expression for this fragment in generated code."""
        if self.helper is not None:
            return f"{self.helper}({self.method_arguments})"
        if self.string is not None:
            return self.string
        assert self.placeholder is not None
        return _argument(self.placeholder)

    @property
    def parameters(self) -> tuple[str, ...]:
        """Typed parameter declarations of the helper, one per dependent placeholder.

        Raises:
            ValueError: If this fragment is not a helper call
        """
        self._require_helper()
        return tuple(_parameter(placeholder) for placeholder in self.dependent_placeholders)

    @property
    def arguments(self) -> tuple[str, ...]:
        """Call arguments of the helper, one per dependent placeholder.

        Raises:
            ValueError: If this fragment is not a helper call
        """
        self._require_helper()
        return tuple(_argument(placeholder) for placeholder in self.dependent_placeholders)

    @property
    def method_parameters(self) -> str:
        return ", ".join(self.parameters)

    @property
    def method_arguments(self) -> str:
        return ", ".join(self.arguments)

    def _require_helper(self) -> None:
        if self.helper is None:
            msg = "Parameters and arguments are only defined for helper calls"
            raise ValueError(msg)
