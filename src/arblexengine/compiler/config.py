"""Compiler configuration.

Provides a single frozen dataclass holding every option that changes how a
directory of ARB files is validated and modeled.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from arblexengine.constants import DEFAULT_TEMPLATE_ARB_FILE, MAX_DEPTH

__all__ = ["CompilerConfig"]


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Immutable configuration for :func:`~arblexengine.compiler.compile_resources`.

    Attributes:
        arb_dir: Directory holding the ARB files (str is accepted and converted)
        template_arb_file: File name, inside arb_dir, of the template bundle
            that defines resource ids and placeholder metadata
            (default: "app_en.arb")
        required_resource_attributes: Require an ``@id`` block for every
            resource (default: False)
        use_escaping: Treat single quotes in messages as escape delimiters
            (default: False)
        max_nesting_depth: Maximum nesting of plural/select expressions
            (default: 100)

    Example:
        >>> config = CompilerConfig("lib/l10n", required_resource_attributes=True)
        >>> config.template_path
        PosixPath('lib/l10n/app_en.arb')
    """

    arb_dir: Path
    template_arb_file: str = DEFAULT_TEMPLATE_ARB_FILE
    required_resource_attributes: bool = False
    use_escaping: bool = False
    max_nesting_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If template_arb_file is empty, contains a path
                separator, or does not end in ".arb", or if max_nesting_depth
                is not positive.
        """
        if not isinstance(self.arb_dir, Path):
            object.__setattr__(self, "arb_dir", Path(self.arb_dir))
        if not self.template_arb_file:
            msg = "template_arb_file must be a non-empty file name"
            raise ValueError(msg)
        if Path(self.template_arb_file).name != self.template_arb_file:
            msg = f"template_arb_file must be a bare file name, got {self.template_arb_file!r}"
            raise ValueError(msg)
        if not self.template_arb_file.endswith(".arb"):
            msg = f"template_arb_file must end with .arb, got {self.template_arb_file!r}"
            raise ValueError(msg)
        if self.max_nesting_depth <= 0:
            msg = "max_nesting_depth must be positive"
            raise ValueError(msg)

    @property
    def template_path(self) -> Path:
        return self.arb_dir / self.template_arb_file
