"""ARBLexEngine - validation and semantic modeling for ARB localization files.

Loads a directory of Application Resource Bundle (.arb) files, resolves each
file's locale, checks that every regional locale has a language fallback,
parses every message template and settles placeholder types across locales.
The resulting models feed a code generator.

Public API:
    compile_resources - Validate and model an ARB directory
    CompilerConfig - Compilation options
    CompilationResult - Bundles plus one Message per resource
    ResourceBundle - One decoded ARB file
    ResourceBundleCollection - Locale-indexed bundles with fallback check
    Message - Cross-locale model of one resource
    Placeholder - Declared message argument
    HelperMethod - Code generation fragment descriptor
    LocaleKey - Parsed locale identity
    parse_message - Parse one message template to AST

Exceptions:
    ArbError - Base exception class
    ArbPositionError - Errors located inside a message string

Submodules:
    arblexengine.syntax - Template AST, parser and traversal
    arblexengine.diagnostics - Error types, codes and formatting
    arblexengine.resources - Bundles, collections and type aliases
"""

# Essential Public API - Minimal exports for clean namespace
from .compiler import CompilationResult, CompilerConfig, compile_resources
from .diagnostics import ArbError, ArbPositionError
from .locale_utils import LocaleKey
from .model import HelperMethod, Message, OptionalParameter, Placeholder
from .resources import ResourceBundle, ResourceBundleCollection
from .syntax import parse as parse_message

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("arblexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# ARB format reference
__arb_spec_url__ = (
    "https://github.com/google/app-resource-bundle/wiki/"
    "ApplicationResourceBundleSpecification"
)

# ARB files are JSON and therefore UTF-8
__recommended_encoding__ = "UTF-8"

__all__ = [
    "ArbError",
    "ArbPositionError",
    "CompilationResult",
    "CompilerConfig",
    "HelperMethod",
    "LocaleKey",
    "Message",
    "OptionalParameter",
    "Placeholder",
    "ResourceBundle",
    "ResourceBundleCollection",
    "__arb_spec_url__",
    "__recommended_encoding__",
    "__version__",
    "compile_resources",
    "parse_message",
]
