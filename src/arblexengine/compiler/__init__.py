"""ARB directory compilation entry point.

Python 3.13+.
"""

from .config import CompilerConfig
from .pipeline import CompilationResult, compile_resources

__all__ = [
    "CompilationResult",
    "CompilerConfig",
    "compile_resources",
]
