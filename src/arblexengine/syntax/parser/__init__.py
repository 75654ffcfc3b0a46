"""Message template parser package.

Python 3.13+. Zero external dependencies.
"""

from arblexengine.syntax.parser.core import MessageParser, TemplateParser
from arblexengine.syntax.parser.rules import ParseContext

__all__ = ["MessageParser", "ParseContext", "TemplateParser"]
