"""Semantic model of ARB resources: placeholders, messages and helpers.

Python 3.13+.
"""

from .helper import HelperMethod
from .message import Message
from .placeholder import OptionalParameter, Placeholder

__all__ = [
    "HelperMethod",
    "Message",
    "OptionalParameter",
    "Placeholder",
]
