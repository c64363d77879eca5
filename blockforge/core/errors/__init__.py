# blockforge/core/errors/__init__.py
"""
Error types for blockforge.

No side effects on import.
"""

from . import codes
from .exceptions import BlockForgeError

__all__ = [
    "codes",
    "BlockForgeError",
]
