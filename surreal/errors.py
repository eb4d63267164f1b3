"""
Exceptions raised by the surreal number engine.
"""

from __future__ import annotations
from typing import Any


class SurrealError(Exception):
    """Base class for every error raised by this package."""


class WellFormingError(SurrealError, ValueError):
    """
    Raised by the validating constructor when some left option is not
    strictly less than some right option.
    """

    def __init__(self, left: Any, right: Any):
        self.left = left
        self.right = right
        super().__init__(
            f"left option {left} is not less than right option {right}"
        )


class StructureNotFoundError(SurrealError, LookupError):
    """An identifier was looked up that the structure cache never minted."""

    def __init__(self, key: int):
        self.key = key
        super().__init__(f"no structure interned under identifier {key}")


class ContextMismatchError(SurrealError, ValueError):
    """Operands belong to different contexts."""
