"""Exceptions for sitefs.

Storage failures are reported with the built-in :class:`OSError` family.
The aliases below give those kinds the names used throughout the docs so
callers can catch them without remembering which built-in is which.
"""

from __future__ import annotations

# Built-ins listed in __all__ so a star import covers every error kind.
from builtins import IsADirectoryError, NotADirectoryError, PermissionError

__all__ = [
    "MissingArgumentError",
    "NotFoundError",
    "AlreadyExistsError",
    "UnderlyingIOError",
    "IsADirectoryError",
    "NotADirectoryError",
    "PermissionError",
    "require",
]


class MissingArgumentError(TypeError):
    """Raised when a required path argument is empty or missing.

    Always raised at call time, before any filesystem access, for both the
    async and the ``_sync`` form of an operation.
    """

    def __init__(self, name: str = "path") -> None:
        super().__init__(f"{name} is required!")
        self.argument = name


NotFoundError = FileNotFoundError
AlreadyExistsError = FileExistsError
UnderlyingIOError = OSError


def require(value, name: str = "path"):
    """Return *value* unchanged, or raise :class:`MissingArgumentError` if falsy."""
    if not value:
        raise MissingArgumentError(name)
    return value
