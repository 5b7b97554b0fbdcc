"""Exception types for the user directory."""

from directory.exceptions.directory_exceptions import (
    DirectoryError,
    NotFoundError,
    ValidationFailedError,
)

__all__ = [
    "DirectoryError",
    "NotFoundError",
    "ValidationFailedError",
]
