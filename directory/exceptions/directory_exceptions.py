"""Exceptions raised by the user directory."""


class DirectoryError(Exception):
    """Base exception for user directory errors."""

    default_status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        """Initialize directory error.

        Args:
            message: Human-readable error message
            status_code: HTTP-equivalent status code, defaults to the
                class ``default_status_code``
        """
        self.message = message
        self.status_code = (
            status_code if status_code is not None else self.default_status_code
        )
        super().__init__(message)


class ValidationFailedError(DirectoryError):
    """Input validation failed or a user could not be resolved by email (400)."""


class NotFoundError(DirectoryError):
    """User not found by id (404)."""

    default_status_code = 404

    def __init__(self, user_id: int):
        """Initialize user not found error.

        Args:
            user_id: ID of the user that was not found
        """
        self.user_id = user_id
        super().__init__(message=f"User with id = '{user_id}' was not found.")
