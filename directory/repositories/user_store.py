"""Persistence contract required by the user directory service."""

from typing import Protocol

from directory.schemas.user import UserRecord


class UserStore(Protocol):
    """Storage operations the directory service depends on.

    Implementations return ``UserRecord`` instances whose ``followees`` are
    populated one level deep.
    """

    def find_by_email_exact(self, email: str) -> UserRecord | None:
        """Return the user whose email equals ``email`` exactly."""
        ...

    def find_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with the given id."""
        ...

    def save(self, record: UserRecord) -> UserRecord:
        """Persist the record and its followee list, assigning an id if new."""
        ...

    def delete(self, record: UserRecord) -> None:
        """Remove the record."""
        ...

    def search_containing_name(self, pattern: str) -> list[UserRecord]:
        """Return users whose name matches a ``%``-wrapped substring pattern."""
        ...

    def find_all_following(self, target_id: int) -> list[UserRecord]:
        """Return every user whose followees contain ``target_id``."""
        ...
