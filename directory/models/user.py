"""User model."""

from typing import ClassVar

from django.db import models


class User(models.Model):
    """User account owning the directory.users table.

    Email is indexed but not unique at the database level: uniqueness is a
    registration rule of the directory service and edits are not re-checked.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=255, db_index=True)
    password = models.CharField(max_length=255)
    profile_image = models.CharField(max_length=1024, null=True, blank=True)
    followees = models.ManyToManyField(
        "self",
        through="directory.UserFollow",
        through_fields=("follower", "followee"),
        symmetrical=False,
        related_name="followers",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        ordering: ClassVar[list[str]] = ["id"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.name} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(id={self.id}, email='{self.email}')>"
