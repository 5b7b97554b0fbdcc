"""UserFollow model."""

from typing import ClassVar

from django.db import models


class UserFollow(models.Model):
    """Directed follow edge from a follower to a followee.

    Rows are ordered by insertion, which is the order a user's followees
    are listed in. Deleting either user removes the edge.
    """

    follower = models.ForeignKey(
        "directory.User",
        on_delete=models.CASCADE,
        related_name="followee_links",
        db_column="follower_id",
    )
    followee = models.ForeignKey(
        "directory.User",
        on_delete=models.CASCADE,
        related_name="follower_links",
        db_column="followee_id",
    )
    followed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "user_follows"
        unique_together: ClassVar[list[list[str]]] = [["follower", "followee"]]
        ordering: ClassVar[list[str]] = ["id"]

    def __str__(self) -> str:
        """Return string representation of follow relationship."""
        return f"{self.follower.name} follows {self.followee.name}"

    def __repr__(self) -> str:
        """Return detailed representation of follow relationship."""
        return (
            f"<UserFollow(follower_id={self.follower_id}, "
            f"followee_id={self.followee_id})>"
        )
