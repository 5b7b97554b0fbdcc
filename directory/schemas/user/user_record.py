"""User record schema shared between the directory service and its store."""

from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """Identity-bearing user entity as seen by the directory service.

    ``followees`` holds the users this user follows, in follow order.
    Followee entries loaded from a store carry their own fields only; their
    nested ``followees`` list is empty.
    """

    id: int | None = Field(None, description="Assigned by the store on first save")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password, stored as given")
    profile_image: str | None = Field(None, description="Profile image reference")
    followees: list["UserRecord"] = Field(
        default_factory=list, description="Users this user follows"
    )

    def follows(self, user_id: int | None) -> bool:
        """Check whether this user follows the user with the given id."""
        return any(followee.id == user_id for followee in self.followees)

    def same_user(self, other: "UserRecord") -> bool:
        """Check whether both records refer to the same stored user."""
        return self.id is not None and self.id == other.id
