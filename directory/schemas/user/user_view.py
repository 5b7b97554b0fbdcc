"""User view schema returned to API callers."""

from pydantic import ConfigDict, Field

from directory.constants import MASKED_PASSWORD
from directory.schemas.base_schema_model import BaseSchemaModel
from directory.schemas.user.user_record import UserRecord


class UserView(BaseSchemaModel):
    """Output projection of a user record.

    ``id`` is the string form of the numeric record id. Use ``from_record``
    for the variant carrying the real password and ``masked`` for the one
    that hides it.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "Ana",
                "email": "ana@example.com",
                "password": MASKED_PASSWORD,
                "profileImage": "https://cdn.example.com/ana.png",
            }
        }
    )

    id: str = Field(..., description="User id as a string")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password or masked placeholder")
    profile_image: str | None = Field(None, description="Profile image reference")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserView":
        """Build a view that exposes the stored password."""
        return cls._build(record, record.password)

    @classmethod
    def masked(cls, record: UserRecord) -> "UserView":
        """Build a view with the password replaced by a placeholder."""
        return cls._build(record, MASKED_PASSWORD)

    @classmethod
    def _build(cls, record: UserRecord, password: str) -> "UserView":
        return cls(
            id=str(record.id),
            name=record.name,
            email=record.email,
            password=password,
            profile_image=record.profile_image,
        )
