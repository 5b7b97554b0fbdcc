"""User input schema for registration and edits."""

from pydantic import Field

from directory.schemas.base_schema_model import BaseSchemaModel


class UserInput(BaseSchemaModel):
    """Incoming user data for registration and profile edits.

    Every field is optional at the schema level. Registration rules
    (required fields, email format, uniqueness) are enforced by
    ``UserDirectoryService`` so that the first failing rule wins.
    """

    name: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Email address, used as login")
    password: str | None = Field(None, description="Password, stored as given")
    profile_image: str | None = Field(
        None, description="Reference to the profile image"
    )
