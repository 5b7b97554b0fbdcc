"""User-related Pydantic schemas."""

from directory.schemas.user.user_input import UserInput
from directory.schemas.user.user_record import UserRecord
from directory.schemas.user.user_view import UserView

__all__ = ["UserInput", "UserRecord", "UserView"]
