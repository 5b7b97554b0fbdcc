"""Database models for the directory application."""

from directory.models.lookups import Like
from directory.models.user import User
from directory.models.user_follow import UserFollow

__all__ = ["Like", "User", "UserFollow"]
