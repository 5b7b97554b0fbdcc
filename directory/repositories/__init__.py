"""Repositories for the directory app."""

from directory.repositories.user_repository import UserRepository
from directory.repositories.user_store import UserStore

__all__ = ["UserRepository", "UserStore"]
