"""Services for the directory app."""

from directory.services.user_directory_service import UserDirectoryService

__all__ = ["UserDirectoryService"]
