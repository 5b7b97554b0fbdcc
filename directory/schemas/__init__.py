"""Schemas for the directory app."""

from directory.schemas.base_schema_model import BaseSchemaModel
from directory.schemas.user import UserInput, UserRecord, UserView

__all__ = [
    "BaseSchemaModel",
    "UserInput",
    "UserRecord",
    "UserView",
]
