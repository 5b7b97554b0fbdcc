"""Pytest configuration and shared fixtures."""

import pytest

from directory.repositories import UserRepository
from directory.services import UserDirectoryService


@pytest.fixture
def user_repository():
    """Provide the Django-backed user store."""
    return UserRepository()


@pytest.fixture
def directory_service(user_repository):
    """Provide a directory service wired to the Django-backed store."""
    return UserDirectoryService(store=user_repository)
