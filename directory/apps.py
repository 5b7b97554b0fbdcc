"""Django application configuration for directory."""

from django.apps import AppConfig
from django.conf import settings


class DirectoryConfig(AppConfig):
    """Configuration class for the directory application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "directory"

    def ready(self) -> None:
        """Configure structured logging when Django app is ready."""
        if getattr(settings, "TEST_MODE", False):
            return

        from directory.logging import setup_logging  # noqa: PLC0415

        setup_logging()
