"""Logging utilities for the social directory service."""

from directory.logging.config import setup_logging

__all__ = ["setup_logging"]
