"""User directory Django application."""
