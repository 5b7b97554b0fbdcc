"""Django project for the social directory service."""
