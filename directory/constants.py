"""Constants for the directory application."""

# Placeholder shown instead of a password in masked user views
MASKED_PASSWORD = "****"

# SQL LIKE wildcard used to wrap name search fragments
LIKE_WILDCARD = "%"
