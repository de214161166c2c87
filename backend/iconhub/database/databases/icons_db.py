"""
Icon library database configuration.

Stores the single icon library document and the login credentials.
"""


class Collections:
    """Collection names in the icon library database."""
    ICONS = "icons"
    USERS = "users"
