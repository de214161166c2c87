"""
Database definitions and collection constants.
"""
from iconhub.database.databases import icons_db

__all__ = ["icons_db"]
