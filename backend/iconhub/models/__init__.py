"""
Data models for MongoDB documents.
"""
from iconhub.models.icon_library import Category, IconLibrary
from iconhub.models.user import UserCredential

__all__ = ["Category", "IconLibrary", "UserCredential"]
