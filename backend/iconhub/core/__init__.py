"""
Core module - Security and error taxonomy.
"""
from iconhub.core.errors import (
    IconLibraryError,
    ValidationError,
    AuthError,
    NotFoundError,
    ConflictError,
    InvalidStateError,
    StorageError,
    InvalidTokenError,
)
from iconhub.core.security import TokenService

__all__ = [
    "IconLibraryError",
    "ValidationError",
    "AuthError",
    "NotFoundError",
    "ConflictError",
    "InvalidStateError",
    "StorageError",
    "InvalidTokenError",
    "TokenService",
]
