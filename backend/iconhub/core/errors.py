"""
Error taxonomy for the icon library service.

Services raise these; the application maps them to JSON envelopes
of the form ``{"success": false, "message": ...}`` with the carried status code.
"""
from fastapi import status


class IconLibraryError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(IconLibraryError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(IconLibraryError):
    """Authentication failure (401 by default, 403 for a rejected token)."""
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(IconLibraryError):
    """Icons document, category or icon does not exist."""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(IconLibraryError):
    """Category already exists."""
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidStateError(IconLibraryError):
    """Target exists but cannot accept the operation (e.g. deleted category)."""
    status_code = status.HTTP_400_BAD_REQUEST


class StorageError(IconLibraryError):
    """Database or filesystem failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidTokenError(Exception):
    """Token signature mismatch, malformed token or expired token."""
