"""
Dependencies for dependency injection in routes.
"""
from iconhub.dependencies.auth import get_token_service, require_bearer_token
from iconhub.dependencies.services import (
    get_auth_service,
    get_icon_store,
    get_upload_handler,
)

__all__ = [
    "get_token_service",
    "require_bearer_token",
    "get_auth_service",
    "get_icon_store",
    "get_upload_handler",
]
