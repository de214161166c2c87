"""
Authentication dependencies for route protection.
"""
from typing import Any, Optional

from fastapi import Header, Request, status

from iconhub.core.errors import AuthError, InvalidTokenError
from iconhub.core.security import TokenService


def get_token_service(request: Request) -> TokenService:
    """Token service built once by the application factory."""
    return request.app.state.token_service


async def require_bearer_token(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> dict[str, Any]:
    """
    Dependency that rejects requests without a valid bearer token.

    Token is passed as ``Authorization: Bearer <token>``.

    Raises:
        AuthError 401: If the header is missing or not a bearer token
        AuthError 403: If the token is invalid or expired
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthError("Unauthorized")

    token = authorization.split(" ", 1)[1].strip()
    try:
        return get_token_service(request).verify(token)
    except InvalidTokenError:
        raise AuthError("Invalid token", status_code=status.HTTP_403_FORBIDDEN)
