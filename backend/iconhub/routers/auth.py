"""
Authentication router for login and cookie session checks.
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from iconhub.core.errors import InvalidTokenError, ValidationError
from iconhub.core.security import TokenService
from iconhub.dependencies.auth import get_token_service
from iconhub.dependencies.services import get_auth_service
from iconhub.schemas.auth import CheckAuthResponse, LoginRequest, LoginResponse
from iconhub.services.auth_service import AuthService

router = APIRouter(tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    Pass the token to protected endpoints as `Authorization: Bearer <token>`.
    """
    if not body.username or not body.password:
        raise ValidationError("Username and password are required")

    token = await auth_service.login(body.username, body.password)
    return LoginResponse(token=token)


@router.get(
    "/check-auth",
    response_model=CheckAuthResponse,
    summary="Check the auth cookie",
)
async def check_auth(
    request: Request,
    token_service: TokenService = Depends(get_token_service),
):
    """
    Report whether the `authToken` cookie carries a valid token.
    """
    token = request.cookies.get(request.app.state.settings.auth_cookie_name)
    if not token:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"authenticated": False},
        )

    try:
        claims = token_service.verify(token)
    except InvalidTokenError:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"authenticated": False},
        )

    return CheckAuthResponse(authenticated=True, user=claims)
