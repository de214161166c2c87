"""
Authentication request/response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login request body. Presence is checked by the route so a missing field is a 400."""
    username: Optional[str] = Field(None, description="Login name")
    password: Optional[str] = Field(None, description="Plaintext password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    success: bool = Field(default=True)
    message: str = Field(default="Login successful")
    token: str = Field(..., description="JWT access token, valid for one day")


class CheckAuthResponse(BaseModel):
    """Cookie session check response."""
    authenticated: bool = Field(..., description="Whether the cookie token is valid")
    user: dict[str, Any] = Field(..., description="Decoded token claims")
