"""
API request and response schemas.
"""
from iconhub.schemas.auth import LoginRequest, LoginResponse, CheckAuthResponse
from iconhub.schemas.icons import (
    CategoryNameRequest,
    DeleteIconRequest,
    MessageResponse,
    CategoryListResponse,
    CategoryResponse,
    ShowcaseResponse,
    UploadedFileInfo,
    UploadResult,
    UploadResponse,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "CheckAuthResponse",
    "CategoryNameRequest",
    "DeleteIconRequest",
    "MessageResponse",
    "CategoryListResponse",
    "CategoryResponse",
    "ShowcaseResponse",
    "UploadedFileInfo",
    "UploadResult",
    "UploadResponse",
]
