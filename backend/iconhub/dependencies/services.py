"""
Service dependencies. Instances are created once in the application lifespan.
"""
from fastapi import Request

from iconhub.services.auth_service import AuthService
from iconhub.services.icon_store import IconStore
from iconhub.services.upload_service import UploadHandler


def get_icon_store(request: Request) -> IconStore:
    return request.app.state.icon_store


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_upload_handler(request: Request) -> UploadHandler:
    return request.app.state.upload_handler
