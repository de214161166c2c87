"""
Service layer: icon store, uploads and authentication.
"""
from iconhub.services.auth_service import AuthService
from iconhub.services.icon_store import IconStore
from iconhub.services.upload_service import UploadHandler

__all__ = ["AuthService", "IconStore", "UploadHandler"]
