"""
API routers.
"""
from iconhub.routers import auth, health, icons, showcase

__all__ = ["auth", "health", "icons", "showcase"]
