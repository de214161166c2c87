"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "test"

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24
    auth_cookie_name: str = "authToken"

    # Uploads
    icons_dir: str = "public/icons"
    max_upload_size: int = 5 * 1024 * 1024

    # CORS
    cors_allowed_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:8081",
        "http://192.168.0.105:8081",
    ]
    cors_allow_origin_regex: str | None = r"https://.*\.expo\.dev"

    # Optional features
    enable_public_showcase: bool = False
    create_library_on_startup: bool = False

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
