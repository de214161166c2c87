"""
Icon Library Backend - FastAPI Application

REST endpoints over a single icon library document with token-gated
mutations and icon file uploads.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from motor.motor_asyncio import AsyncIOMotorClient

from iconhub.config import Settings, get_settings
from iconhub.core.errors import IconLibraryError
from iconhub.core.security import TokenService
from iconhub.database.connections import create_mongo_client, get_database
from iconhub.database.databases import icons_db
from iconhub.logging_config import setup_logging
from iconhub.routers import auth, health, icons, showcase
from iconhub.services.auth_service import AuthService
from iconhub.services.icon_store import IconStore
from iconhub.services.upload_service import UploadHandler

logger = logging.getLogger(__name__)


async def icon_library_error_handler(request: Request, exc: IconLibraryError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid request body"},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Server error"},
    )


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration (defaults to environment-derived settings)
        mongo_client: Pre-built client; when given, the app does not close it

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    icons_dir = Path(settings.icons_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Ensure the icons directory exists
        - Create the MongoDB client and the services sharing it

        Shutdown:
        - Close the client if this app created it
        """
        logger.info("Starting up icon library backend...")
        icons_dir.mkdir(parents=True, exist_ok=True)

        client = mongo_client if mongo_client is not None else create_mongo_client(settings)
        db = get_database(client, settings)

        store = IconStore(db[icons_db.Collections.ICONS], icons_dir)
        app.state.mongo_client = client
        app.state.icon_store = store
        app.state.auth_service = AuthService(db, app.state.token_service)
        app.state.upload_handler = UploadHandler(
            store, icons_dir, max_file_size=settings.max_upload_size
        )

        if settings.create_library_on_startup:
            try:
                await store.ensure_library()
            except IconLibraryError as e:
                logger.warning(f"Could not create icons document: {e.message}")

        yield

        logger.info("Shutting down icon library backend...")
        if mongo_client is None:
            client.close()
            logger.info("Database connection closed")

    app = FastAPI(
        title="Icon Library API",
        description="Icon categories and icon uploads over a single MongoDB document.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.token_service = TokenService.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_origin_regex=settings.cors_allow_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(IconLibraryError, icon_library_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(icons.router)
    if settings.enable_public_showcase:
        app.include_router(showcase.router)

    app.mount("/icons", StaticFiles(directory=icons_dir, check_dir=False), name="icons")

    return app


app = create_app()
