"""
Public showcase router: unauthenticated listing of visible icons.

Only mounted when `enable_public_showcase` is set.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from iconhub.core.errors import IconLibraryError, NotFoundError
from iconhub.dependencies.services import get_icon_store
from iconhub.schemas.icons import ShowcaseResponse
from iconhub.services.icon_store import IconStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/public", tags=["Showcase"])


@router.get(
    "/icons",
    response_model=ShowcaseResponse,
    summary="Public icon showcase",
)
async def public_showcase_icons(store: IconStore = Depends(get_icon_store)):
    """
    Same data as `/icon-categories`, without authentication.
    """
    try:
        categories = await store.list_categories()
    except NotFoundError:
        return JSONResponse(
            status_code=404,
            content={"status": False, "message": "No icons found"},
        )
    except IconLibraryError as e:
        logger.error(f"Error in public showcase endpoint: {e.message}")
        return JSONResponse(
            status_code=e.status_code,
            content={"status": False, "message": e.message},
        )
    return ShowcaseResponse(data=categories)
