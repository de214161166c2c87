"""
Icons router for category management and icon uploads.

Every route here requires `Authorization: Bearer <token>`.
"""
from typing import TypeVar

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as BodyValidationError
from starlette.exceptions import HTTPException

from iconhub.core.errors import IconLibraryError, ValidationError
from iconhub.dependencies.auth import require_bearer_token
from iconhub.dependencies.services import get_icon_store, get_upload_handler
from iconhub.schemas.icons import (
    CategoryListResponse,
    CategoryNameRequest,
    CategoryResponse,
    DeleteIconRequest,
    MessageResponse,
    UploadResponse,
)
from iconhub.services.icon_store import IconStore
from iconhub.services.upload_service import UploadHandler, collect_upload_files

router = APIRouter(tags=["Icons"], dependencies=[Depends(require_bearer_token)])

BodyT = TypeVar("BodyT", bound=BaseModel)


def request_base_url(request: Request) -> str:
    """``scheme://host`` as seen by the client."""
    host = request.headers.get("host") or request.url.netloc
    return f"{request.url.scheme}://{host}"


async def read_body(request: Request, model: type[BodyT]) -> BodyT:
    """
    Parse a JSON body after the bearer gate has run.

    Raises:
        ValidationError: If the body is not JSON or does not fit the model
    """
    try:
        return model.model_validate(await request.json())
    except (ValueError, BodyValidationError) as e:
        raise ValidationError("Invalid request body") from e


# ==================== Categories ====================


@router.post(
    "/add-icon-category",
    response_model=MessageResponse,
    summary="Add category",
)
async def add_icon_category(
    request: Request,
    store: IconStore = Depends(get_icon_store),
):
    """
    Add an empty category to the icon library.

    - **name**: Category key (must not already exist, even as a deleted category)
    """
    body = await read_body(request, CategoryNameRequest)
    if not body.name:
        raise ValidationError("Category name is required")

    await store.add_category(body.name)
    return MessageResponse(message=f"Category '{body.name}' added successfully")


@router.get(
    "/icon-categories",
    response_model=CategoryListResponse,
    summary="List categories",
)
async def list_icon_categories(store: IconStore = Depends(get_icon_store)):
    """
    List non-deleted categories with their icon URLs, keyed by capitalized name.
    """
    try:
        categories = await store.list_categories()
    except IconLibraryError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"status": False, "message": e.message},
        )
    return CategoryListResponse(data=categories)


@router.get(
    "/icon-category/{name}",
    response_model=CategoryResponse,
    summary="Get a single category",
)
async def get_icon_category(
    name: str,
    store: IconStore = Depends(get_icon_store),
):
    """
    Get one category by its exact stored name, deleted or not.
    """
    category = await store.get_category(name)
    return CategoryResponse(category={name: category})


@router.patch(
    "/delete-icon-category",
    response_model=MessageResponse,
    summary="Soft-delete category",
)
async def delete_icon_category(
    request: Request,
    store: IconStore = Depends(get_icon_store),
):
    """
    Mark a category as deleted. It disappears from listings but keeps its icons.
    """
    body = await read_body(request, CategoryNameRequest)
    if not body.name:
        raise ValidationError("Category name is required")

    await store.delete_category(body.name)
    return MessageResponse(message=f"Category '{body.name}' marked as deleted")


# ==================== Icons ====================


@router.post(
    "/icon-category/{name}/upload",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload icons",
)
async def upload_icons(
    name: str,
    request: Request,
    handler: UploadHandler = Depends(get_upload_handler),
):
    """
    Upload one or more images (multipart field `icons`) into a category.

    The category name is matched in lower case. Each file must be an image
    of at most 5MB.
    """
    try:
        form = await request.form()
    except HTTPException as e:
        raise ValidationError(e.detail) from e

    try:
        files = collect_upload_files(form)
        result = await handler.upload(
            name.lower(),
            files,
            base_url=request_base_url(request),
        )
    finally:
        await form.close()
    return UploadResponse(
        message=f"{len(result.icon_urls)} icon(s) uploaded successfully",
        data=result,
    )


@router.delete(
    "/icon-category/{name}/icon",
    response_model=MessageResponse,
    summary="Delete an icon",
)
async def delete_icon(
    name: str,
    request: Request,
    store: IconStore = Depends(get_icon_store),
):
    """
    Remove one icon URL from a category and delete the stored file.

    - **iconUrl**: The URL as returned by the upload endpoint
    """
    body = await read_body(request, DeleteIconRequest)
    if not body.icon_url:
        raise ValidationError("Icon URL is required")

    category_name = name.lower()
    await store.delete_icon(category_name, body.icon_url)
    return MessageResponse(
        message=f"Icon deleted successfully from category '{category_name}'"
    )
