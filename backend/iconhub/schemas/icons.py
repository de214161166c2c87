"""
Icon category request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from iconhub.models.icon_library import Category


class CategoryNameRequest(BaseModel):
    """Body for add/delete category."""
    name: Optional[str] = Field(None, description="Category name")


class DeleteIconRequest(BaseModel):
    """Body for removing one icon from a category."""
    icon_url: Optional[str] = Field(None, alias="iconUrl", description="Absolute icon URL")

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    """Generic success envelope."""
    success: bool = True
    message: str


class CategoryListResponse(BaseModel):
    """Visible categories keyed by capitalized name."""
    status: bool = True
    data: dict[str, list[str]]


class CategoryResponse(BaseModel):
    """A single category keyed by its stored name."""
    success: bool = True
    category: dict[str, Category]


class ShowcaseResponse(BaseModel):
    """Public, unauthenticated listing."""
    status: str = "success"
    data: dict[str, list[str]]


class UploadedFileInfo(BaseModel):
    """Metadata for one stored upload."""
    file_name: str = Field(..., alias="fileName")
    original_name: str = Field(..., alias="originalName")
    file_size: int = Field(..., alias="fileSize")

    class Config:
        populate_by_name = True


class UploadResult(BaseModel):
    """Result of a successful upload."""
    category: str
    icon_urls: list[str] = Field(..., alias="iconUrls")
    files: list[UploadedFileInfo]

    class Config:
        populate_by_name = True


class UploadResponse(BaseModel):
    """Upload response envelope."""
    success: bool = True
    message: str
    data: UploadResult
