"""
Icon library document model for the icons collection.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Category(BaseModel):
    """A named group of icon URLs. Never removed, only flagged deleted."""
    deleted: bool = Field(default=False, description="Soft-delete flag")
    data: list[str] = Field(
        default_factory=list,
        description="Ordered icon URLs"
    )

    @field_validator("data", mode="before")
    @classmethod
    def missing_data_is_empty(cls, value):
        return value or []


class IconLibrary(BaseModel):
    """
    The single icon library document.

    Shape in MongoDB: ``{"_id": ..., "icons": {<name>: {"deleted": bool, "data": [url, ...]}}}``
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    icons: dict[str, Category] = Field(default_factory=dict)

    class Config:
        populate_by_name = True

    def visible_categories(self) -> dict[str, Category]:
        """Categories not flagged deleted, in document order."""
        return {name: cat for name, cat in self.icons.items() if not cat.deleted}
