"""
Icon store accessor over the single icon library document.
"""
import logging
from pathlib import Path, PurePosixPath
from typing import Any
from urllib.parse import urlparse

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from iconhub.core.errors import (
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from iconhub.models.icon_library import Category, IconLibrary

logger = logging.getLogger(__name__)


def capitalize_first(name: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return name[:1].upper() + name[1:]


class IconStore:
    """
    Reads and writes the icon library document.

    Concurrency: every mutation here is a read (``find_one``) followed by an
    independent write (``update_one``) with no transaction, lock or version
    check. Two concurrent writers can both pass the precondition check on the
    same snapshot and the later write wins (lost update). This is a known
    limitation of the single-document layout, not something callers can rely on.
    """

    def __init__(self, collection: AsyncIOMotorCollection, icons_dir: Path):
        """Initialize with the icons collection and the upload directory."""
        self.collection = collection
        self.icons_dir = Path(icons_dir)

    # ==================== Document access ====================

    async def _find_document(self) -> dict[str, Any] | None:
        try:
            return await self.collection.find_one({})
        except PyMongoError as e:
            logger.error(f"Error reading icons document: {e}")
            raise StorageError("Server error") from e

    async def _update(self, doc_id: Any, update: dict[str, Any]) -> int:
        try:
            result = await self.collection.update_one({"_id": doc_id}, update)
        except PyMongoError as e:
            logger.error(f"Error updating icons document: {e}")
            raise StorageError("Server error") from e
        return result.modified_count

    async def _load_raw(self) -> dict[str, Any]:
        doc = await self._find_document()
        if doc is None:
            raise NotFoundError("Icons document not found")
        doc.setdefault("icons", {})
        return doc

    async def load_library(self) -> IconLibrary:
        """
        Load the icon library document.

        Raises:
            NotFoundError: If the document does not exist
        """
        doc = await self._load_raw()
        return IconLibrary(_id=str(doc["_id"]), icons=doc["icons"])

    async def ensure_library(self) -> bool:
        """
        Create an empty icon library document if none exists.

        Returns:
            True if a document was created, False if one already existed
        """
        if await self._find_document() is not None:
            return False
        try:
            await self.collection.insert_one({"icons": {}})
        except PyMongoError as e:
            raise StorageError("Server error") from e
        logger.info("Created empty icons document")
        return True

    # ==================== Categories ====================

    async def list_categories(self) -> dict[str, list[str]]:
        """
        List visible categories keyed by capitalized name.

        Deleted categories are excluded; a category without data maps to [].
        """
        library = await self.load_library()
        return {
            capitalize_first(name): list(category.data)
            for name, category in library.visible_categories().items()
        }

    async def get_category(self, name: str) -> Category:
        """
        Exact-name lookup, returned whether or not the category is deleted.

        Raises:
            NotFoundError: If the document or the category is missing
        """
        doc = await self._find_document()
        if doc is None or not (doc.get("icons") or {}).get(name):
            raise NotFoundError("Category not found")
        return Category(**doc["icons"][name])

    async def add_category(self, name: str) -> None:
        """
        Insert an empty, non-deleted category.

        Raises:
            ValidationError: If the name cannot be used as a document key
            NotFoundError: If the icon library document does not exist
            ConflictError: If the name exists, deleted or not
        """
        if "." in name or name.startswith("$"):
            raise ValidationError("Category name cannot contain '.' or start with '$'")

        doc = await self._load_raw()
        if name in doc["icons"]:
            raise ConflictError("Category already exists")

        await self._update(
            doc["_id"],
            {"$set": {f"icons.{name}": Category().model_dump()}},
        )
        logger.info(f"Added icon category '{name}'")

    async def delete_category(self, name: str) -> None:
        """
        Soft-delete a category. Repeated calls succeed as long as it exists.

        Raises:
            NotFoundError: If the document or the category is missing
        """
        doc = await self._load_raw()
        if name not in doc["icons"]:
            raise NotFoundError("Category not found")

        await self._update(doc["_id"], {"$set": {f"icons.{name}.deleted": True}})
        logger.info(f"Marked icon category '{name}' as deleted")

    # ==================== Icons ====================

    async def append_icons(self, name: str, urls: list[str]) -> int:
        """
        Append URLs to a category's data in a single update.

        Returns:
            Number of documents modified (0 means nothing was written)
        """
        doc = await self._load_raw()
        return await self._update(
            doc["_id"],
            {"$push": {f"icons.{name}.data": {"$each": urls}}},
        )

    async def delete_icon(self, name: str, icon_url: str) -> None:
        """
        Remove an icon URL from a category and delete its file.

        The $pull drops every copy of the URL, not just the first. Upload
        filenames are generated per file, so a URL appears at most once unless
        the document was edited by hand.

        The deleted flag is not checked. The file removal is best-effort: a
        file already gone from disk is not an error.

        Raises:
            NotFoundError: If the category is missing or does not hold the URL
            StorageError: If the database update modified nothing
        """
        doc = await self._load_raw()
        category = doc["icons"].get(name)
        if not category:
            raise NotFoundError(f"Category '{name}' not found")
        if icon_url not in (category.get("data") or []):
            raise NotFoundError("Icon not found in this category")

        modified = await self._update(
            doc["_id"],
            {"$pull": {f"icons.{name}.data": icon_url}},
        )
        if modified == 0:
            raise StorageError("Failed to delete icon from database")

        self.remove_icon_file(icon_url)

    def icon_path(self, icon_url: str) -> Path:
        """Local path of the file an icon URL points to."""
        return self.icons_dir / PurePosixPath(urlparse(icon_url).path).name

    def remove_icon_file(self, icon_url: str) -> None:
        path = self.icon_path(icon_url)
        if path == self.icons_dir:
            return
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug(f"Icon file already absent: {path}")
