"""
Upload handler for icon assets.

Files are validated as a batch, written to the public icons directory under
generated names, and then their URLs are appended to a category. Any failure
after the files are written removes them again.
"""
import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path

from starlette.datastructures import FormData, UploadFile

from iconhub.core.errors import (
    IconLibraryError,
    InvalidStateError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from iconhub.schemas.icons import UploadedFileInfo, UploadResult
from iconhub.services.icon_store import IconStore

logger = logging.getLogger(__name__)

# Multipart field names that may carry icon files
UPLOAD_FIELDS = ("icons", "icons[]")


@dataclass
class StoredFile:
    """A validated upload written to disk."""
    path: Path
    original_name: str
    size: int

    @property
    def file_name(self) -> str:
        return self.path.name


def is_allowed_image(content_type: str | None) -> bool:
    """Accept any image/* MIME type, SVG included."""
    if not content_type:
        return False
    return content_type.startswith("image/") or content_type == "image/svg+xml"


def collect_upload_files(form: FormData) -> list[UploadFile]:
    """
    Pick the icon files out of a parsed multipart form.

    Non-file fields are ignored.

    Raises:
        ValidationError: If a file arrives under any other field name
    """
    files = []
    for field, value in form.multi_items():
        if not isinstance(value, UploadFile):
            continue
        if field not in UPLOAD_FIELDS:
            raise ValidationError("Unexpected file field")
        files.append(value)
    return files


def generate_icon_filename(original_name: str) -> str:
    """Unique name: ``icon-<epoch ms>-<random>.<original extension>``."""
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"icon-{unique_suffix}{Path(original_name).suffix}"


class UploadHandler:
    """Validates, stores and registers uploaded icon files."""

    def __init__(self, store: IconStore, icons_dir: Path, max_file_size: int):
        self.store = store
        self.icons_dir = Path(icons_dir)
        self.max_file_size = max_file_size

    async def read_validated(self, files: list[UploadFile]) -> list[tuple[UploadFile, bytes]]:
        """
        Validate every file before anything is written.

        Raises:
            ValidationError: If no files were given, a MIME type is not an
                image, or a file exceeds the size limit
        """
        if not files:
            raise ValidationError("No files uploaded")

        validated = []
        for upload in files:
            if not is_allowed_image(upload.content_type):
                logger.info(f"File rejected: {upload.content_type}")
                raise ValidationError("Only image files are allowed")

            content = await upload.read(self.max_file_size + 1)
            if len(content) > self.max_file_size:
                raise ValidationError(
                    f"File size too large. Maximum size is "
                    f"{self.max_file_size // (1024 * 1024)}MB"
                )
            validated.append((upload, content))
        return validated

    def write_files(self, validated: list[tuple[UploadFile, bytes]]) -> list[StoredFile]:
        """Write validated uploads to the icons directory under generated names."""
        self.icons_dir.mkdir(parents=True, exist_ok=True)
        stored = []
        for upload, content in validated:
            original_name = upload.filename or ""
            path = self.icons_dir / generate_icon_filename(original_name)
            path.write_bytes(content)
            stored.append(StoredFile(path=path, original_name=original_name, size=len(content)))
        return stored

    @staticmethod
    def cleanup(stored: list[StoredFile]) -> None:
        """Best-effort removal of files written for this request."""
        for item in stored:
            if item.path.exists():
                item.path.unlink()
                logger.info(f"Removed uploaded file {item.file_name}")

    async def upload(
        self,
        category_name: str,
        files: list[UploadFile],
        base_url: str,
    ) -> UploadResult:
        """
        Store uploaded icons and append their URLs to a category.

        Args:
            category_name: Category key (already normalized by the caller)
            files: Uploaded files
            base_url: ``scheme://host`` used to build absolute icon URLs

        Returns:
            UploadResult with URLs and per-file metadata

        Raises:
            ValidationError: Invalid or missing files (nothing is written)
            NotFoundError: Icons document or category missing
            InvalidStateError: Category is deleted
            StorageError: Database update failed or unexpected error
        """
        validated = await self.read_validated(files)

        stored: list[StoredFile] = []
        try:
            stored = self.write_files(validated)

            library = await self.store.load_library()
            category = library.icons.get(category_name)
            if category is None:
                raise NotFoundError(f"Category '{category_name}' not found")
            if category.deleted:
                raise InvalidStateError(
                    f"Category '{category_name}' is deleted and cannot accept new icons"
                )

            icon_urls = [f"{base_url}/icons/{item.file_name}" for item in stored]

            modified = await self.store.append_icons(category_name, icon_urls)
            if modified == 0:
                raise StorageError("Failed to update database")
        except IconLibraryError:
            self.cleanup(stored)
            raise
        except Exception as e:
            self.cleanup(stored)
            logger.exception(f"Error uploading icons: {e}")
            raise StorageError("Server error during file upload") from e

        logger.info(f"Uploaded {len(icon_urls)} icon(s) to '{category_name}'")
        return UploadResult(
            category=category_name,
            icon_urls=icon_urls,
            files=[
                UploadedFileInfo(
                    file_name=item.file_name,
                    original_name=item.original_name,
                    file_size=item.size,
                )
                for item in stored
            ],
        )
