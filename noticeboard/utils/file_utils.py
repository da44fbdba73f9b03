"""
File upload utilities for media validation and storage.
"""

import io
import uuid
from pathlib import Path
from typing import Optional, Tuple
from PIL import Image, UnidentifiedImageError
import aiofiles
from fastapi import UploadFile

from noticeboard.config import settings
from noticeboard.utils.exceptions import (
    FileSizeExceededError,
    UnsupportedFileTypeError,
    ValidationError
)


class FileValidator:
    """Validation of uploaded image files."""

    # Supported image formats: MIME type -> (extensions, Pillow format names)
    SUPPORTED_FORMATS = {
        "image/jpeg": ([".jpg", ".jpeg"], ["jpeg"]),
        "image/png": ([".png"], ["png"]),
        "image/webp": ([".webp"], ["webp"]),
    }

    @classmethod
    def validate_mime_type(cls, mime_type: Optional[str]) -> str:
        allowed = [t for t in settings.allowed_file_types if t in cls.SUPPORTED_FORMATS]
        if not mime_type or mime_type not in allowed:
            raise UnsupportedFileTypeError(mime_type or "unknown", allowed)
        return mime_type

    @classmethod
    def validate_file_extension(cls, filename: Optional[str], mime_type: str) -> str:
        """
        Validate that the filename's extension matches its MIME type.

        Returns:
            Lowercase file extension
        """
        if not filename:
            raise ValidationError("Filename is required")

        extension = Path(filename).suffix.lower()
        extensions, _ = cls.SUPPORTED_FORMATS[mime_type]
        if extension not in extensions:
            raise ValidationError(
                f"File extension '{extension}' does not match type {mime_type}. "
                f"Expected: {', '.join(extensions)}"
            )
        return extension

    @staticmethod
    def validate_file_size(file_size: int, max_size: Optional[int] = None) -> int:
        if file_size <= 0:
            raise ValidationError("File is empty")

        max_allowed = max_size or settings.max_file_size
        if file_size > max_allowed:
            raise FileSizeExceededError(file_size, max_allowed)
        return file_size

    @classmethod
    def read_image_dimensions(cls, content: bytes, mime_type: str) -> Tuple[int, int]:
        """
        Open the content with Pillow and check it is the declared format.

        Returns:
            Tuple of (width, height)
        """
        _, formats = cls.SUPPORTED_FORMATS[mime_type]
        try:
            with Image.open(io.BytesIO(content)) as img:
                if (img.format or "").lower() not in formats:
                    raise ValidationError(f"File content doesn't match declared type {mime_type}")
                return img.size
        except (UnidentifiedImageError, OSError) as e:
            raise ValidationError(f"Invalid image file: {e}")

    @classmethod
    async def validate_upload_file(cls, file: UploadFile) -> Tuple[bytes, int, int, str]:
        """
        Run every check on an uploaded file.

        Returns:
            Tuple of (content, width, height, mime_type)
        """
        mime_type = cls.validate_mime_type(file.content_type)
        cls.validate_file_extension(file.filename, mime_type)

        await file.seek(0)
        content = await file.read()
        cls.validate_file_size(len(content))

        width, height = cls.read_image_dimensions(content, mime_type)
        return content, width, height, mime_type


class FileStorage:
    """Stores media under the configured upload directory."""

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir or settings.upload_dir)

    def generate_relative_path(self, original_filename: str) -> str:
        """Unique path relative to the upload directory, keeping the extension."""
        extension = Path(original_filename).suffix.lower()
        return f"media/{uuid.uuid4()}{extension}"

    def resolve(self, relative_path: str) -> Path:
        """Absolute path of a stored file; rejects paths escaping the upload directory."""
        base = self.base_dir.resolve()
        full_path = (base / relative_path).resolve()
        if base not in full_path.parents:
            raise ValidationError("Invalid file path")
        return full_path

    async def save(self, relative_path: str, content: bytes) -> int:
        """
        Write content to disk.

        Returns:
            Number of bytes written
        """
        full_path = self.resolve(relative_path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            async with aiofiles.open(full_path, "wb") as f:
                await f.write(content)
        except OSError:
            if full_path.exists():
                full_path.unlink()
            raise
        return len(content)

    def delete(self, relative_path: str) -> bool:
        full_path = self.resolve(relative_path)
        if full_path.exists():
            full_path.unlink()
            return True
        return False
