"""
Media service for uploads, storage and access-checked retrieval.
"""

from pathlib import Path
from typing import Any, Dict, Optional
from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.access import authenticated, media_read, media_update, media_delete, ensure_allowed
from noticeboard.models.media import Media
from noticeboard.models.user import User
from noticeboard.repositories.media import MediaRepository
from noticeboard.services.base import CollectionService
from noticeboard.utils.file_utils import FileStorage, FileValidator
import logging

logger = logging.getLogger(__name__)


class MediaService(CollectionService[Media]):
    """
    Media collection.

    Files without an uploader and public files are readable by anyone;
    uploaders read and manage their own files.
    """

    resource_name = "Media"

    read_access = staticmethod(media_read)
    create_access = staticmethod(authenticated)
    update_access = staticmethod(media_update)
    delete_access = staticmethod(media_delete)

    def __init__(self, db: AsyncSession, storage: Optional[FileStorage] = None):
        super().__init__(MediaRepository(db))
        self.storage = storage or FileStorage()

    async def before_create(self, data: Dict[str, Any], user: Optional[User]) -> Dict[str, Any]:
        data["uploaded_by_id"] = user.id if user is not None else None
        return data

    async def upload(
        self,
        file: UploadFile,
        user: Optional[User],
        alt: Optional[str] = None,
        is_public: bool = False
    ) -> Media:
        """
        Validate, store and record an uploaded image.

        Raises:
            UnauthorizedError: If the requester is anonymous
            UnsupportedFileTypeError / FileSizeExceededError / ValidationError:
                If the file is rejected
        """
        ensure_allowed(self.create_access(user), user, "upload media")

        content, width, height, mime_type = await FileValidator.validate_upload_file(file)
        relative_path = self.storage.generate_relative_path(file.filename)
        file_size = await self.storage.save(relative_path, content)

        try:
            media = await self.create({
                "filename": Path(file.filename).name,
                "file_path": relative_path,
                "mime_type": mime_type,
                "file_size": file_size,
                "width": width,
                "height": height,
                "alt": alt,
                "is_public": is_public,
            }, user)
        except Exception:
            self.storage.delete(relative_path)
            raise

        logger.info(f"Uploaded media {media.id} ({file_size} bytes)")
        return media

    def file_path(self, media: Media) -> Path:
        return self.storage.resolve(media.file_path)

    async def after_delete(self, obj: Media) -> None:
        try:
            self.storage.delete(obj.file_path)
        except OSError as e:
            logger.error(f"Failed to remove file for media {obj.id}: {e}")
