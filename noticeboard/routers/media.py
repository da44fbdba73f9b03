"""
Media API endpoints: upload, metadata and file download.
"""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, File, Form, Path, UploadFile, status
from fastapi.responses import FileResponse
from noticeboard.models.user import User
from noticeboard.services.media import MediaService
from noticeboard.schemas.common import Page, paginate
from noticeboard.schemas.media import MediaResponse, MediaUpdate
from noticeboard.services.error_handler import ERROR_RESPONSES
from noticeboard.utils.dependencies import PageParams, get_media_service, get_optional_current_user
from noticeboard.utils.exceptions import NotFoundError


router = APIRouter(prefix="/media", tags=["Media"])


@router.post(
    "",
    response_model=MediaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload media",
    description="Upload a JPEG, PNG or WebP image. The uploader is recorded as its owner.",
    responses={400: ERROR_RESPONSES[400], 401: ERROR_RESPONSES[401], 422: ERROR_RESPONSES[422]}
)
async def upload_media(
    file: UploadFile = File(..., description="Image file"),
    alt: Optional[str] = Form(None, max_length=255),
    is_public: bool = Form(False),
    current_user: Optional[User] = Depends(get_optional_current_user),
    media_service: MediaService = Depends(get_media_service)
) -> MediaResponse:
    media = await media_service.upload(file, current_user, alt=alt, is_public=is_public)
    return MediaResponse.model_validate(media)


@router.get("", response_model=Page[MediaResponse], summary="List readable media")
async def list_media(
    params: PageParams = Depends(),
    current_user: Optional[User] = Depends(get_optional_current_user),
    media_service: MediaService = Depends(get_media_service)
) -> Page[MediaResponse]:
    records, total = await media_service.list(current_user, page=params.page, limit=params.limit)
    return paginate(MediaResponse, records, total, params.page, params.limit)


@router.get("/{media_id}", response_model=MediaResponse, summary="Get media metadata")
async def get_media(
    media_id: UUID = Path(..., description="Media ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    media_service: MediaService = Depends(get_media_service)
) -> MediaResponse:
    return MediaResponse.model_validate(await media_service.get(media_id, current_user))


@router.get("/{media_id}/file", summary="Download media file", response_class=FileResponse)
async def download_media(
    media_id: UUID = Path(..., description="Media ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    media_service: MediaService = Depends(get_media_service)
) -> FileResponse:
    media = await media_service.get(media_id, current_user)
    path = media_service.file_path(media)
    if not path.exists():
        raise NotFoundError("Media file", str(media_id))
    return FileResponse(path, media_type=media.mime_type, filename=media.filename)


@router.patch(
    "/{media_id}",
    response_model=MediaResponse,
    summary="Update media metadata",
    responses={403: ERROR_RESPONSES[403], 404: ERROR_RESPONSES[404]}
)
async def update_media(
    media_data: MediaUpdate,
    media_id: UUID = Path(..., description="Media ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    media_service: MediaService = Depends(get_media_service)
) -> MediaResponse:
    media = await media_service.update(media_id, media_data.model_dump(exclude_unset=True), current_user)
    return MediaResponse.model_validate(media)


@router.delete(
    "/{media_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete media",
    responses={403: ERROR_RESPONSES[403], 404: ERROR_RESPONSES[404]}
)
async def delete_media(
    media_id: UUID = Path(..., description="Media ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    media_service: MediaService = Depends(get_media_service)
) -> None:
    await media_service.delete(media_id, current_user)
