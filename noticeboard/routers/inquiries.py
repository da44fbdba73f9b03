"""
Inquiry API endpoints.
"""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Path, Query, status
from noticeboard.models.inquiry import Inquiry
from noticeboard.models.user import User
from noticeboard.services.inquiry import InquiryService
from noticeboard.schemas.common import Page, paginate
from noticeboard.schemas.inquiry import InquiryCreate, InquiryUpdate, InquiryResponse
from noticeboard.services.error_handler import ERROR_RESPONSES
from noticeboard.utils.dependencies import PageParams, get_inquiry_service, get_optional_current_user


router = APIRouter(prefix="/inquiries", tags=["Inquiries"])


@router.post(
    "",
    response_model=InquiryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send an inquiry about a property",
    responses={401: ERROR_RESPONSES[401], 404: ERROR_RESPONSES[404], 422: ERROR_RESPONSES[422]}
)
async def create_inquiry(
    inquiry_data: InquiryCreate,
    current_user: Optional[User] = Depends(get_optional_current_user),
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> InquiryResponse:
    inquiry = await inquiry_service.create(inquiry_data.model_dump(exclude_unset=True), current_user)
    return InquiryResponse.model_validate(inquiry)


@router.get("", response_model=Page[InquiryResponse], summary="List inquiries", responses={401: ERROR_RESPONSES[401]})
async def list_inquiries(
    params: PageParams = Depends(),
    property_id: Optional[UUID] = Query(None, description="Only inquiries about this property"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> Page[InquiryResponse]:
    where = [Inquiry.property_id == property_id] if property_id else []
    inquiries, total = await inquiry_service.list(
        current_user, where=where, page=params.page, limit=params.limit
    )
    return paginate(InquiryResponse, inquiries, total, params.page, params.limit)


@router.get("/{inquiry_id}", response_model=InquiryResponse, summary="Get inquiry", responses={404: ERROR_RESPONSES[404]})
async def get_inquiry(
    inquiry_id: UUID = Path(..., description="Inquiry ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> InquiryResponse:
    return InquiryResponse.model_validate(await inquiry_service.get(inquiry_id, current_user))


@router.patch(
    "/{inquiry_id}",
    response_model=InquiryResponse,
    summary="Update inquiry status or response",
    responses={401: ERROR_RESPONSES[401], 404: ERROR_RESPONSES[404]}
)
async def update_inquiry(
    inquiry_data: InquiryUpdate,
    inquiry_id: UUID = Path(..., description="Inquiry ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> InquiryResponse:
    inquiry = await inquiry_service.update(inquiry_id, inquiry_data.model_dump(exclude_unset=True), current_user)
    return InquiryResponse.model_validate(inquiry)


@router.delete(
    "/{inquiry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete inquiry",
    responses={403: ERROR_RESPONSES[403], 404: ERROR_RESPONSES[404]}
)
async def delete_inquiry(
    inquiry_id: UUID = Path(..., description="Inquiry ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> None:
    await inquiry_service.delete(inquiry_id, current_user)
