"""
Identity verification request endpoints.

Failures inside these handlers are logged and reported as a plain
``{"error": ...}`` body with status 500; authentication failures still
go through the global handlers.
"""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Path, Query, status
from noticeboard.models.user import User
from noticeboard.models.verification_request import ReviewStatus
from noticeboard.services.verification import VerificationRequestService
from noticeboard.schemas.common import Page, SuccessResponse, paginate
from noticeboard.schemas.verification import (
    VerificationRequestCreate,
    VerificationRequestUpdate,
    VerificationRequestResponse
)
from noticeboard.services.error_handler import FAILURE_RESPONSE, failure_response
from noticeboard.utils.dependencies import (
    PageParams,
    get_current_admin_user,
    get_current_user,
    get_verification_service
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/verification-requests", tags=["Verification Requests"])


@router.post(
    "",
    response_model=VerificationRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit or resubmit a verification request",
    responses=FAILURE_RESPONSE
)
async def submit_verification_request(
    request_data: VerificationRequestCreate,
    current_user: User = Depends(get_current_user),
    verification_service: VerificationRequestService = Depends(get_verification_service)
):
    try:
        request = await verification_service.submit(request_data.model_dump(), current_user)
        return VerificationRequestResponse.model_validate(request)
    except Exception as e:
        logger.error(f"Error submitting verification request for user {current_user.id}: {e}")
        return failure_response("Failed to submit verification request")


@router.get(
    "",
    response_model=Page[VerificationRequestResponse],
    summary="List verification requests",
    description="Newest first. Administrators see every request, users only their own.",
    responses=FAILURE_RESPONSE
)
async def list_verification_requests(
    params: PageParams = Depends(),
    status_filter: Optional[ReviewStatus] = Query(None, alias="status"),
    current_user: User = Depends(get_current_user),
    verification_service: VerificationRequestService = Depends(get_verification_service)
):
    try:
        requests, total = await verification_service.list_requests(
            current_user, page=params.page, limit=params.limit, status=status_filter
        )
        return paginate(VerificationRequestResponse, requests, total, params.page, params.limit)
    except Exception as e:
        logger.error(f"Error fetching verification requests: {e}")
        return failure_response("Failed to fetch verification requests")


@router.get(
    "/{request_id}",
    response_model=VerificationRequestResponse,
    summary="Get verification request",
    responses=FAILURE_RESPONSE
)
async def get_verification_request(
    request_id: UUID = Path(..., description="Verification request ID"),
    current_user: User = Depends(get_current_user),
    verification_service: VerificationRequestService = Depends(get_verification_service)
):
    try:
        request = await verification_service.get(request_id, current_user)
        return VerificationRequestResponse.model_validate(request)
    except Exception as e:
        logger.error(f"Error fetching verification request {request_id}: {e}")
        return failure_response("Failed to fetch verification request")


@router.patch(
    "/{request_id}",
    response_model=VerificationRequestResponse,
    summary="Review verification request (admin only)",
    description="Approving or rejecting a request updates the user's verification status.",
    responses=FAILURE_RESPONSE
)
async def review_verification_request(
    request_data: VerificationRequestUpdate,
    request_id: UUID = Path(..., description="Verification request ID"),
    current_user: User = Depends(get_current_admin_user),
    verification_service: VerificationRequestService = Depends(get_verification_service)
):
    try:
        request = await verification_service.review(
            request_id, request_data.model_dump(exclude_unset=True), current_user
        )
        return VerificationRequestResponse.model_validate(request)
    except Exception as e:
        logger.error(f"Error updating verification request {request_id}: {e}")
        return failure_response("Failed to update verification request")


@router.delete(
    "/{request_id}",
    response_model=SuccessResponse,
    summary="Delete verification request (admin only)",
    responses=FAILURE_RESPONSE
)
async def delete_verification_request(
    request_id: UUID = Path(..., description="Verification request ID"),
    current_user: User = Depends(get_current_admin_user),
    verification_service: VerificationRequestService = Depends(get_verification_service)
):
    try:
        await verification_service.delete(request_id, current_user)
        return SuccessResponse(success=True)
    except Exception as e:
        logger.error(f"Error deleting verification request {request_id}: {e}")
        return failure_response("Failed to delete verification request")
