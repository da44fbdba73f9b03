"""
Dashboard endpoint.

Like the verification request endpoints, failures are reported as a
plain ``{"error": ...}`` body with status 500.
"""

from fastapi import APIRouter, Depends
from noticeboard.models.user import User
from noticeboard.schemas.dashboard import DashboardStats
from noticeboard.services.dashboard import DashboardService
from noticeboard.services.error_handler import ERROR_RESPONSES, FAILURE_RESPONSE, failure_response
from noticeboard.utils.dependencies import get_current_user, get_dashboard_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Dashboard statistics",
    description="Site-wide counts for administrators; otherwise the requester's listings and their inquiries.",
    responses={401: ERROR_RESPONSES[401], **FAILURE_RESPONSE}
)
async def get_dashboard_stats(
    current_user: User = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
):
    try:
        return await dashboard_service.stats(current_user)
    except Exception as e:
        logger.error(f"Error fetching dashboard stats for user {current_user.id}: {e}")
        return failure_response("Failed to fetch dashboard stats")
