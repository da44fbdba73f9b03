"""
Pydantic schemas for the dashboard.
"""

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    """Listing and inquiry counts; scoped to the requester unless admin."""

    total_properties: int = Field(..., examples=[12])
    total_inquiries: int = Field(..., examples=[30])
    pending_inquiries: int = Field(..., description="Inquiries still in the 'new' state", examples=[4])
