"""
Shared response schemas.
"""

import math
from typing import Generic, List, Sequence, Type, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)


class Page(BaseModel, Generic[T]):
    """Schema for a paginated list response."""

    items: List[T] = Field(..., description="Records on this page")
    total: int = Field(..., description="Total number of matching records", examples=[150])
    page: int = Field(..., description="Current page number", examples=[1])
    page_size: int = Field(..., description="Number of records per page", examples=[10])
    total_pages: int = Field(..., description="Total number of pages", examples=[15])
    has_next: bool = Field(..., description="Whether there are more pages")
    has_previous: bool = Field(..., description="Whether there are previous pages")


def paginate(schema: Type[T], records: Sequence, total: int, page: int, page_size: int) -> Page[T]:
    """Build a page of ``schema`` items from ORM records."""
    total_pages = math.ceil(total / page_size) if page_size else 0
    return Page[schema](
        items=[schema.model_validate(record) for record in records],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1
    )


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorMessage(BaseModel):
    """Flat error body used by the verification request and dashboard endpoints."""

    error: str = Field(..., examples=["Failed to fetch verification request"])
