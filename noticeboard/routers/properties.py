"""
Property listing API endpoints for CRUD operations, search and admin review.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Path, Query, status
from noticeboard.models.property import PropertyCategory, ListingType, PropertyStatus
from noticeboard.models.user import User
from noticeboard.repositories.property import PropertySearchFilters
from noticeboard.services.property import PropertyService
from noticeboard.schemas.common import Page, paginate
from noticeboard.schemas.property import PropertyCreate, PropertyUpdate, PropertyReview, PropertyResponse
from noticeboard.services.error_handler import ERROR_RESPONSES
from noticeboard.utils.dependencies import (
    PageParams,
    get_current_admin_user,
    get_optional_current_user,
    get_property_service
)


router = APIRouter(prefix="/properties", tags=["Properties"])


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new property",
    description="Create a listing. Requires a verified account or the admin role; listings start pending.",
    responses={401: ERROR_RESPONSES[401], 403: ERROR_RESPONSES[403], 422: ERROR_RESPONSES[422]}
)
async def create_property(
    property_data: PropertyCreate,
    current_user: Optional[User] = Depends(get_optional_current_user),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    prop = await property_service.create(property_data.model_dump(exclude_unset=True), current_user)
    return PropertyResponse.model_validate(prop)


@router.get(
    "",
    response_model=Page[PropertyResponse],
    summary="Search properties",
    description="Approved listings for everyone, plus the requester's own listings. Admins see all."
)
async def list_properties(
    params: PageParams = Depends(),
    search: Optional[str] = Query(None, description="Search in title, description and address"),
    property_type: Optional[PropertyCategory] = Query(None),
    listing_type: Optional[ListingType] = Query(None),
    status_filter: Optional[PropertyStatus] = Query(None, alias="status"),
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    min_area: Optional[Decimal] = Query(None, ge=0),
    max_area: Optional[Decimal] = Query(None, ge=0),
    owner_id: Optional[UUID] = Query(None),
    featured: Optional[bool] = Query(None),
    neighborhood_id: Optional[UUID] = Query(None),
    amenity_id: Optional[UUID] = Query(None, description="Only listings offering this amenity"),
    sort: Optional[str] = Query(None, description="Field to sort by, prefix with '-' for descending"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    property_service: PropertyService = Depends(get_property_service)
) -> Page[PropertyResponse]:
    filters = PropertySearchFilters(
        search_text=search,
        property_type=property_type,
        listing_type=listing_type,
        status=status_filter,
        min_price=min_price,
        max_price=max_price,
        min_area=min_area,
        max_area=max_area,
        owner_id=owner_id,
        featured=featured,
        neighborhood_id=neighborhood_id,
        amenity_id=amenity_id
    )
    properties, total = await property_service.search(
        filters, current_user, page=params.page, limit=params.limit, order_by=sort
    )
    return paginate(PropertyResponse, properties, total, params.page, params.limit)


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get property", responses={404: ERROR_RESPONSES[404]})
async def get_property(
    property_id: UUID = Path(..., description="Property ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    return PropertyResponse.model_validate(await property_service.get(property_id, current_user))


@router.patch(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Update property",
    description="Owners update their own listings; review fields are admin only.",
    responses={403: ERROR_RESPONSES[403], 404: ERROR_RESPONSES[404]}
)
async def update_property(
    property_data: PropertyUpdate,
    property_id: UUID = Path(..., description="Property ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    prop = await property_service.update(property_id, property_data.model_dump(exclude_unset=True), current_user)
    return PropertyResponse.model_validate(prop)


@router.patch(
    "/{property_id}/review",
    response_model=PropertyResponse,
    summary="Review property (admin only)",
    description="Approve, reject or mark a listing as sold.",
    responses={403: ERROR_RESPONSES[403], 404: ERROR_RESPONSES[404]}
)
async def review_property(
    review: PropertyReview,
    property_id: UUID = Path(..., description="Property ID"),
    current_user: User = Depends(get_current_admin_user),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    prop = await property_service.review(property_id, review.status, current_user, admin_notes=review.admin_notes)
    return PropertyResponse.model_validate(prop)


@router.delete(
    "/{property_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete property",
    responses={403: ERROR_RESPONSES[403], 404: ERROR_RESPONSES[404]}
)
async def delete_property(
    property_id: UUID = Path(..., description="Property ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    property_service: PropertyService = Depends(get_property_service)
) -> None:
    await property_service.delete(property_id, current_user)
