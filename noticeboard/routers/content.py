"""
CRUD endpoints for the slug-addressed collections: property types,
categories, FAQs, knowledge-base articles, neighborhoods and amenities.
"""

from typing import Optional, Type
from uuid import UUID
from fastapi import APIRouter, Depends, Path, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from noticeboard.database import get_db
from noticeboard.models.user import User
from noticeboard.services.content import (
    SlugCollectionService,
    PropertyTypeService,
    CategoryService,
    FAQService,
    KnowledgeBaseService
)
from noticeboard.services.neighborhood import NeighborhoodService
from noticeboard.services.amenity import AmenityService
from noticeboard.schemas.common import Page, paginate
from noticeboard.schemas.content import (
    PropertyTypeCreate, PropertyTypeUpdate, PropertyTypeResponse,
    CategoryCreate, CategoryUpdate, CategoryResponse,
    FAQCreate, FAQUpdate, FAQResponse,
    KnowledgeBaseCreate, KnowledgeBaseUpdate, KnowledgeBaseResponse
)
from noticeboard.schemas.neighborhood import NeighborhoodCreate, NeighborhoodUpdate, NeighborhoodResponse
from noticeboard.schemas.amenity import AmenityCreate, AmenityUpdate, AmenityResponse
from noticeboard.services.error_handler import ERROR_RESPONSES
from noticeboard.utils.dependencies import PageParams, get_optional_current_user


def build_collection_router(
    prefix: str,
    tag: str,
    service_class: Type[SlugCollectionService],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel]
) -> APIRouter:
    """
    Build list/get/create/update/delete routes for one slug collection.

    Records are addressed by ID; ``GET {prefix}/slug/{slug}`` looks one up
    by its slug.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    name = service_class.resource_name

    async def get_service(db: AsyncSession = Depends(get_db)) -> SlugCollectionService:
        return service_class(db)

    @router.get("", response_model=Page[response_schema], summary=f"List {tag.lower()}")
    async def list_documents(
        params: PageParams = Depends(),
        current_user: Optional[User] = Depends(get_optional_current_user),
        service: SlugCollectionService = Depends(get_service)
    ):
        records, total = await service.list(current_user, page=params.page, limit=params.limit)
        return paginate(response_schema, records, total, params.page, params.limit)

    @router.post(
        "",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {name.lower()}",
        responses={401: ERROR_RESPONSES[401], 409: ERROR_RESPONSES[409]}
    )
    async def create_document(
        data: create_schema,
        current_user: Optional[User] = Depends(get_optional_current_user),
        service: SlugCollectionService = Depends(get_service)
    ):
        return response_schema.model_validate(
            await service.create(data.model_dump(exclude_unset=True), current_user)
        )

    @router.get(
        "/slug/{slug}",
        response_model=response_schema,
        summary=f"Get {name.lower()} by slug",
        responses={404: ERROR_RESPONSES[404]}
    )
    async def get_document_by_slug(
        slug: str = Path(..., description="URL slug"),
        current_user: Optional[User] = Depends(get_optional_current_user),
        service: SlugCollectionService = Depends(get_service)
    ):
        return response_schema.model_validate(await service.get_by_slug(slug, current_user))

    @router.get(
        "/{document_id}",
        response_model=response_schema,
        summary=f"Get {name.lower()}",
        responses={404: ERROR_RESPONSES[404]}
    )
    async def get_document(
        document_id: UUID = Path(..., description=f"{name} ID"),
        current_user: Optional[User] = Depends(get_optional_current_user),
        service: SlugCollectionService = Depends(get_service)
    ):
        return response_schema.model_validate(await service.get(document_id, current_user))

    @router.patch(
        "/{document_id}",
        response_model=response_schema,
        summary=f"Update {name.lower()}",
        responses={401: ERROR_RESPONSES[401], 404: ERROR_RESPONSES[404], 409: ERROR_RESPONSES[409]}
    )
    async def update_document(
        data: update_schema,
        document_id: UUID = Path(..., description=f"{name} ID"),
        current_user: Optional[User] = Depends(get_optional_current_user),
        service: SlugCollectionService = Depends(get_service)
    ):
        return response_schema.model_validate(
            await service.update(document_id, data.model_dump(exclude_unset=True), current_user)
        )

    @router.delete(
        "/{document_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete {name.lower()}",
        responses={401: ERROR_RESPONSES[401], 404: ERROR_RESPONSES[404]}
    )
    async def delete_document(
        document_id: UUID = Path(..., description=f"{name} ID"),
        current_user: Optional[User] = Depends(get_optional_current_user),
        service: SlugCollectionService = Depends(get_service)
    ) -> None:
        await service.delete(document_id, current_user)

    return router


property_types_router = build_collection_router(
    "/property-types", "Property Types", PropertyTypeService,
    PropertyTypeCreate, PropertyTypeUpdate, PropertyTypeResponse
)
categories_router = build_collection_router(
    "/categories", "Categories", CategoryService,
    CategoryCreate, CategoryUpdate, CategoryResponse
)
faqs_router = build_collection_router(
    "/faqs", "FAQs", FAQService,
    FAQCreate, FAQUpdate, FAQResponse
)
knowledge_base_router = build_collection_router(
    "/knowledge-base", "Knowledge Base", KnowledgeBaseService,
    KnowledgeBaseCreate, KnowledgeBaseUpdate, KnowledgeBaseResponse
)
neighborhoods_router = build_collection_router(
    "/neighborhoods", "Neighborhoods", NeighborhoodService,
    NeighborhoodCreate, NeighborhoodUpdate, NeighborhoodResponse
)
amenities_router = build_collection_router(
    "/amenities", "Amenities", AmenityService,
    AmenityCreate, AmenityUpdate, AmenityResponse
)
