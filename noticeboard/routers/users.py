"""
User management API endpoints.
"""

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Path, status
from noticeboard.models.user import User
from noticeboard.services.user import UserService
from noticeboard.schemas.common import Page, paginate
from noticeboard.schemas.user import UserCreate, UserUpdate, UserResponse
from noticeboard.services.error_handler import ERROR_RESPONSES
from noticeboard.utils.dependencies import PageParams, get_optional_current_user, get_user_service


router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=Page[UserResponse], summary="List users", responses={401: ERROR_RESPONSES[401]})
async def list_users(
    params: PageParams = Depends(),
    current_user: Optional[User] = Depends(get_optional_current_user),
    user_service: UserService = Depends(get_user_service)
) -> Page[UserResponse]:
    users, total = await user_service.list(current_user, page=params.page, limit=params.limit)
    return paginate(UserResponse, users, total, params.page, params.limit)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create an account. Only administrators may assign a role.",
    responses={403: ERROR_RESPONSES[403], 409: ERROR_RESPONSES[409]}
)
async def create_user(
    user_data: UserCreate,
    current_user: Optional[User] = Depends(get_optional_current_user),
    user_service: UserService = Depends(get_user_service)
) -> UserResponse:
    user = await user_service.create(user_data.model_dump(exclude_unset=True), current_user)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse, summary="Get user", responses={404: ERROR_RESPONSES[404]})
async def get_user(
    user_id: UUID = Path(..., description="User ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    user_service: UserService = Depends(get_user_service)
) -> UserResponse:
    return UserResponse.model_validate(await user_service.get(user_id, current_user))


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Users update their own profile; administrators update anyone.",
    responses={403: ERROR_RESPONSES[403], 404: ERROR_RESPONSES[404]}
)
async def update_user(
    user_data: UserUpdate,
    user_id: UUID = Path(..., description="User ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    user_service: UserService = Depends(get_user_service)
) -> UserResponse:
    user = await user_service.update(user_id, user_data.model_dump(exclude_unset=True), current_user)
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user (admin only)",
    responses={403: ERROR_RESPONSES[403], 404: ERROR_RESPONSES[404]}
)
async def delete_user(
    user_id: UUID = Path(..., description="User ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    user_service: UserService = Depends(get_user_service)
) -> None:
    await user_service.delete(user_id, current_user)
