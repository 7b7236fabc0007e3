"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel

from qna.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from qna.domain.service import JWTService
from qna.interface.api.auth import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile.

    Omitted fields are left unchanged.
    """

    username: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=50),
    search: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListUsersResponse:
    """List users, newest first. Admin only.

    Raises:
        NotAuthorizedError: If the caller is not an admin (403)
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await list_users_use_case.execute(
        ListUsersRequest(user_id=user_id, page=page, limit=limit, search=search or None)
    )


@router.put("/profile", response_model=UpdateUserProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Update the caller's username, bio or avatar.

    Raises:
        ValidationError: On invalid values (400)
        ConflictError: If the new username is taken (400)
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await update_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=user_id,
            username=request.username,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
    )


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a public user profile with recent activity.

    Args:
        user_id: User UUID
        get_user_profile_use_case: Get user profile use case from DI

    Returns:
        Profile with question/answer counts and the five most recent of each
    """
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )
