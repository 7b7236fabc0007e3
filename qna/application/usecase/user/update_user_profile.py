"""Update user profile use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import UserResponse, load_actor
from qna.domain.service import UserService


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Omitted fields stay unchanged.
    """

    user_id: str  # Authenticated user
    username: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    message: str = "Profile updated successfully"
    user: UserResponse


class UpdateUserProfileUseCase:
    """Use case for editing one's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            ValidationError: If a field is malformed
            ConflictError: If the new username is taken
        """
        with logfire.span("update_user_profile.execute", user_id=request.user_id):
            actor = await load_actor(self.user_service, request.user_id)
            user = await self.user_service.update_profile(
                actor.id,
                username=request.username,
                bio=request.bio,
                avatar_url=request.avatar_url,
            )
            return UpdateUserProfileResponse(user=UserResponse.from_user(user))
