"""List users use case (admin only)."""

from pydantic import BaseModel, Field

from qna.application.usecase.common import Pagination, UserResponse, load_actor
from qna.domain.service import UserService


class ListUsersRequest(BaseModel):
    """List users request."""

    user_id: str  # Authenticated admin
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=50)
    search: str | None = None  # Case-insensitive username match


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserResponse]
    pagination: Pagination


class ListUsersUseCase:
    """Use case for the admin user directory."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            NotAuthorizedError: If the requesting user is not an admin
        """
        actor = await load_actor(self.user_service, request.user_id)
        users, total = await self.user_service.list_users(
            actor,
            search=request.search.strip() if request.search else None,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        return ListUsersResponse(
            users=[UserResponse.from_user(u) for u in users],
            pagination=Pagination.build(request.page, request.limit, total),
        )
