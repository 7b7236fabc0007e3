"""Get current user use case."""

from pydantic import BaseModel

from qna.application.usecase.common import UserResponse, load_actor
from qna.domain.service import JWTService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a session token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow.

        Raises:
            JWTError: If the token is invalid or expired
            AuthenticationError: If the account no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await load_actor(self.user_service, payload.user_id)
        return UserResponse.from_user(user)
