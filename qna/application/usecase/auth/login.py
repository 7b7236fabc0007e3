"""Login use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.auth.register import AuthResponse
from qna.application.usecase.common import UserResponse
from qna.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request with username and password."""

    username: str
    password: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Username and password

        Returns:
            The user and a session token

        Raises:
            AuthenticationError: If the credentials do not match
        """
        with logfire.span("login.execute", username=request.username):
            user = await self.user_service.authenticate(
                request.username, request.password
            )
            token = self.jwt_service.create_token(user)
            return AuthResponse(
                message="Login successful",
                user=UserResponse.from_user(user),
                token=token,
            )
