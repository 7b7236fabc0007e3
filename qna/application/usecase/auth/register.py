"""Register use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import UserResponse
from qna.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Sign-up request."""

    username: str
    password: str


class AuthResponse(BaseModel):
    """Authenticated user plus the token to store in the auth cookie."""

    message: str
    user: UserResponse
    token: str


class RegisterUseCase:
    """Use case for creating an account and signing in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Args:
            request: Username and password

        Returns:
            The new user and a session token

        Raises:
            ValidationError: If username or password is malformed
            ConflictError: If the username is taken
        """
        with logfire.span("register.execute", username=request.username):
            user = await self.user_service.register(request.username, request.password)
            token = self.jwt_service.create_token(user)
            return AuthResponse(
                message="User registered successfully",
                user=UserResponse.from_user(user),
                token=token,
            )
