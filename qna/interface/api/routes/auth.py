"""Authentication routes.

The session token is returned in the body and also set as an HTTP-only
``auth_token`` cookie, which every authenticated route reads.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status

from qna.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from qna.application.usecase.common import MessageResponse, UserResponse
from qna.config import Settings
from qna.interface.api.auth import clear_auth_cookie, set_auth_cookie
from qna.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account and start a session.

    Args:
        request: Username and password
        response: Response used to set the auth cookie
        register_use_case: Register use case from DI
        settings: Application settings (injected)

    Returns:
        The new user and their session token
    """
    result = await register_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    logger.info(f"User registered: {result.user.username}")
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Log in with username and password.

    Raises:
        AuthenticationError: On unknown username or wrong password (401)
    """
    result = await login_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> MessageResponse:
    """Log out by clearing the auth cookie."""
    clear_auth_cookie(response, settings)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Get the currently authenticated user.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Current user

    Raises:
        HTTPException: 401 if no cookie is present
        JWTError: If the token is invalid or expired (401)
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
