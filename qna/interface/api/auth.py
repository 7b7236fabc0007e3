"""Cookie authentication helpers shared by the API routes."""

from fastapi import HTTPException, Response, status

from qna.config import Settings
from qna.domain.service import JWTService


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Resolve the authenticated user ID from the auth cookie.

    Args:
        jwt_service: JWT token domain service
        auth_token: JWT token from cookie

    Returns:
        User ID carried by the token

    Raises:
        HTTPException: 401 if the cookie is missing or the token is invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )
    return user_id


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token to the response as an HTTP-only cookie."""
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response, settings: Settings) -> None:
    # Same path as when it was set
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
