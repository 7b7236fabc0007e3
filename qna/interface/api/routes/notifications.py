"""Notification routes. All of them require authentication."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from qna.application.usecase.common import MessageResponse
from qna.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)
from qna.domain.service import JWTService
from qna.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=50),
    unread: bool = Query(default=False, description="Only unread notifications"),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first.

    Args:
        list_notifications_use_case: List notifications use case from DI
        jwt_service: JWT service for token verification (injected)
        page: Page number (1-based)
        limit: Page size (max 50)
        unread: Restrict to unread notifications
        auth_token: JWT token from cookie

    Returns:
        Notifications, the total unread count and pagination metadata
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=user_id, page=page, limit=limit, unread_only=unread
        )
    )


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    user_id = require_user_id(jwt_service, auth_token)
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=user_id)
    )


@router.put("/mark-all-read", response_model=MarkAllNotificationsReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkAllNotificationsReadResponse:
    """Mark every unread notification of the caller as read."""
    user_id = require_user_id(jwt_service, auth_token)
    return await mark_all_read_use_case.execute(
        MarkAllNotificationsReadRequest(user_id=user_id)
    )


@router.put("/{notification_id}/read", response_model=MarkNotificationReadResponse)
async def mark_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkNotificationReadResponse:
    """Mark one notification as read.

    Raises:
        NotFoundError: If it does not exist or belongs to someone else (404)
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await mark_read_use_case.execute(
        MarkNotificationReadRequest(notification_id=notification_id, user_id=user_id)
    )


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: str,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    user_id = require_user_id(jwt_service, auth_token)
    return await delete_notification_use_case.execute(
        DeleteNotificationRequest(notification_id=notification_id, user_id=user_id)
    )
