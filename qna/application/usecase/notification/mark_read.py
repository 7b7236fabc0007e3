"""Mark notifications as read use cases."""

from datetime import datetime

from pydantic import BaseModel

from qna.application.usecase.common import parse_id
from qna.domain.service import NotificationService
from qna.domain.value import NotificationId, UserId


class MarkNotificationReadRequest(BaseModel):
    """Mark single notification as read request."""

    notification_id: str
    user_id: str


class NotificationReadState(BaseModel):
    """Read state of a notification."""

    id: str
    is_read: bool
    read_at: datetime | None


class MarkNotificationReadResponse(BaseModel):
    """Mark single notification as read response."""

    message: str = "Notification marked as read"
    notification: NotificationReadState


class MarkNotificationReadUseCase:
    """Use case for marking one notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark notification read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification does not exist, belongs to
                someone else or the ID is malformed
        """
        notification = await self.notification_service.mark_read(
            NotificationId(parse_id(request.notification_id, "Notification")),
            UserId(parse_id(request.user_id, "User")),
        )
        return MarkNotificationReadResponse(
            notification=NotificationReadState(
                id=str(notification.id),
                is_read=notification.is_read,
                read_at=notification.read_at,
            )
        )


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications as read request."""

    user_id: str


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications as read response."""

    message: str = "All notifications marked as read"
    modified_count: int


class MarkAllNotificationsReadUseCase:
    """Use case for clearing the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark all notifications read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        """Execute mark all read flow."""
        modified = await self.notification_service.mark_all_read(
            UserId(parse_id(request.user_id, "User"))
        )
        return MarkAllNotificationsReadResponse(modified_count=modified)
