"""Delete notification use case."""

from pydantic import BaseModel

from qna.application.usecase.common import MessageResponse, parse_id
from qna.domain.service import NotificationService
from qna.domain.value import NotificationId, UserId


class DeleteNotificationRequest(BaseModel):
    """Delete notification request."""

    notification_id: str
    user_id: str


class DeleteNotificationUseCase:
    """Use case for removing a notification from the feed."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize delete notification use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: DeleteNotificationRequest) -> MessageResponse:
        """Execute delete notification flow."""
        await self.notification_service.delete_notification(
            NotificationId(parse_id(request.notification_id, "Notification")),
            UserId(parse_id(request.user_id, "User")),
        )
        return MessageResponse(message="Notification deleted successfully")
