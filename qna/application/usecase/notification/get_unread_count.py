"""Get unread notification count use case."""

from pydantic import BaseModel

from qna.application.usecase.common import parse_id
from qna.domain.service import NotificationService
from qna.domain.value import UserId


class GetUnreadCountRequest(BaseModel):
    """Unread count request."""

    user_id: str


class GetUnreadCountResponse(BaseModel):
    """Unread count response."""

    unread_count: int


class GetUnreadCountUseCase:
    """Use case for the unread badge count."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize get unread count use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        """Execute unread count flow."""
        unread_count = await self.notification_service.count_for_recipient(
            UserId(parse_id(request.user_id, "User")), unread_only=True
        )
        return GetUnreadCountResponse(unread_count=unread_count)
