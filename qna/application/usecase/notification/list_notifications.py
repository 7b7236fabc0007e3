"""List notifications use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.common import AuthorSummary, Pagination, parse_id
from qna.domain.model import Notification, User
from qna.domain.service import NotificationService, UserService
from qna.domain.value import NotificationType, UserId


class NotificationItem(BaseModel):
    """Notification as returned to clients."""

    id: str
    sender: AuthorSummary | None
    type: NotificationType
    message: str
    related_question_id: str | None
    related_answer_id: str | None
    is_read: bool
    read_at: datetime | None
    created_at: datetime

    @classmethod
    def from_notification(
        cls, notification: Notification, sender: User | None
    ) -> "NotificationItem":
        """Build response from a domain notification and its sender."""
        return cls(
            id=str(notification.id),
            sender=AuthorSummary.from_user(sender),
            type=notification.type,
            message=notification.message,
            related_question_id=(
                str(notification.related_question_id)
                if notification.related_question_id
                else None
            ),
            related_answer_id=(
                str(notification.related_answer_id)
                if notification.related_answer_id
                else None
            ),
            is_read=notification.is_read,
            read_at=notification.read_at,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=50)
    unread_only: bool = False


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int
    pagination: Pagination


class ListNotificationsUseCase:
    """Use case for reading the current user's notification feed."""

    def __init__(
        self,
        notification_service: NotificationService,
        user_service: UserService,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service
        """
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Args:
            request: Recipient, pagination and unread filter

        Returns:
            Notifications newest first, with unread count and page metadata
        """
        with logfire.span(
            "list_notifications.execute",
            user_id=request.user_id,
            page=request.page,
            unread_only=request.unread_only,
        ):
            recipient_id = UserId(parse_id(request.user_id, "User"))

            notifications = await self.notification_service.list_for_recipient(
                recipient_id,
                unread_only=request.unread_only,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )
            total = await self.notification_service.count_for_recipient(
                recipient_id, unread_only=request.unread_only
            )
            unread_count = await self.notification_service.count_for_recipient(
                recipient_id, unread_only=True
            )

            senders = await self.user_service.get_by_ids(
                [n.sender_id for n in notifications]
            )

            return ListNotificationsResponse(
                notifications=[
                    NotificationItem.from_notification(n, senders.get(n.sender_id))
                    for n in notifications
                ],
                unread_count=unread_count,
                pagination=Pagination.build(request.page, request.limit, total),
            )
