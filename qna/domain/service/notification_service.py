"""Notification domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import Notification
from qna.domain.model.common import utc_now
from qna.domain.repository import NotificationRepository
from qna.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Domain service for emitting and reading notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        message: str,
        related_question_id: Optional[QuestionId] = None,
        related_answer_id: Optional[AnswerId] = None,
    ) -> Optional[Notification]:
        """Create and persist a notification.

        Failures are logged and swallowed: a notification that cannot be
        stored never undoes the action that triggered it.

        Args:
            recipient_id: User to notify
            sender_id: User whose action triggered the notification
            type: Notification kind
            message: Human-readable text (truncated to 200 characters)
            related_question_id: Question the event concerns
            related_answer_id: Answer the event concerns

        Returns:
            The saved notification, or None if it could not be stored
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            type=type.value,
        ):
            try:
                notification = Notification(
                    id=NotificationId(uuid4()),
                    recipient_id=recipient_id,
                    sender_id=sender_id,
                    type=type,
                    message=message,
                    related_question_id=related_question_id,
                    related_answer_id=related_answer_id,
                )
                saved = await self.notification_repository.save(notification)
                logfire.info(
                    "Notification created",
                    notification_id=str(saved.id),
                    recipient_id=str(recipient_id),
                    type=type.value,
                )
                return saved
            except Exception as e:
                logfire.error(
                    "Failed to create notification",
                    recipient_id=str(recipient_id),
                    type=type.value,
                    error=str(e),
                )
                return None

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """List a recipient's notifications, newest first."""
        with logfire.span(
            "notification_service.list_for_recipient",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
        ):
            return await self.notification_repository.find_by_recipient(
                recipient_id, unread_only=unread_only, limit=limit, offset=offset
            )

    async def count_for_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications."""
        return await self.notification_repository.count_by_recipient(
            recipient_id, unread_only=unread_only
        )

    async def _get_owned(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if not notification or notification.recipient_id != recipient_id:
            logfire.warn(
                "Notification not found for recipient",
                notification_id=str(notification_id),
                recipient_id=str(recipient_id),
            )
            raise NotFoundError("Notification", str(notification_id))
        return notification

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        """Mark a single notification as read.

        Repeated calls keep the original read timestamp.

        Args:
            notification_id: Notification ID
            recipient_id: User making the request

        Returns:
            The notification in its read state

        Raises:
            NotFoundError: If the notification does not exist or belongs to
                someone else
        """
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            notification = await self._get_owned(notification_id, recipient_id)
            if notification.is_read:
                return notification

            updated = notification.model_copy(
                update={"is_read": True, "read_at": utc_now()}
            )
            return await self.notification_repository.save(updated)

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a recipient's unread notifications as read.

        Returns:
            Number of notifications modified
        """
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            modified = await self.notification_repository.mark_all_read(
                recipient_id, utc_now()
            )
            logfire.info(
                "Notifications marked as read",
                recipient_id=str(recipient_id),
                modified=modified,
            )
            return modified

    async def delete_notification(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> None:
        """Delete one of the recipient's notifications.

        Raises:
            NotFoundError: If the notification does not exist or belongs to
                someone else
        """
        with logfire.span(
            "notification_service.delete_notification",
            notification_id=str(notification_id),
        ):
            await self._get_owned(notification_id, recipient_id)
            await self.notification_repository.delete(notification_id)
            logfire.info("Notification deleted", notification_id=str(notification_id))
