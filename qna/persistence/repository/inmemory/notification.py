"""In-memory notification repository for testing."""

from datetime import datetime
from typing import Optional

from qna.domain.model.notification import Notification
from qna.domain.repository.notification import NotificationRepository
from qna.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    def _for_recipient(
        self, recipient_id: UserId, unread_only: bool
    ) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        notifications = self._for_recipient(recipient_id, unread_only)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications."""
        return len(self._for_recipient(recipient_id, unread_only))

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark every unread notification of a recipient as read."""
        unread = self._for_recipient(recipient_id, unread_only=True)
        for notification in unread:
            self._notifications[notification.id] = notification.model_copy(
                update={"is_read": True, "read_at": read_at}
            )
        return len(unread)

    async def delete(self, notification_id: NotificationId) -> None:
        """Delete a notification (hard delete)."""
        self._notifications.pop(notification_id, None)
