"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.value import NotificationId, UserId
from qna.persistence.mappers import notification_to_dict, row_to_notification
from qna.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    def _recipient_filter(self, stmt, recipient_id: UserId, unread_only: bool):
        stmt = stmt.where(notifications_table.c.recipient_id == recipient_id)
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))
        return stmt

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        stmt = (
            self._recipient_filter(select(notifications_table), recipient_id, unread_only)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications."""
        stmt = self._recipient_filter(
            select(func.count()).select_from(notifications_table),
            recipient_id,
            unread_only,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update).

        Runs inside a SAVEPOINT so a failed write leaves the surrounding
        request transaction usable.
        """
        with logfire.span(
            "notification_repository.save", notification_id=str(notification.id)
        ):
            notification_dict = notification_to_dict(notification)
            stmt = insert(notifications_table).values(**notification_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=["id"],
                set_={
                    "is_read": notification.is_read,
                    "read_at": notification.read_at,
                },
            )
            async with self.session.begin_nested():
                await self.session.execute(stmt)
            return notification

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark every unread notification of a recipient as read."""
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(False),
            )
            .values(is_read=True, read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def delete(self, notification_id: NotificationId) -> None:
        """Delete a notification (hard delete)."""
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
