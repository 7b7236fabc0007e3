"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError
from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.service import NotificationService
from qna.domain.value import NotificationId, NotificationType, UserId
from tests.conftest import at
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _notify(service: NotificationService, recipient: UserId, message: str = "hello"):
    return await service.notify(
        recipient_id=recipient,
        sender_id=UserId(uuid4()),
        type=NotificationType.ANSWER,
        message=message,
    )


def _stored(recipient: UserId, **fields) -> Notification:
    return Notification(
        id=NotificationId(uuid4()),
        recipient_id=recipient,
        sender_id=UserId(uuid4()),
        type=NotificationType.VOTE,
        message="stored",
        **fields,
    )


class TestNotify:
    @pytest.mark.asyncio
    async def test_creates_unread_notification(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient = UserId(uuid4())

        notification = await _notify(service, recipient, "  someone answered  ")

        assert notification is not None
        assert notification.message == "someone answered"
        assert notification.is_read is False
        assert notification.read_at is None

    @pytest.mark.asyncio
    async def test_storage_failure_is_swallowed(self, unit_env, monkeypatch):
        """A failed save is logged and reported as None, never raised."""
        service = await unit_env.get(NotificationService)

        async def broken_save(notification):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(service.notification_repository, "save", broken_save)

        assert await _notify(service, UserId(uuid4())) is None


class TestReadState:
    @pytest.mark.asyncio
    async def test_mark_read_is_idempotent(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient = UserId(uuid4())
        notification = await _notify(service, recipient)

        first = await service.mark_read(notification.id, recipient)
        second = await service.mark_read(notification.id, recipient)

        assert first.is_read is True
        assert second.read_at == first.read_at

    @pytest.mark.asyncio
    async def test_cannot_mark_someone_elses_notification(self, unit_env):
        service = await unit_env.get(NotificationService)
        notification = await _notify(service, UserId(uuid4()))

        with pytest.raises(NotFoundError, match="Notification not found"):
            await service.mark_read(notification.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_mark_all_read_counts_only_unread(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient = UserId(uuid4())
        first = await _notify(service, recipient)
        await _notify(service, recipient)
        await _notify(service, recipient)
        await _notify(service, UserId(uuid4()))  # someone else's
        await service.mark_read(first.id, recipient)

        modified = await service.mark_all_read(recipient)

        assert modified == 2
        assert await service.count_for_recipient(recipient, unread_only=True) == 0
        assert await service.count_for_recipient(recipient) == 3


class TestListAndDelete:
    @pytest.mark.asyncio
    async def test_list_newest_first_with_unread_filter(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        recipient = UserId(uuid4())
        older = await repo.save(_stored(recipient, created_at=at(1)))
        newer = await repo.save(_stored(recipient, created_at=at(2), is_read=True))

        everything = await service.list_for_recipient(recipient)
        unread = await service.list_for_recipient(recipient, unread_only=True)

        assert [n.id for n in everything] == [newer.id, older.id]
        assert [n.id for n in unread] == [older.id]

    @pytest.mark.asyncio
    async def test_delete_own_notification(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        recipient = UserId(uuid4())
        notification = await _notify(service, recipient)

        await service.delete_notification(notification.id, recipient)

        assert await repo.find_by_id(notification.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_notification(self, unit_env):
        service = await unit_env.get(NotificationService)

        with pytest.raises(NotFoundError):
            await service.delete_notification(NotificationId(uuid4()), UserId(uuid4()))
