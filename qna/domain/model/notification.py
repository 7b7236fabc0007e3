"""Notification entity.

Notifications tell a user that something happened to their content.
Only the read flag is ever mutated after creation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

MESSAGE_MAX_LENGTH = 200


class Notification(DomainModel):
    """Notification addressed to a single recipient."""

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    type: NotificationType
    message: str = Field(max_length=MESSAGE_MAX_LENGTH)
    related_question_id: Optional[QuestionId] = None
    related_answer_id: Optional[AnswerId] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("message", mode="before")
    @classmethod
    def truncate_message(cls, v: str) -> str:
        """Trim and truncate message to the storable length."""
        if isinstance(v, str):
            return v.strip()[:MESSAGE_MAX_LENGTH]
        return v
