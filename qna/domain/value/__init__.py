"""Domain value objects for the Q&A service."""

from qna.domain.value.identifiers import (
    AnswerId,
    NotificationId,
    QuestionId,
    UserId,
)
from qna.domain.value.types import (
    NotificationType,
    TagName,
    UserRole,
    Username,
    VotableType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "NotificationId",
    # Types
    "NotificationType",
    "TagName",
    "UserRole",
    "Username",
    "VotableType",
    "VoteType",
]
