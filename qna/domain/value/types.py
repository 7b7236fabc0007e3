"""Domain value objects for the Q&A service.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from qna.domain.value.common import RootValueObject

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]{3,30}")
TAG_MAX_LENGTH = 30


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "upvote"
    DOWN = "downvote"


class VotableType(str, Enum):
    """Type of content item that carries a vote ledger."""

    QUESTION = "question"
    ANSWER = "answer"


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    ANSWER = "answer"
    COMMENT = "comment"
    MENTION = "mention"
    VOTE = "vote"
    ACCEPTED_ANSWER = "accepted_answer"


class Username(RootValueObject[str]):
    """Unique login name.

    3-30 characters, letters, digits and underscores only.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.fullmatch(v):
            raise ValueError(
                "Username must be 3-30 characters and contain only letters, numbers and underscores"
            )
        return v


class TagName(RootValueObject[str]):
    """Topic tag attached to a question.

    Stored trimmed and lowercase, 1-30 characters.
    Examples: 'python', 'sqlalchemy', 'async'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Normalise and validate tag name."""
        v = v.strip().lower()
        if not v or len(v) > TAG_MAX_LENGTH:
            raise ValueError(f"Each tag must be 1-{TAG_MAX_LENGTH} characters")
        return v
