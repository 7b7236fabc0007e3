"""User aggregate root.

Users sign up with a username and password and accumulate reputation
through community engagement.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.value import UserId, UserRole, Username

BIO_MAX_LENGTH = 500


class User(DomainModel):
    """User aggregate root.

    Users are never hard-deleted.
    """

    id: UserId
    username: Username
    password_hash: str
    role: UserRole = UserRole.USER
    reputation: int = Field(default=0, ge=0)
    bio: Optional[str] = Field(default=None, max_length=BIO_MAX_LENGTH)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_admin(self) -> bool:
        """Whether the user has the admin role."""
        return self.role == UserRole.ADMIN
