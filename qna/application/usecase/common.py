"""Response building blocks shared by several use cases."""

import math
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.domain.error import AuthenticationError, NotFoundError
from qna.domain.model import Answer, Question, User
from qna.domain.service import UserService
from qna.domain.value import UserId


def parse_id(value: str, resource: str) -> UUID:
    """Parse an identifier coming from the outside world.

    A malformed ID is reported exactly like a missing resource.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise NotFoundError(resource, value)


async def load_actor(user_service: UserService, user_id: str) -> User:
    """Load the authenticated user behind a verified token.

    Raises:
        AuthenticationError: If the account no longer exists
    """
    try:
        return await user_service.get_by_id(UserId(parse_id(user_id, "User")))
    except NotFoundError:
        raise AuthenticationError("User not found")


class Pagination(BaseModel):
    """Page metadata returned with every listing."""

    current: int
    pages: int
    total: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        """Compute page metadata from page number, page size and total."""
        pages = math.ceil(total / limit) if limit else 0
        return cls(
            current=page,
            pages=pages,
            total=total,
            has_next=page < pages,
            has_prev=page > 1,
        )


class AuthorSummary(BaseModel):
    """Public author details embedded in content responses."""

    id: str
    username: str
    reputation: int
    avatar_url: str | None

    @classmethod
    def from_user(cls, user: Optional[User]) -> Optional["AuthorSummary"]:
        """Summarise a user; None stays None."""
        if user is None:
            return None
        return cls(
            id=str(user.id),
            username=user.username.root,
            reputation=user.reputation,
            avatar_url=user.avatar_url,
        )


class UserResponse(BaseModel):
    """Account details safe to return to clients (never the password hash)."""

    id: str
    username: str
    role: str
    reputation: int
    bio: str | None
    avatar_url: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build response from a domain user."""
        return cls(
            id=str(user.id),
            username=user.username.root,
            role=user.role.value,
            reputation=user.reputation,
            bio=user.bio,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )


class AnswerItem(BaseModel):
    """Answer as returned to clients."""

    id: str
    question_id: str
    content: str
    author: AuthorSummary | None
    vote_score: int
    upvotes: int
    downvotes: int
    is_accepted: bool
    accepted_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_answer(cls, answer: Answer, author: Optional[User]) -> "AnswerItem":
        """Build response from a domain answer and its author."""
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            author=AuthorSummary.from_user(author),
            vote_score=answer.vote_score,
            upvotes=len(answer.votes.upvotes),
            downvotes=len(answer.votes.downvotes),
            is_accepted=answer.is_accepted,
            accepted_at=answer.accepted_at,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class QuestionItem(BaseModel):
    """Question as returned in listings."""

    id: str
    title: str
    description: str
    tags: list[str]
    author: AuthorSummary | None
    views: int
    vote_score: int
    upvotes: int
    downvotes: int
    answer_count: int
    accepted_answer_id: str | None
    is_closed: bool
    closed_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_question(
        cls, question: Question, author: Optional[User]
    ) -> "QuestionItem":
        """Build response from a domain question and its author."""
        return cls(
            id=str(question.id),
            title=question.title,
            description=question.description,
            tags=[tag.root for tag in question.tags],
            author=AuthorSummary.from_user(author),
            views=question.views,
            vote_score=question.vote_score,
            upvotes=len(question.votes.upvotes),
            downvotes=len(question.votes.downvotes),
            answer_count=question.answer_count,
            accepted_answer_id=(
                str(question.accepted_answer_id)
                if question.accepted_answer_id
                else None
            ),
            is_closed=question.is_closed,
            closed_at=question.closed_at,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class VoteResponse(BaseModel):
    """Vote totals after a vote."""

    message: str = "Vote recorded successfully"
    vote_score: int
    upvotes: int
    downvotes: int


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
