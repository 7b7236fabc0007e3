"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

# Must be set before any Settings() is constructed
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")  # Fast hashing in tests
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")

import logfire  # noqa: E402

from qna.domain.model import Answer, Question, User  # noqa: E402
from qna.domain.value import (  # noqa: E402
    AnswerId,
    QuestionId,
    TagName,
    UserId,
    UserRole,
    Username,
)

logfire.configure(send_to_logfire=False, console=False)

_BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Deterministic timestamp, `minutes` after a fixed base time."""
    return _BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str = "alice", role: UserRole = UserRole.USER) -> User:
    """Build a user with a placeholder password hash."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        password_hash="not-a-real-hash",
        role=role,
    )


def make_question(
    author_id: UserId,
    title: str = "How do I reverse a list in Python?",
    tags: list[str] | None = None,
    created_at: datetime | None = None,
    **overrides,
) -> Question:
    """Build a valid question; keyword overrides are passed through."""
    created = created_at or at(0)
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        description="I have a list and want its items in the opposite order.",
        tags=[TagName(t) for t in (tags or ["python"])],
        author_id=author_id,
        created_at=created,
        updated_at=created,
        **overrides,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    content: str = "Use reversed() or slice with [::-1].",
    **overrides,
) -> Answer:
    """Build a valid answer; keyword overrides are passed through."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        content=content,
        **overrides,
    )
