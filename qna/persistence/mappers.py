"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, List
from uuid import UUID

from qna.domain.model import Answer, Notification, Question, User, VoteEntry, VoteLedger
from qna.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    TagName,
    UserId,
    UserRole,
    Username,
    VotableType,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        reputation=row["reputation"],
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "role": user.role.value,
        "reputation": user.reputation,
        "bio": user.bio,
        "avatar_url": user.avatar_url,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def rows_to_ledgers(rows: Iterable[Dict[str, Any]]) -> Dict[UUID, VoteLedger]:
    """Group vote rows into one ledger per votable item.

    Entries keep the order of the rows, so callers should order by created_at.

    Args:
        rows: Vote rows (votable_id, user_id, vote_type, created_at)

    Returns:
        Dict mapping votable_id -> VoteLedger
    """
    upvotes: Dict[UUID, List[VoteEntry]] = defaultdict(list)
    downvotes: Dict[UUID, List[VoteEntry]] = defaultdict(list)

    for row in rows:
        votable_id = _uuid(row["votable_id"])
        entry = VoteEntry(user_id=UserId(_uuid(row["user_id"])), voted_at=row["created_at"])
        if VoteType(row["vote_type"]) == VoteType.UP:
            upvotes[votable_id].append(entry)
        else:
            downvotes[votable_id].append(entry)

    return {
        votable_id: VoteLedger(
            upvotes=upvotes.get(votable_id, []),
            downvotes=downvotes.get(votable_id, []),
        )
        for votable_id in set(upvotes) | set(downvotes)
    }


def ledger_to_rows(
    votable_type: VotableType, votable_id: UUID, ledger: VoteLedger
) -> List[Dict[str, Any]]:
    """Flatten a vote ledger into vote rows.

    Args:
        votable_type: Question or answer
        votable_id: ID of the voted item
        ledger: The item's vote ledger

    Returns:
        List of dicts suitable for database insertion
    """
    rows = []
    for vote_type, entries in (
        (VoteType.UP, ledger.upvotes),
        (VoteType.DOWN, ledger.downvotes),
    ):
        for entry in entries:
            rows.append(
                {
                    "user_id": entry.user_id,
                    "votable_type": votable_type.value,
                    "votable_id": votable_id,
                    "vote_type": vote_type.value,
                    "created_at": entry.voted_at,
                }
            )
    return rows


def row_to_question(row: Dict[str, Any], votes: VoteLedger | None = None) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        votes: Vote ledger loaded from the votes table

    Returns:
        Question domain model
    """
    closed_by = _optional_uuid(row.get("closed_by"))
    accepted_answer_id = _optional_uuid(row.get("accepted_answer_id"))
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        author_id=UserId(_uuid(row["author_id"])),
        tags=[TagName(tag) for tag in row["tags"] or []],
        views=row["views"],
        answer_ids=[AnswerId(_uuid(a)) for a in row["answer_ids"] or []],
        accepted_answer_id=AnswerId(accepted_answer_id) if accepted_answer_id else None,
        is_closed=row["is_closed"],
        closed_at=row.get("closed_at"),
        closed_by=UserId(closed_by) if closed_by else None,
        votes=votes or VoteLedger(),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    The vote ledger lives in the votes table and is not included.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": question.id,
        "title": question.title,
        "description": question.description,
        "author_id": question.author_id,
        "tags": [tag.root for tag in question.tags],
        "views": question.views,
        "answer_ids": list(question.answer_ids),
        "accepted_answer_id": question.accepted_answer_id,
        "is_closed": question.is_closed,
        "closed_at": question.closed_at,
        "closed_by": question.closed_by,
        "is_active": question.is_active,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
    }


def row_to_answer(row: Dict[str, Any], votes: VoteLedger | None = None) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict
        votes: Vote ledger loaded from the votes table

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        is_accepted=row["is_accepted"],
        accepted_at=row.get("accepted_at"),
        votes=votes or VoteLedger(),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict (without votes)."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "author_id": answer.author_id,
        "content": answer.content,
        "is_accepted": answer.is_accepted,
        "accepted_at": answer.accepted_at,
        "is_active": answer.is_active,
        "created_at": answer.created_at,
        "updated_at": answer.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    related_question_id = _optional_uuid(row.get("related_question_id"))
    related_answer_id = _optional_uuid(row.get("related_answer_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        type=NotificationType(row["type"]),
        message=row["message"],
        related_question_id=(
            QuestionId(related_question_id) if related_question_id else None
        ),
        related_answer_id=AnswerId(related_answer_id) if related_answer_id else None,
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "sender_id": notification.sender_id,
        "type": notification.type.value,
        "message": notification.message,
        "related_question_id": notification.related_question_id,
        "related_answer_id": notification.related_answer_id,
        "is_read": notification.is_read,
        "read_at": notification.read_at,
        "created_at": notification.created_at,
    }
