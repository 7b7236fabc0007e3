"""Domain model entities for the Q&A service."""

from qna.domain.model.answer import Answer
from qna.domain.model.content import ContentItem
from qna.domain.model.notification import Notification
from qna.domain.model.question import Question
from qna.domain.model.user import User
from qna.domain.model.vote import VoteEntry, VoteLedger

__all__ = [
    "User",
    "ContentItem",
    "Question",
    "Answer",
    "VoteEntry",
    "VoteLedger",
    "Notification",
]
