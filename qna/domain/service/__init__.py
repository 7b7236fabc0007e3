"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .notification_service import NotificationService
from .question_service import QuestionService
from .user_service import UserService
from .vote_service import VoteResult, VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "JWTService",
    "NotificationService",
    "QuestionService",
    "Service",
    "UserService",
    "VoteResult",
    "VoteService",
]
