"""Question use cases."""

from .close_question import (
    CloseQuestionRequest,
    CloseQuestionResponse,
    CloseQuestionUseCase,
)
from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionUseCase, QuestionDetail
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .vote_on_question import VoteOnQuestionRequest, VoteOnQuestionUseCase

__all__ = [
    "CloseQuestionRequest",
    "CloseQuestionResponse",
    "CloseQuestionUseCase",
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "QuestionDetail",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "VoteOnQuestionRequest",
    "VoteOnQuestionUseCase",
]
