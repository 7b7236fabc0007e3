"""Close question use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import QuestionItem, load_actor, parse_id
from qna.domain.service import QuestionService, UserService
from qna.domain.value import QuestionId


class CloseQuestionRequest(BaseModel):
    """Close question request."""

    question_id: str
    user_id: str


class CloseQuestionResponse(BaseModel):
    """Close question response."""

    message: str = "Question closed successfully"
    question: QuestionItem


class CloseQuestionUseCase:
    """Use case for closing a question (author or admin)."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize close question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CloseQuestionRequest) -> CloseQuestionResponse:
        """Execute close question flow.

        Raises:
            NotFoundError: If the question is missing or deleted
            NotAuthorizedError: If the user is neither author nor admin
        """
        with logfire.span("close_question.execute", question_id=request.question_id):
            actor = await load_actor(self.user_service, request.user_id)
            question = await self.question_service.close_question(
                QuestionId(parse_id(request.question_id, "Question")), actor
            )
            authors = await self.user_service.get_by_ids([question.author_id])
            return CloseQuestionResponse(
                question=QuestionItem.from_question(
                    question, authors.get(question.author_id)
                )
            )
