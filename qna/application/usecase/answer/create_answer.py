"""Create answer use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import AnswerItem, load_actor, parse_id
from qna.domain.service import AnswerService, UserService
from qna.domain.value import QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    content: str
    question_id: str
    user_id: str  # Authenticated author


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    message: str = "Answer created successfully"
    answer: AnswerItem


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Args:
            request: Answer content, question and author

        Returns:
            The created answer

        Raises:
            ValidationError: If the content is too short
            NotFoundError: If the question is missing, deleted or the ID is
                malformed
        """
        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            user_id=request.user_id,
        ):
            author = await load_actor(self.user_service, request.user_id)
            answer = await self.answer_service.create_answer(
                author=author,
                question_id=QuestionId(parse_id(request.question_id, "Question")),
                content=request.content,
            )
            return CreateAnswerResponse(answer=AnswerItem.from_answer(answer, author))
