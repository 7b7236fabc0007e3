"""Create question use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import QuestionItem, load_actor
from qna.domain.service import QuestionService, UserService


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    description: str
    tags: list[str]
    user_id: str  # Authenticated author


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    message: str = "Question created successfully"
    question: QuestionItem


class CreateQuestionUseCase:
    """Use case for asking a new question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Args:
            request: Question fields and author

        Returns:
            The created question

        Raises:
            ValidationError: If any field is invalid
        """
        with logfire.span("create_question.execute", user_id=request.user_id):
            author = await load_actor(self.user_service, request.user_id)
            question = await self.question_service.create_question(
                author_id=author.id,
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
            return CreateQuestionResponse(
                question=QuestionItem.from_question(question, author)
            )
