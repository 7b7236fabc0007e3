"""Delete question use case."""

from pydantic import BaseModel

from qna.application.usecase.common import MessageResponse, load_actor, parse_id
from qna.domain.service import QuestionService, UserService
from qna.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str


class DeleteQuestionUseCase:
    """Use case for soft-deleting a question (author or admin)."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> MessageResponse:
        """Execute delete question flow."""
        actor = await load_actor(self.user_service, request.user_id)
        await self.question_service.delete_question(
            QuestionId(parse_id(request.question_id, "Question")), actor
        )
        return MessageResponse(message="Question deleted successfully")
