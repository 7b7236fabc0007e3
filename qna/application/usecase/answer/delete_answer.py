"""Delete answer use case."""

from pydantic import BaseModel

from qna.application.usecase.common import MessageResponse, load_actor, parse_id
from qna.domain.service import AnswerService, UserService
from qna.domain.value import AnswerId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str


class DeleteAnswerUseCase:
    """Use case for soft-deleting an answer (author or admin)."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: DeleteAnswerRequest) -> MessageResponse:
        """Execute delete answer flow."""
        actor = await load_actor(self.user_service, request.user_id)
        await self.answer_service.delete_answer(
            AnswerId(parse_id(request.answer_id, "Answer")), actor
        )
        return MessageResponse(message="Answer deleted successfully")
