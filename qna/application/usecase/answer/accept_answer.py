"""Accept answer use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.common import parse_id
from qna.domain.service import AcceptanceService
from qna.domain.value import AnswerId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: str
    user_id: str  # Must be the question author


class AcceptedAnswer(BaseModel):
    """Acceptance state of the answer."""

    id: str
    is_accepted: bool
    accepted_at: datetime | None


class AcceptAnswerResponse(BaseModel):
    """Accept answer response."""

    message: str = "Answer accepted successfully"
    answer: AcceptedAnswer


class AcceptAnswerUseCase(BaseUseCase):
    """Use case for accepting the best answer to a question."""

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance domain service
        """
        self.acceptance_service = acceptance_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer or its question is missing or deleted
            NotAuthorizedError: If the user did not ask the question
            BusinessRuleViolationError: If the question is closed
        """
        with logfire.span("accept_answer.execute", answer_id=request.answer_id):
            answer = await self.acceptance_service.accept_answer(
                answer_id=AnswerId(parse_id(request.answer_id, "Answer")),
                actor_id=UserId(parse_id(request.user_id, "User")),
            )
            return AcceptAnswerResponse(
                answer=AcceptedAnswer(
                    id=str(answer.id),
                    is_accepted=answer.is_accepted,
                    accepted_at=answer.accepted_at,
                )
            )
