"""Vote on question use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.common import VoteResponse, parse_id
from qna.domain.service import VoteService
from qna.domain.value import QuestionId, UserId, VoteType


class VoteOnQuestionRequest(BaseModel):
    """Vote on question request."""

    question_id: str
    user_id: str
    vote_type: VoteType


class VoteOnQuestionUseCase(BaseUseCase):
    """Use case for upvoting or downvoting a question."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote on question use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteOnQuestionRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the question is missing, deleted or the ID is
                malformed
            BusinessRuleViolationError: If the voter wrote the question
        """
        result = await self.vote_service.vote_on_question(
            question_id=QuestionId(parse_id(request.question_id, "Question")),
            voter_id=UserId(parse_id(request.user_id, "User")),
            vote_type=request.vote_type,
        )
        return VoteResponse(
            vote_score=result.vote_score,
            upvotes=result.upvotes,
            downvotes=result.downvotes,
        )
