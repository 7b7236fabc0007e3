"""Vote on answer use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.common import VoteResponse, parse_id
from qna.domain.service import VoteService
from qna.domain.value import AnswerId, UserId, VoteType


class VoteOnAnswerRequest(BaseModel):
    """Vote on answer request."""

    answer_id: str
    user_id: str
    vote_type: VoteType


class VoteOnAnswerUseCase(BaseUseCase):
    """Use case for upvoting or downvoting an answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote on answer use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteOnAnswerRequest) -> VoteResponse:
        """Execute vote flow."""
        result = await self.vote_service.vote_on_answer(
            answer_id=AnswerId(parse_id(request.answer_id, "Answer")),
            voter_id=UserId(parse_id(request.user_id, "User")),
            vote_type=request.vote_type,
        )
        return VoteResponse(
            vote_score=result.vote_score,
            upvotes=result.upvotes,
            downvotes=result.downvotes,
        )
