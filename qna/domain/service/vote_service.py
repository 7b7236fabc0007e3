"""Vote domain service."""

from dataclasses import dataclass

import logfire

from qna.domain.error import BusinessRuleViolationError, NotFoundError
from qna.domain.model import ContentItem, VoteLedger
from qna.domain.model.common import utc_now
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import AnswerId, QuestionId, UserId, VotableType, VoteType

from .base import Service


@dataclass(frozen=True)
class VoteResult:
    """Ledger totals after a vote has been applied."""

    vote_score: int
    upvotes: int
    downvotes: int

    @classmethod
    def from_ledger(cls, ledger: VoteLedger) -> "VoteResult":
        """Summarise a vote ledger."""
        return cls(
            vote_score=ledger.score,
            upvotes=len(ledger.upvotes),
            downvotes=len(ledger.downvotes),
        )


class VoteService(Service):
    """Domain service for voting on questions and answers.

    Votes toggle: voting the same way twice retracts the vote, voting the
    other way switches it. Authors cannot vote on their own content.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    def _apply_vote(
        self,
        content: ContentItem,
        votable_type: VotableType,
        voter_id: UserId,
        vote_type: VoteType,
    ) -> ContentItem:
        if content.author_id == voter_id:
            logfire.warn(
                "Self-vote attempt",
                votable_type=votable_type.value,
                user_id=str(voter_id),
            )
            raise BusinessRuleViolationError(
                f"Cannot vote on your own {votable_type.value}"
            )

        ledger = content.votes.toggle(voter_id, vote_type)
        return content.model_copy(update={"votes": ledger, "updated_at": utc_now()})

    async def vote_on_question(
        self, question_id: QuestionId, voter_id: UserId, vote_type: VoteType
    ) -> VoteResult:
        """Vote on a question.

        Args:
            question_id: Question ID
            voter_id: Voting user's ID
            vote_type: Upvote or downvote

        Returns:
            Vote totals after the vote

        Raises:
            NotFoundError: If the question is missing or soft-deleted
            BusinessRuleViolationError: If the voter wrote the question
        """
        with logfire.span(
            "vote_service.vote_on_question",
            question_id=str(question_id),
            user_id=str(voter_id),
            vote_type=vote_type.value,
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question or not question.is_active:
                logfire.warn("Vote on missing question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            updated = self._apply_vote(
                question, VotableType.QUESTION, voter_id, vote_type
            )
            await self.question_repository.save(updated)

            result = VoteResult.from_ledger(updated.votes)
            logfire.info(
                "Question vote recorded",
                question_id=str(question_id),
                vote_score=result.vote_score,
            )
            return result

    async def vote_on_answer(
        self, answer_id: AnswerId, voter_id: UserId, vote_type: VoteType
    ) -> VoteResult:
        """Vote on an answer.

        Args:
            answer_id: Answer ID
            voter_id: Voting user's ID
            vote_type: Upvote or downvote

        Returns:
            Vote totals after the vote

        Raises:
            NotFoundError: If the answer is missing or soft-deleted
            BusinessRuleViolationError: If the voter wrote the answer
        """
        with logfire.span(
            "vote_service.vote_on_answer",
            answer_id=str(answer_id),
            user_id=str(voter_id),
            vote_type=vote_type.value,
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer or not answer.is_active:
                logfire.warn("Vote on missing answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            updated = self._apply_vote(answer, VotableType.ANSWER, voter_id, vote_type)
            await self.answer_repository.save(updated)

            result = VoteResult.from_ledger(updated.votes)
            logfire.info(
                "Answer vote recorded",
                answer_id=str(answer_id),
                vote_score=result.vote_score,
            )
            return result
