"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from qna.domain.error import BusinessRuleViolationError, NotFoundError
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.service import VoteService
from qna.domain.value import AnswerId, QuestionId, UserId, VoteType
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestVoteOnQuestion:
    """Tests for vote_on_question method."""

    @pytest.mark.asyncio
    async def test_upvote_is_persisted(self, unit_env):
        """Upvoting should add the voter and persist the ledger."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        voter = UserId(uuid4())

        # Act
        result = await vote_service.vote_on_question(question.id, voter, VoteType.UP)

        # Assert
        assert (result.vote_score, result.upvotes, result.downvotes) == (1, 1, 0)
        stored = await question_repo.find_by_id(question.id)
        assert stored.votes.vote_of(voter) == VoteType.UP

    @pytest.mark.asyncio
    async def test_repeat_vote_retracts(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        voter = UserId(uuid4())

        await vote_service.vote_on_question(question.id, voter, VoteType.UP)
        result = await vote_service.vote_on_question(question.id, voter, VoteType.UP)

        assert (result.vote_score, result.upvotes, result.downvotes) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_opposite_vote_switches(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        voter = UserId(uuid4())

        await vote_service.vote_on_question(question.id, voter, VoteType.UP)
        result = await vote_service.vote_on_question(question.id, voter, VoteType.DOWN)

        assert (result.vote_score, result.upvotes, result.downvotes) == (-1, 0, 1)

    @pytest.mark.asyncio
    async def test_self_vote_is_rejected(self, unit_env):
        """Authors cannot vote on their own question."""
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        question = await question_repo.save(make_question(author))

        with pytest.raises(
            BusinessRuleViolationError, match="Cannot vote on your own question"
        ):
            await vote_service.vote_on_question(question.id, author, VoteType.UP)

        stored = await question_repo.find_by_id(question.id)
        assert stored.vote_score == 0

    @pytest.mark.asyncio
    async def test_missing_question(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await vote_service.vote_on_question(
                QuestionId(uuid4()), UserId(uuid4()), VoteType.UP
            )

    @pytest.mark.asyncio
    async def test_deleted_question_is_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(
            make_question(UserId(uuid4()), is_active=False)
        )

        with pytest.raises(NotFoundError):
            await vote_service.vote_on_question(
                question.id, UserId(uuid4()), VoteType.UP
            )


class TestVoteOnAnswer:
    """Tests for vote_on_answer method."""

    @pytest.mark.asyncio
    async def test_downvote_answer(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.save(
            make_answer(QuestionId(uuid4()), UserId(uuid4()))
        )

        result = await vote_service.vote_on_answer(
            answer.id, UserId(uuid4()), VoteType.DOWN
        )

        assert (result.vote_score, result.upvotes, result.downvotes) == (-1, 0, 1)

    @pytest.mark.asyncio
    async def test_self_vote_on_answer_is_rejected(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        author = UserId(uuid4())
        answer = await answer_repo.save(make_answer(QuestionId(uuid4()), author))

        with pytest.raises(
            BusinessRuleViolationError, match="Cannot vote on your own answer"
        ):
            await vote_service.vote_on_answer(answer.id, author, VoteType.DOWN)

    @pytest.mark.asyncio
    async def test_missing_answer(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.vote_on_answer(
                AnswerId(uuid4()), UserId(uuid4()), VoteType.UP
            )
