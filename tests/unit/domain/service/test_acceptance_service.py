"""Unit tests for AcceptanceService."""

from uuid import uuid4

import pytest

from qna.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from qna.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from qna.domain.service import AcceptanceService
from qna.domain.value import AnswerId, NotificationType, UserId
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _question_with_answers(env, author_id: UserId, answer_authors, **question_overrides):
    """Store a question with one answer per given author."""
    question_repo = await env.get(QuestionRepository)
    answer_repo = await env.get(AnswerRepository)

    question = make_question(author_id, **question_overrides)
    answers = [
        await answer_repo.save(make_answer(question.id, answer_author))
        for answer_author in answer_authors
    ]
    question = await question_repo.save(
        question.model_copy(update={"answer_ids": [a.id for a in answers]})
    )
    return question, answers


class TestAcceptAnswer:
    """Tests for accept_answer method."""

    @pytest.mark.asyncio
    async def test_accept_marks_answer_and_question(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        asker = UserId(uuid4())
        question, (answer,) = await _question_with_answers(
            unit_env, asker, [UserId(uuid4())]
        )

        # Act
        accepted = await service.accept_answer(answer.id, asker)

        # Assert
        assert accepted.is_accepted is True
        assert accepted.accepted_at is not None
        stored_question = await question_repo.find_by_id(question.id)
        assert stored_question.accepted_answer_id == answer.id

    @pytest.mark.asyncio
    async def test_accepting_another_answer_clears_previous(self, unit_env):
        """At most one answer per question is accepted."""
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, first_author, second_author = (
            UserId(uuid4()),
            UserId(uuid4()),
            UserId(uuid4()),
        )
        question, (first, second) = await _question_with_answers(
            unit_env, asker, [first_author, second_author]
        )

        await service.accept_answer(first.id, asker)
        await service.accept_answer(second.id, asker)

        # One notification each: the switch notifies only the new answer's author
        assert await notification_repo.count_by_recipient(first_author) == 1
        second_notifications = await notification_repo.find_by_recipient(second_author)
        assert len(second_notifications) == 1
        assert second_notifications[0].type == NotificationType.ACCEPTED_ANSWER
        assert second_notifications[0].related_answer_id == second.id

        stored_first = await answer_repo.find_by_id(first.id)
        stored_second = await answer_repo.find_by_id(second.id)
        assert stored_first.is_accepted is False
        assert stored_first.accepted_at is None
        assert stored_second.is_accepted is True
        stored_question = await question_repo.find_by_id(question.id)
        assert stored_question.accepted_answer_id == second.id

    @pytest.mark.asyncio
    async def test_notifies_answer_author(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, helper = UserId(uuid4()), UserId(uuid4())
        question, (answer,) = await _question_with_answers(unit_env, asker, [helper])

        await service.accept_answer(answer.id, asker)

        notifications = await notification_repo.find_by_recipient(helper)
        assert len(notifications) == 1
        notification = notifications[0]
        assert notification.type == NotificationType.ACCEPTED_ANSWER
        assert notification.sender_id == asker
        assert notification.message == f"Your answer was accepted for: {question.title}"
        assert notification.related_answer_id == answer.id

    @pytest.mark.asyncio
    async def test_accepting_own_answer_sends_no_notification(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = UserId(uuid4())
        _, (answer,) = await _question_with_answers(unit_env, asker, [asker])

        accepted = await service.accept_answer(answer.id, asker)

        assert accepted.is_accepted is True
        assert await notification_repo.count_by_recipient(asker) == 0

    @pytest.mark.asyncio
    async def test_reaccepting_is_a_no_op(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, helper = UserId(uuid4()), UserId(uuid4())
        _, (answer,) = await _question_with_answers(unit_env, asker, [helper])

        first = await service.accept_answer(answer.id, asker)
        second = await service.accept_answer(answer.id, asker)

        assert second.accepted_at == first.accepted_at
        assert await notification_repo.count_by_recipient(helper) == 1

    @pytest.mark.asyncio
    async def test_only_question_author_may_accept(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        helper = UserId(uuid4())
        _, (answer,) = await _question_with_answers(unit_env, UserId(uuid4()), [helper])

        # Not even the answer's author
        with pytest.raises(
            NotAuthorizedError, match="Only the question author can accept answers"
        ):
            await service.accept_answer(answer.id, helper)

    @pytest.mark.asyncio
    async def test_closed_question_blocks_acceptance(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = UserId(uuid4())
        _, (answer,) = await _question_with_answers(
            unit_env, asker, [UserId(uuid4())], is_closed=True
        )

        with pytest.raises(
            BusinessRuleViolationError, match="Cannot accept answers on a closed question"
        ):
            await service.accept_answer(answer.id, asker)

        stored = await answer_repo.find_by_id(answer.id)
        assert stored.is_accepted is False

    @pytest.mark.asyncio
    async def test_authorization_is_checked_before_closed_state(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        _, (answer,) = await _question_with_answers(
            unit_env, UserId(uuid4()), [UserId(uuid4())], is_closed=True
        )

        with pytest.raises(NotAuthorizedError):
            await service.accept_answer(answer.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_missing_answer(self, unit_env):
        service = await unit_env.get(AcceptanceService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await service.accept_answer(AnswerId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_answer_of_deleted_question(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        asker = UserId(uuid4())
        _, (answer,) = await _question_with_answers(
            unit_env, asker, [UserId(uuid4())], is_active=False
        )

        with pytest.raises(NotFoundError, match="Question not found"):
            await service.accept_answer(answer.id, asker)

    @pytest.mark.asyncio
    async def test_answer_not_listed_on_question(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = UserId(uuid4())
        question = await question_repo.save(make_question(asker))
        stray = await answer_repo.save(make_answer(question.id, UserId(uuid4())))

        with pytest.raises(NotFoundError, match="Answer not found"):
            await service.accept_answer(stray.id, asker)
