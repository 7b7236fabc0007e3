"""Unit tests for question use cases."""

from uuid import uuid4

import pytest

from qna.application.usecase.question import (
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    QuestionSortOrder,
    UserRepository,
)
from tests.conftest import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetQuestion:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_populates_answers_and_counts_view(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = await user_repo.save(make_user("asker"))
        helper = await user_repo.save(make_user("helper"))
        question = make_question(asker.id)
        live = await answer_repo.save(make_answer(question.id, helper.id))
        await question_repo.save(question.model_copy(update={"answer_ids": [live.id]}))

        # Act
        detail = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id), viewer_id=str(helper.id))
        )

        # Assert
        assert detail.views == 1
        assert detail.author.username == "asker"
        assert [a.id for a in detail.answers] == [str(live.id)]
        assert detail.answers[0].author.username == "helper"
        assert detail.answer_count == 1

    @pytest.mark.asyncio
    async def test_author_read_is_not_counted(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        asker = make_user("asker")
        question = await question_repo.save(make_question(asker.id))

        detail = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id), viewer_id=str(asker.id))
        )

        assert detail.views == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question_id", ["not-a-uuid", str(uuid4())])
    async def test_malformed_and_missing_ids_look_the_same(self, unit_env, question_id):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError, match="^Question not found$"):
            await use_case.execute(GetQuestionRequest(question_id=question_id))


class TestListQuestions:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_pagination_metadata(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user()
        for minute in range(12):
            await question_repo.save(make_question(author.id, created_at=at(minute)))

        response = await use_case.execute(ListQuestionsRequest(page=2, limit=5))

        assert len(response.questions) == 5
        assert response.pagination.model_dump() == {
            "current": 2,
            "pages": 3,
            "total": 12,
            "has_next": True,
            "has_prev": True,
        }

    @pytest.mark.asyncio
    async def test_tag_filter_is_normalized(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user()
        tagged = await question_repo.save(make_question(author.id, tags=["python"]))
        await question_repo.save(make_question(author.id, tags=["rust"]))

        response = await use_case.execute(
            ListQuestionsRequest(tags=["  PYTHON "], sort=QuestionSortOrder.NEWEST)
        )

        assert [q.id for q in response.questions] == [str(tagged.id)]

    @pytest.mark.asyncio
    async def test_overlong_tag_matches_nothing(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        await question_repo.save(make_question(make_user().id))

        response = await use_case.execute(ListQuestionsRequest(tags=["x" * 31]))

        assert response.questions == []
        assert response.pagination.total == 0

    @pytest.mark.asyncio
    async def test_deleted_questions_are_hidden(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user()
        await question_repo.save(make_question(author.id, is_active=False))
        visible = await question_repo.save(make_question(author.id))

        response = await use_case.execute(ListQuestionsRequest())

        assert [q.id for q in response.questions] == [str(visible.id)]
