"""Unit tests for the in-memory question repository's listing behaviour."""

from uuid import uuid4

import pytest

from qna.domain.model import VoteEntry, VoteLedger
from qna.domain.repository import QuestionRepository, QuestionSortOrder
from qna.domain.value import TagName, UserId
from tests.conftest import at, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _ledger(up: int, down: int) -> VoteLedger:
    return VoteLedger(
        upvotes=[VoteEntry(user_id=UserId(uuid4())) for _ in range(up)],
        downvotes=[VoteEntry(user_id=UserId(uuid4())) for _ in range(down)],
    )


class TestSorting:
    """Tests for find_all sort orders."""

    @pytest.mark.asyncio
    async def test_votes_sort_ranks_upvote_count_before_net_score(self, unit_env):
        """Five up and ten down ranks above three up and zero down."""
        repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        contested = await repo.save(
            make_question(author, votes=_ledger(5, 10), created_at=at(1))
        )
        liked = await repo.save(
            make_question(author, votes=_ledger(3, 0), created_at=at(2))
        )

        result = await repo.find_all(sort=QuestionSortOrder.VOTES)

        assert [q.id for q in result] == [contested.id, liked.id]
        assert contested.vote_score == -5
        assert liked.vote_score == 3

    @pytest.mark.asyncio
    async def test_votes_sort_breaks_ties_by_fewer_downvotes(self, unit_env):
        repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        contested = await repo.save(make_question(author, votes=_ledger(3, 2)))
        clean = await repo.save(make_question(author, votes=_ledger(3, 0)))

        result = await repo.find_all(sort=QuestionSortOrder.VOTES)

        assert [q.id for q in result] == [clean.id, contested.id]

    @pytest.mark.asyncio
    async def test_newest_and_oldest(self, unit_env):
        repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        first = await repo.save(make_question(author, created_at=at(1)))
        second = await repo.save(make_question(author, created_at=at(2)))

        newest = await repo.find_all(sort=QuestionSortOrder.NEWEST)
        oldest = await repo.find_all(sort=QuestionSortOrder.OLDEST)

        assert [q.id for q in newest] == [second.id, first.id]
        assert [q.id for q in oldest] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_views(self, unit_env):
        repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        quiet = await repo.save(make_question(author, created_at=at(2)))
        busy = await repo.save(make_question(author, created_at=at(1)))
        await repo.increment_views(busy.id)

        result = await repo.find_all(sort=QuestionSortOrder.VIEWS)

        assert [q.id for q in result] == [busy.id, quiet.id]


class TestFiltering:
    """Tests for tag and search filters."""

    @pytest.mark.asyncio
    async def test_tags_match_any(self, unit_env):
        repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        py = await repo.save(make_question(author, tags=["python"]))
        sql = await repo.save(make_question(author, tags=["sql", "postgres"]))
        await repo.save(make_question(author, tags=["rust"]))

        result = await repo.find_all(tags=[TagName("python"), TagName("postgres")])

        assert {q.id for q in result} == {py.id, sql.id}
        assert await repo.count(tags=[TagName("python"), TagName("postgres")]) == 2

    @pytest.mark.asyncio
    async def test_search_title_and_description(self, unit_env):
        repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        match = await repo.save(
            make_question(author, title="Reversing a list in place")
        )
        await repo.save(make_question(author, title="Sorting dictionaries by value"))

        result = await repo.find_all(search="reversing")

        assert [q.id for q in result] == [match.id]

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        for minute in range(5):
            await repo.save(make_question(author, created_at=at(minute)))

        page = await repo.find_all(limit=2, offset=4)

        assert len(page) == 1
        assert await repo.count() == 5

    @pytest.mark.asyncio
    async def test_save_does_not_overwrite_views(self, unit_env):
        """View counts only move through increment_views."""
        repo = await unit_env.get(QuestionRepository)
        question = await repo.save(make_question(UserId(uuid4())))
        await repo.increment_views(question.id)

        await repo.save(question.model_copy(update={"title": "A brand new title here"}))

        stored = await repo.find_by_id(question.id)
        assert stored.views == 1
        assert stored.title == "A brand new title here"
