"""Integration tests for the PostgreSQL repositories.

Require a migrated database at DATABASE__URL (run scripts/run_migrations.py).
Each test writes rows under a unique tag/username so reruns do not collide.
"""

import os
from uuid import uuid4

import pytest

from qna.domain.model import VoteLedger
from qna.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    QuestionSortOrder,
    UserRepository,
)
from qna.domain.service import NotificationService
from qna.domain.value import NotificationType, TagName, UserId, VoteType
from tests.conftest import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
    ),
]

integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


def _ledger_with(*votes: tuple[UserId, VoteType]) -> VoteLedger:
    ledger = VoteLedger()
    for user_id, vote_type in votes:
        ledger = ledger.toggle(user_id, vote_type)
    return ledger


@pytest.mark.asyncio
async def test_question_round_trip_with_votes(integration_env):
    # Arrange
    user_repo = await integration_env.get(UserRepository)
    question_repo = await integration_env.get(QuestionRepository)
    author = await user_repo.save(make_user(_unique("author")))
    voter = await user_repo.save(make_user(_unique("voter")))
    question = make_question(
        author.id, votes=_ledger_with((voter.id, VoteType.DOWN))
    )

    # Act
    await question_repo.save(question)
    stored = await question_repo.find_by_id(question.id)

    # Assert
    assert stored is not None
    assert stored.vote_score == -1
    assert stored.votes.vote_of(voter.id) == VoteType.DOWN
    assert [t.root for t in stored.tags] == ["python"]


@pytest.mark.asyncio
async def test_votes_sort_orders_by_upvote_count(integration_env):
    user_repo = await integration_env.get(UserRepository)
    question_repo = await integration_env.get(QuestionRepository)
    tag = _unique("t")
    author = await user_repo.save(make_user(_unique("author")))
    voters = [await user_repo.save(make_user(_unique("v"))) for _ in range(15)]

    # Five up, ten down: score -5, older
    contested = make_question(
        author.id,
        tags=[tag],
        created_at=at(1),
        votes=_ledger_with(
            *[(v.id, VoteType.UP) for v in voters[:5]],
            *[(v.id, VoteType.DOWN) for v in voters[5:]],
        ),
    )
    # Three up, none down: score +3, newer
    liked = make_question(
        author.id,
        tags=[tag],
        created_at=at(2),
        votes=_ledger_with(*[(v.id, VoteType.UP) for v in voters[:3]]),
    )
    await question_repo.save(contested)
    await question_repo.save(liked)

    result = await question_repo.find_all(
        sort=QuestionSortOrder.VOTES, tags=[TagName(tag)]
    )

    assert [q.id for q in result] == [contested.id, liked.id]
    assert [q.vote_score for q in result] == [-5, 3]


@pytest.mark.asyncio
async def test_increment_views_and_soft_delete(integration_env):
    user_repo = await integration_env.get(UserRepository)
    question_repo = await integration_env.get(QuestionRepository)
    tag = _unique("t")
    author = await user_repo.save(make_user(_unique("author")))
    question = await question_repo.save(make_question(author.id, tags=[tag]))

    await question_repo.increment_views(question.id)
    await question_repo.increment_views(question.id)
    await question_repo.save(question.model_copy(update={"is_active": False}))

    stored = await question_repo.find_by_id(question.id)
    assert stored.views == 2
    assert stored.is_active is False
    assert await question_repo.count(tags=[TagName(tag)]) == 0


@pytest.mark.asyncio
async def test_answers_keep_requested_order(integration_env):
    user_repo = await integration_env.get(UserRepository)
    question_repo = await integration_env.get(QuestionRepository)
    answer_repo = await integration_env.get(AnswerRepository)
    author = await user_repo.save(make_user(_unique("author")))
    question = await question_repo.save(make_question(author.id))
    first = await answer_repo.save(make_answer(question.id, author.id))
    second = await answer_repo.save(make_answer(question.id, author.id))

    result = await answer_repo.find_by_ids([second.id, first.id])

    assert [a.id for a in result] == [second.id, first.id]


@pytest.mark.asyncio
async def test_notifications_mark_all_read(integration_env):
    user_repo = await integration_env.get(UserRepository)
    notification_repo = await integration_env.get(NotificationRepository)
    service = await integration_env.get(NotificationService)
    recipient = await user_repo.save(make_user(_unique("r")))
    sender = await user_repo.save(make_user(_unique("s")))
    for _ in range(3):
        await service.notify(recipient.id, sender.id, NotificationType.VOTE, "voted")

    modified = await service.mark_all_read(recipient.id)

    assert modified == 3
    assert await notification_repo.count_by_recipient(recipient.id, unread_only=True) == 0
