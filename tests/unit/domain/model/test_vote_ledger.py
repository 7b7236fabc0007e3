"""Unit tests for the VoteLedger model."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from qna.domain.model import VoteEntry, VoteLedger
from qna.domain.value import UserId, VoteType
from tests.conftest import at


def _user() -> UserId:
    return UserId(uuid4())


class TestToggle:
    """Tests for toggle semantics."""

    def test_first_upvote_adds_voter(self):
        voter = _user()

        ledger = VoteLedger().toggle(voter, VoteType.UP)

        assert ledger.vote_of(voter) == VoteType.UP
        assert ledger.score == 1

    def test_same_vote_twice_retracts(self):
        """Voting the same way again removes the vote entirely."""
        voter = _user()

        ledger = VoteLedger().toggle(voter, VoteType.DOWN).toggle(voter, VoteType.DOWN)

        assert ledger.vote_of(voter) is None
        assert ledger.upvotes == []
        assert ledger.downvotes == []
        assert ledger.score == 0

    def test_opposite_vote_switches_in_one_step(self):
        voter = _user()

        ledger = VoteLedger().toggle(voter, VoteType.UP).toggle(voter, VoteType.DOWN)

        assert ledger.vote_of(voter) == VoteType.DOWN
        assert len(ledger.upvotes) == 0
        assert len(ledger.downvotes) == 1
        assert ledger.score == -1

    def test_toggle_returns_new_ledger(self):
        """The original ledger is left untouched."""
        original = VoteLedger()

        updated = original.toggle(_user(), VoteType.UP)

        assert original.score == 0
        assert updated.score == 1

    def test_other_voters_are_preserved(self):
        first, second = _user(), _user()
        ledger = VoteLedger().toggle(first, VoteType.UP)

        ledger = ledger.toggle(second, VoteType.UP).toggle(second, VoteType.UP)

        assert [e.user_id for e in ledger.upvotes] == [first]

    def test_vote_timestamp_is_recorded(self):
        voter = _user()

        ledger = VoteLedger().toggle(voter, VoteType.UP, voted_at=at(5))

        assert ledger.upvotes[0].voted_at == at(5)

    def test_score_counts_many_voters(self):
        ledger = VoteLedger()
        for _ in range(3):
            ledger = ledger.toggle(_user(), VoteType.UP)
        ledger = ledger.toggle(_user(), VoteType.DOWN)

        assert ledger.score == 2


class TestInvariants:
    """Tests for the one-vote-per-user rule."""

    def test_user_in_both_sets_is_rejected(self):
        voter = _user()

        with pytest.raises(ValidationError, match="both upvote and downvote"):
            VoteLedger(
                upvotes=[VoteEntry(user_id=voter)],
                downvotes=[VoteEntry(user_id=voter)],
            )

    def test_duplicate_entry_is_rejected(self):
        voter = _user()

        with pytest.raises(ValidationError, match="only vote once"):
            VoteLedger(upvotes=[VoteEntry(user_id=voter), VoteEntry(user_id=voter)])
