"""Vote ledger embedded in every content item.

Each question and answer carries the set of users who upvoted it and the
set of users who downvoted it. The net score is derived on read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.value import UserId, VoteType


class VoteEntry(DomainModel):
    """A single user's vote, timestamped when cast."""

    user_id: UserId
    voted_at: datetime = Field(default_factory=utc_now)


class VoteLedger(DomainModel):
    """Upvote and downvote sets of a content item.

    Business rules:
    - A user appears in at most one of the two sets
    - Voting the same way twice retracts the vote
    - Voting the opposite way switches the vote in one step
    """

    upvotes: list[VoteEntry] = Field(default_factory=list)
    downvotes: list[VoteEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_single_vote_per_user(self) -> "VoteLedger":
        """Ensure no user holds both an upvote and a downvote."""
        up = {entry.user_id for entry in self.upvotes}
        down = {entry.user_id for entry in self.downvotes}
        if up & down:
            raise ValueError("A user cannot both upvote and downvote the same item")
        if len(up) != len(self.upvotes) or len(down) != len(self.downvotes):
            raise ValueError("A user can only vote once per item")
        return self

    @property
    def score(self) -> int:
        """Net vote score (upvotes minus downvotes)."""
        return len(self.upvotes) - len(self.downvotes)

    def vote_of(self, user_id: UserId) -> Optional[VoteType]:
        """Return the vote the user currently holds, if any."""
        if any(entry.user_id == user_id for entry in self.upvotes):
            return VoteType.UP
        if any(entry.user_id == user_id for entry in self.downvotes):
            return VoteType.DOWN
        return None

    def toggle(
        self,
        user_id: UserId,
        vote_type: VoteType,
        voted_at: Optional[datetime] = None,
    ) -> "VoteLedger":
        """Apply a vote with toggle semantics.

        The voter is removed from whichever set holds them. If the requested
        set did not already hold them, they are added to it.

        Args:
            user_id: Voter
            vote_type: Requested vote direction
            voted_at: Timestamp for a newly cast vote (defaults to now)

        Returns:
            New ledger with the vote applied
        """
        previous = self.vote_of(user_id)

        upvotes = [entry for entry in self.upvotes if entry.user_id != user_id]
        downvotes = [entry for entry in self.downvotes if entry.user_id != user_id]

        if previous != vote_type:
            entry = VoteEntry(user_id=user_id, voted_at=voted_at or utc_now())
            if vote_type == VoteType.UP:
                upvotes.append(entry)
            else:
                downvotes.append(entry)

        return VoteLedger(upvotes=upvotes, downvotes=downvotes)
