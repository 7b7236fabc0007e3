"""Shared fields of votable content (questions and answers)."""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.model.vote import VoteLedger
from qna.domain.value import UserId


class ContentItem(DomainModel):
    """Authored, votable, soft-deletable content.

    Soft-deleted items keep their row with is_active=False and remain
    fetchable by id.
    """

    author_id: UserId
    votes: VoteLedger = Field(default_factory=VoteLedger)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def vote_score(self) -> int:
        """Net vote score."""
        return self.votes.score
