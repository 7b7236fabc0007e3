"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.content import ContentItem
from qna.domain.value import AnswerId, QuestionId, TagName, UserId


class Question(ContentItem):
    """Question aggregate root.

    Owns the ordered list of its active answers and points at the accepted
    one, if any. Closing a question blocks further acceptance.
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20)
    tags: list[TagName] = Field(min_length=1, max_length=5)
    views: int = Field(default=0, ge=0)
    answer_ids: list[AnswerId] = Field(default_factory=list)
    accepted_answer_id: Optional[AnswerId] = None
    is_closed: bool = False
    closed_at: Optional[datetime] = None
    closed_by: Optional[UserId] = None

    @property
    def answer_count(self) -> int:
        """Number of active answers."""
        return len(self.answer_ids)
