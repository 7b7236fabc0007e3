"""Answer entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.content import ContentItem
from qna.domain.value import AnswerId, QuestionId


class Answer(ContentItem):
    """Answer to a question.

    Business rules:
    - Content must be at least 10 characters
    - is_accepted is True exactly when the parent question's
      accepted_answer_id points here
    """

    id: AnswerId
    question_id: QuestionId
    content: str = Field(min_length=10)
    is_accepted: bool = False
    accepted_at: Optional[datetime] = None
