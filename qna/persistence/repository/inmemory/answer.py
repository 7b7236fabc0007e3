"""In-memory answer repository for testing."""

from typing import Optional

from qna.domain.model.answer import Answer
from qna.domain.repository.answer import AnswerRepository
from qna.domain.value import AnswerId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, including soft-deleted ones."""
        return self._answers.get(answer_id)

    async def find_by_ids(self, answer_ids: list[AnswerId]) -> list[Answer]:
        """Find several answers at once, in the order of answer_ids."""
        return [self._answers[a] for a in answer_ids if a in self._answers]

    def _by_author(self, author_id: UserId) -> list[Answer]:
        return [
            a
            for a in self._answers.values()
            if a.author_id == author_id and a.is_active
        ]

    async def find_by_author(self, author_id: UserId, limit: int = 5) -> list[Answer]:
        """Find a user's most recent active answers."""
        answers = self._by_author(author_id)
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[:limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's active answers."""
        return len(self._by_author(author_id))

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        self._answers[answer.id] = answer
        return answer
