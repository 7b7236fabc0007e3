"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model.answer import Answer
from qna.domain.value import AnswerId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entities."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, including soft-deleted ones.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, answer_ids: List[AnswerId]) -> List[Answer]:
        """Find several answers at once.

        Args:
            answer_ids: Answer identifiers (unknown ids are skipped)

        Returns:
            Answers found, in the order of answer_ids
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int = 5) -> List[Answer]:
        """Find a user's most recent active answers.

        Args:
            author_id: Author's user ID
            limit: Maximum number of answers to return

        Returns:
            Answers, newest first
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's active answers."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update), including its vote ledger.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass
