"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from qna.domain.model.question import Question
from qna.domain.value import QuestionId, TagName, UserId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    VOTES = "votes"  # upvote count DESC, then downvote count ASC
    VIEWS = "views"  # views DESC


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Listing and counting only ever consider active questions;
    find_by_id returns soft-deleted questions too.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, including soft-deleted ones.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tags: Optional[List[TagName]] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find active questions with filtering and pagination.

        Args:
            sort: Sort order
            tags: Match questions carrying any of these tags
            search: Full-text search over title and description
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        tags: Optional[List[TagName]] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count active questions matching the given filters.

        Args:
            tags: Match questions carrying any of these tags
            search: Full-text search over title and description

        Returns:
            Total number of questions matching the criteria
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 5
    ) -> List[Question]:
        """Find a user's most recent active questions.

        Args:
            author_id: Author's user ID
            limit: Maximum number of questions to return

        Returns:
            Questions, newest first
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's active questions."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its vote ledger.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1.

        Args:
            question_id: The question's unique identifier
        """
        pass
