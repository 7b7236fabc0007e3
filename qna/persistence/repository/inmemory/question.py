"""In-memory question repository for testing."""

from typing import Optional

from qna.domain.model.question import Question
from qna.domain.repository.question import QuestionRepository, QuestionSortOrder
from qna.domain.value import QuestionId, TagName, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Search requires every whitespace-separated term to appear in the title
    or description (case-insensitive).
    """

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, including soft-deleted ones."""
        return self._questions.get(question_id)

    def _matching(
        self, tags: Optional[list[TagName]], search: Optional[str]
    ) -> list[Question]:
        questions = [q for q in self._questions.values() if q.is_active]

        # Match any of the requested tags
        if tags:
            wanted = set(tags)
            questions = [q for q in questions if wanted & set(q.tags)]

        if search:
            terms = search.lower().split()
            questions = [
                q
                for q in questions
                if all(
                    term in q.title.lower() or term in q.description.lower()
                    for term in terms
                )
            ]

        return questions

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tags: Optional[list[TagName]] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find active questions with filtering and pagination."""
        questions = self._matching(tags, search)

        # Newest first is the tie-breaker for every order (sort is stable)
        questions.sort(key=lambda q: q.created_at, reverse=True)

        if sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif sort == QuestionSortOrder.VOTES:
            questions.sort(
                key=lambda q: (-len(q.votes.upvotes), len(q.votes.downvotes))
            )
        elif sort == QuestionSortOrder.VIEWS:
            questions.sort(key=lambda q: q.views, reverse=True)

        # Paginate
        return questions[offset : offset + limit]

    async def count(
        self,
        tags: Optional[list[TagName]] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count active questions matching the given filters."""
        return len(self._matching(tags, search))

    async def find_by_author(
        self, author_id: UserId, limit: int = 5
    ) -> list[Question]:
        """Find a user's most recent active questions."""
        questions = [
            q
            for q in self._questions.values()
            if q.author_id == author_id and q.is_active
        ]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[:limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's active questions."""
        return sum(
            1
            for q in self._questions.values()
            if q.author_id == author_id and q.is_active
        )

    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        The stored view count is kept on update; only increment_views
        changes it.
        """
        existing = self._questions.get(question.id)
        if existing:
            question = question.model_copy(update={"views": existing.views})
        self._questions[question.id] = question
        return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment the view counter by 1."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )
