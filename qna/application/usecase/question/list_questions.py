"""List questions use case."""

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.common import Pagination, QuestionItem
from qna.domain.repository import QuestionRepository, QuestionSortOrder
from qna.domain.service import UserService
from qna.domain.validation import normalize_tags
from qna.domain.value import TagName
from qna.domain.value.types import TAG_MAX_LENGTH


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=50)
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    tags: list[str] = Field(default_factory=list)  # Match any of these tags
    search: str | None = None  # Full-text search over title and description


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionItem]
    pagination: Pagination


class ListQuestionsUseCase:
    """Use case for listing active questions with filtering and pagination."""

    def __init__(
        self, question_repository: QuestionRepository, user_service: UserService
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_repository: Question repository
            user_service: User domain service
        """
        self.question_repository = question_repository
        self.user_service = user_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters, sort order and pagination

        Returns:
            Questions on the requested page plus page metadata
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            tags=request.tags,
            search=request.search,
            page=request.page,
            limit=request.limit,
        ):
            requested = normalize_tags(request.tags)
            tag_filter = [TagName(t) for t in requested if len(t) <= TAG_MAX_LENGTH]
            search = request.search.strip() if request.search else None

            if requested and not tag_filter:
                # Only over-long tags were requested; nothing can carry them
                return ListQuestionsResponse(
                    questions=[],
                    pagination=Pagination.build(request.page, request.limit, 0),
                )

            total = await self.question_repository.count(
                tags=tag_filter or None, search=search or None
            )
            questions = await self.question_repository.find_all(
                sort=request.sort,
                tags=tag_filter or None,
                search=search or None,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )

            authors = await self.user_service.get_by_ids(
                [q.author_id for q in questions]
            )
            items = [
                QuestionItem.from_question(q, authors.get(q.author_id))
                for q in questions
            ]

            logfire.info("Questions listed", count=len(items), total=total)

            return ListQuestionsResponse(
                questions=items,
                pagination=Pagination.build(request.page, request.limit, total),
            )
