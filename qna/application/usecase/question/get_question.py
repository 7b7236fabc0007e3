"""Get question use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import AnswerItem, QuestionItem, parse_id
from qna.domain.repository import AnswerRepository
from qna.domain.service import QuestionService, UserService
from qna.domain.value import QuestionId, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    viewer_id: str | None = None  # Current user ID (if authenticated)


class QuestionDetail(QuestionItem):
    """Question with its answers populated."""

    closed_by: str | None
    answers: list[AnswerItem]


class GetQuestionUseCase:
    """Use case for reading a single question.

    Every read by someone other than the author counts as a view.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_repository: AnswerRepository,
        user_service: UserService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_repository: Answer repository
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_repository = answer_repository
        self.user_service = user_service

    async def execute(self, request: GetQuestionRequest) -> QuestionDetail:
        """Execute get question flow.

        Args:
            request: Question ID and optional viewer

        Returns:
            The question with answers and author details

        Raises:
            NotFoundError: If the question is missing, deleted or the ID is
                malformed
        """
        with logfire.span("get_question.execute", question_id=request.question_id):
            question_id = QuestionId(parse_id(request.question_id, "Question"))
            question = await self.question_service.get_active_question(question_id)

            viewer_id = (
                UserId(parse_id(request.viewer_id, "User"))
                if request.viewer_id
                else None
            )
            question = await self.question_service.record_view(question, viewer_id)

            answers = [
                a
                for a in await self.answer_repository.find_by_ids(question.answer_ids)
                if a.is_active
            ]

            authors = await self.user_service.get_by_ids(
                [question.author_id, *[a.author_id for a in answers]]
            )

            item = QuestionItem.from_question(question, authors.get(question.author_id))
            return QuestionDetail(
                **item.model_dump(),
                closed_by=str(question.closed_by) if question.closed_by else None,
                answers=[
                    AnswerItem.from_answer(a, authors.get(a.author_id)) for a in answers
                ],
            )

