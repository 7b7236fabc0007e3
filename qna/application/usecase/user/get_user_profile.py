"""Get user profile use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import UserResponse, parse_id
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.service import UserService
from qna.domain.value import UserId

RECENT_ITEMS = 5


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class RecentQuestion(BaseModel):
    """Recent question shown on a profile."""

    id: str
    title: str
    views: int
    created_at: datetime


class RecentAnswer(BaseModel):
    """Recent answer shown on a profile."""

    id: str
    question_id: str
    question_title: str | None
    content: str
    created_at: datetime


class UserProfile(UserResponse):
    """Public profile with activity summary."""

    question_count: int
    answer_count: int
    recent_questions: list[RecentQuestion]
    recent_answers: list[RecentAnswer]


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user: UserProfile


class GetUserProfileUseCase:
    """Use case for viewing a user's public profile."""

    def __init__(
        self,
        user_service: UserService,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.user_service = user_service
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Profile owner's user ID

        Returns:
            Profile with active question/answer counts and recent activity

        Raises:
            NotFoundError: If the user does not exist or the ID is malformed
        """
        with logfire.span("get_user_profile.execute", user_id=request.user_id):
            user_id = UserId(parse_id(request.user_id, "User"))
            user = await self.user_service.get_by_id(user_id)

            question_count = await self.question_repository.count_by_author(user_id)
            answer_count = await self.answer_repository.count_by_author(user_id)
            recent_questions = await self.question_repository.find_by_author(
                user_id, limit=RECENT_ITEMS
            )
            recent_answers = await self.answer_repository.find_by_author(
                user_id, limit=RECENT_ITEMS
            )

            # Titles of the questions the recent answers belong to
            titles: dict = {}
            for answer in recent_answers:
                if answer.question_id not in titles:
                    question = await self.question_repository.find_by_id(
                        answer.question_id
                    )
                    titles[answer.question_id] = question.title if question else None

            profile = UserProfile(
                **UserResponse.from_user(user).model_dump(),
                question_count=question_count,
                answer_count=answer_count,
                recent_questions=[
                    RecentQuestion(
                        id=str(q.id),
                        title=q.title,
                        views=q.views,
                        created_at=q.created_at,
                    )
                    for q in recent_questions
                ],
                recent_answers=[
                    RecentAnswer(
                        id=str(a.id),
                        question_id=str(a.question_id),
                        question_title=titles.get(a.question_id),
                        content=a.content,
                        created_at=a.created_at,
                    )
                    for a in recent_answers
                ],
            )
            return GetUserProfileResponse(user=profile)
