"""Question routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from qna.application.usecase.common import MessageResponse, VoteResponse
from qna.application.usecase.question import (
    CloseQuestionRequest,
    CloseQuestionResponse,
    CloseQuestionUseCase,
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionDetail,
    VoteOnQuestionRequest,
    VoteOnQuestionUseCase,
)
from qna.domain.repository import QuestionSortOrder
from qna.domain.service import JWTService
from qna.domain.value import VoteType
from qna.interface.api.auth import require_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for creating a question."""

    title: str
    description: str
    tags: list[str]


class VoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    vote_type: VoteType


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=50),
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.NEWEST),
    tags: str | None = Query(default=None, description="Comma-separated tag names"),
    search: str | None = Query(default=None),
) -> ListQuestionsResponse:
    """List active questions with pagination and filtering.

    Args:
        list_questions_use_case: List questions use case from DI
        page: Page number (1-based)
        limit: Page size (max 50)
        sort: newest, oldest, votes or views
        tags: Comma-separated tags; a question matches if it has any of them
        search: Full-text query over title and description

    Returns:
        Page of questions with pagination metadata
    """
    tag_list = [tag.strip() for tag in tags.split(",") if tag.strip()] if tags else []
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            page=page, limit=limit, sort=sort, tags=tag_list, search=search or None
        )
    )


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Create a new question.

    Requires authentication.

    Raises:
        ValidationError: On invalid title, description or tags (400)
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            title=request.title,
            description=request.description,
            tags=request.tags,
            user_id=user_id,
        )
    )


@router.get("/{question_id}", response_model=QuestionDetail)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionDetail:
    """Get a question with its answers.

    Authentication is optional. Views by anyone other than the author are
    counted.
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=question_id, viewer_id=viewer_id)
    )


@router.post("/{question_id}/vote", response_model=VoteResponse)
async def vote_on_question(
    question_id: str,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteOnQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Upvote or downvote a question.

    Voting the same way twice removes the vote; voting the other way
    switches it.

    Raises:
        BusinessRuleViolationError: When voting on your own question (400)
        NotFoundError: If the question does not exist (404)
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await vote_use_case.execute(
        VoteOnQuestionRequest(
            question_id=question_id, user_id=user_id, vote_type=request.vote_type
        )
    )


@router.post("/{question_id}/close", response_model=CloseQuestionResponse)
async def close_question(
    question_id: str,
    close_question_use_case: FromDishka[CloseQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CloseQuestionResponse:
    """Close a question. Only its author or an admin may do this."""
    user_id = require_user_id(jwt_service, auth_token)
    return await close_question_use_case.execute(
        CloseQuestionRequest(question_id=question_id, user_id=user_id)
    )


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: str,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Soft-delete a question. Only its author or an admin may do this."""
    user_id = require_user_id(jwt_service, auth_token)
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=question_id, user_id=user_id)
    )
