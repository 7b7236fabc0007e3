"""Answer routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from qna.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    VoteOnAnswerRequest,
    VoteOnAnswerUseCase,
)
from qna.application.usecase.common import MessageResponse, VoteResponse
from qna.domain.service import JWTService
from qna.interface.api.auth import require_user_id
from qna.interface.api.routes.questions import VoteAPIRequest

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str
    question_id: str


@router.post("", response_model=CreateAnswerResponse, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Post an answer to a question.

    Requires authentication. The question author is notified unless they
    answered their own question.

    Args:
        request: Answer content and target question
        create_answer_use_case: Create answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created answer

    Raises:
        ValidationError: If the content is too short (400)
        NotFoundError: If the question does not exist (404)
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            content=request.content, question_id=request.question_id, user_id=user_id
        )
    )


@router.post("/{answer_id}/vote", response_model=VoteResponse)
async def vote_on_answer(
    answer_id: str,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteOnAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Upvote or downvote an answer."""
    user_id = require_user_id(jwt_service, auth_token)
    return await vote_use_case.execute(
        VoteOnAnswerRequest(
            answer_id=answer_id, user_id=user_id, vote_type=request.vote_type
        )
    )


@router.post("/{answer_id}/accept", response_model=AcceptAnswerResponse)
async def accept_answer(
    answer_id: str,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptAnswerResponse:
    """Accept an answer. Only the question author may do this.

    Any previously accepted answer on the same question is unaccepted.

    Raises:
        NotAuthorizedError: If the caller is not the question author (403)
        BusinessRuleViolationError: If the question is closed (400)
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(answer_id=answer_id, user_id=user_id)
    )


@router.delete("/{answer_id}", response_model=MessageResponse)
async def delete_answer(
    answer_id: str,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Soft-delete an answer. Only its author or an admin may do this."""
    user_id = require_user_id(jwt_service, auth_token)
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=answer_id, user_id=user_id)
    )
