"""Unit tests for auth and user use cases."""

import pytest

from qna.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from qna.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListUsersRequest,
    ListUsersUseCase,
)
from qna.domain.error import AuthenticationError, NotAuthorizedError, NotFoundError
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.value import UserRole
from qna.util.jwt import JWTError
from tests.conftest import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAuthUseCases:
    @pytest.mark.asyncio
    async def test_register_then_login_then_resolve_token(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)

        registered = await register.execute(
            RegisterRequest(username="alice", password="secret123")
        )
        logged_in = await login.execute(
            LoginRequest(username="alice", password="secret123")
        )
        me = await current_user.execute(GetCurrentUserRequest(token=logged_in.token))

        assert registered.user.username == "alice"
        assert registered.user.role == "user"
        assert me.id == registered.user.id

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(RegisterRequest(username="alice", password="secret123"))

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(username="alice", password="nope-nope"))

    @pytest.mark.asyncio
    async def test_tampered_token(self, unit_env):
        current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await current_user.execute(GetCurrentUserRequest(token="abc.def.ghi"))


class TestGetUserProfile:
    @pytest.mark.asyncio
    async def test_profile_with_recent_activity(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        alice = await user_repo.save(make_user("alice"))
        for minute in range(7):
            await question_repo.save(make_question(alice.id, created_at=at(minute)))
        elsewhere = await question_repo.save(
            make_question(make_user("bob").id, title="Someone else's question")
        )
        await answer_repo.save(make_answer(elsewhere.id, alice.id))

        response = await use_case.execute(GetUserProfileRequest(user_id=str(alice.id)))

        profile = response.user
        assert profile.username == "alice"
        assert profile.question_count == 7
        assert profile.answer_count == 1
        assert len(profile.recent_questions) == 5
        assert profile.recent_questions[0].created_at == at(6)
        assert profile.recent_answers[0].question_title == "Someone else's question"

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(GetUserProfileRequest(user_id="nope"))


class TestListUsers:
    @pytest.mark.asyncio
    async def test_admin_sees_paginated_users(self, unit_env):
        use_case = await unit_env.get(ListUsersUseCase)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user("root", role=UserRole.ADMIN))
        for name in ("alice", "bob", "carol"):
            await user_repo.save(make_user(name))

        response = await use_case.execute(
            ListUsersRequest(user_id=str(admin.id), page=1, limit=2)
        )

        assert len(response.users) == 2
        assert response.pagination.total == 4
        assert response.pagination.has_next is True

    @pytest.mark.asyncio
    async def test_regular_user_is_forbidden(self, unit_env):
        use_case = await unit_env.get(ListUsersUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(ListUsersRequest(user_id=str(alice.id)))
