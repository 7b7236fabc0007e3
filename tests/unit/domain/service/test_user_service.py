"""Unit tests for UserService."""

import pytest

from qna.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    ValidationError,
)
from qna.domain.repository import UserRepository
from qna.domain.service import UserService
from qna.domain.value import UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, unit_env):
        service = await unit_env.get(UserService)

        user = await service.register("alice", "secret123")

        assert user.username.root == "alice"
        assert user.role == UserRole.USER
        assert user.reputation == 0
        assert user.password_hash != "secret123"
        assert user.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_taken_username(self, unit_env):
        service = await unit_env.get(UserService)
        await service.register("alice", "secret123")

        with pytest.raises(ConflictError, match="Username is already taken"):
            await service.register("alice", "another-secret")

    @pytest.mark.asyncio
    async def test_malformed_input(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(ValidationError) as exc_info:
            await service.register("a b", "123")

        assert [e.field for e in exc_info.value.errors] == ["username", "password"]


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_correct_credentials(self, unit_env):
        service = await unit_env.get(UserService)
        registered = await service.register("alice", "secret123")

        user = await service.authenticate("alice", "secret123")

        assert user.id == registered.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,password",
        [("alice", "wrong-password"), ("nobody", "secret123"), ("!!", "secret123")],
    )
    async def test_bad_credentials_share_one_error(self, unit_env, username, password):
        service = await unit_env.get(UserService)
        await service.register("alice", "secret123")

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await service.authenticate(username, password)


class TestUpdateProfile:
    """Tests for update_profile method."""

    @pytest.mark.asyncio
    async def test_updates_only_given_fields(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.register("alice", "secret123")

        updated = await service.update_profile(user.id, bio="Pythonista")

        assert updated.bio == "Pythonista"
        assert updated.username.root == "alice"
        assert updated.avatar_url is None

    @pytest.mark.asyncio
    async def test_rename_to_taken_username(self, unit_env):
        service = await unit_env.get(UserService)
        await service.register("alice", "secret123")
        bob = await service.register("bob", "secret123")

        with pytest.raises(ConflictError):
            await service.update_profile(bob.id, username="alice")

    @pytest.mark.asyncio
    async def test_keeping_own_username_is_allowed(self, unit_env):
        service = await unit_env.get(UserService)
        alice = await service.register("alice", "secret123")

        updated = await service.update_profile(alice.id, username="alice", bio="hi")

        assert updated.username.root == "alice"
        assert updated.bio == "hi"


class TestListUsers:
    """Tests for list_users method."""

    @pytest.mark.asyncio
    async def test_admin_lists_with_search(self, unit_env):
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user("root", role=UserRole.ADMIN))
        await user_repo.save(make_user("alice"))
        await user_repo.save(make_user("malice"))
        await user_repo.save(make_user("bob"))

        users, total = await service.list_users(admin, search="ALICE")

        assert total == 2
        assert {u.username.root for u in users} == {"alice", "malice"}

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotAuthorizedError, match="Admin access required"):
            await service.list_users(make_user("alice"))
