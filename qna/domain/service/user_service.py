"""User domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.config import AuthSettings
from qna.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from qna.domain.model import User
from qna.domain.model.common import utc_now
from qna.domain.repository import UserRepository
from qna.domain.validation import validate_profile_update, validate_registration
from qna.domain.value import UserId, Username
from qna.util.password import check_password, hash_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts and credentials."""

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: List[UserId]) -> dict[UserId, User]:
        """Get several users keyed by ID; unknown IDs are skipped."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def register(self, username: str, password: str) -> User:
        """Create a new account.

        Args:
            username: Requested username
            password: Plaintext password (stored as a bcrypt hash)

        Returns:
            The created user

        Raises:
            ValidationError: If username or password is malformed
            ConflictError: If the username is taken
        """
        with logfire.span("user_service.register", username=username):
            errors = validate_registration(username, password)
            if errors:
                raise ValidationError(errors)

            name = Username(username)
            if await self.user_repository.find_by_username(name):
                logfire.info("Registration with taken username", username=username)
                raise ConflictError("Username is already taken")

            user = User(
                id=UserId(uuid4()),
                username=name,
                password_hash=hash_password(password, self.auth_settings.bcrypt_rounds),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved

    async def authenticate(self, username: str, password: str) -> User:
        """Check credentials and return the matching user.

        Unknown usernames and wrong passwords produce the same error.

        Raises:
            AuthenticationError: If the credentials do not match
        """
        with logfire.span("user_service.authenticate", username=username):
            try:
                name = Username(username)
            except PydanticValidationError:
                raise AuthenticationError()

            user = await self.user_repository.find_by_username(name)
            if not user or not check_password(password, user.password_hash):
                logfire.warn("Failed login attempt", username=username)
                raise AuthenticationError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """Update profile fields; omitted fields stay unchanged.

        Args:
            user_id: User being updated
            username: New username
            bio: New bio (max 500 characters)
            avatar_url: New avatar URL

        Returns:
            The updated user

        Raises:
            ValidationError: If a field is malformed
            ConflictError: If the new username belongs to someone else
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            errors = validate_profile_update(username=username, bio=bio)
            if errors:
                raise ValidationError(errors)

            user = await self.get_by_id(user_id)
            update: dict = {}

            if username is not None and username != user.username.root:
                name = Username(username)
                existing = await self.user_repository.find_by_username(name)
                if existing and existing.id != user_id:
                    raise ConflictError("Username is already taken")
                update["username"] = name

            if bio is not None:
                update["bio"] = bio
            if avatar_url is not None:
                update["avatar_url"] = avatar_url

            if not update:
                return user

            update["updated_at"] = utc_now()
            saved = await self.user_repository.save(user.model_copy(update=update))
            logfire.info(
                "User profile updated", user_id=str(user_id), fields=sorted(update)
            )
            return saved

    async def list_users(
        self,
        actor: User,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[List[User], int]:
        """List users for administrators.

        Args:
            actor: Requesting user (must be an admin)
            search: Case-insensitive username substring
            limit: Page size
            offset: Number of users to skip

        Returns:
            Tuple of (users on this page, total matching users)

        Raises:
            NotAuthorizedError: If the actor is not an admin
        """
        with logfire.span("user_service.list_users", user_id=str(actor.id)):
            if not actor.is_admin:
                logfire.warn("Non-admin user listing attempt", user_id=str(actor.id))
                raise NotAuthorizedError("Admin access required")

            users = await self.user_repository.find_all(
                search=search, limit=limit, offset=offset
            )
            total = await self.user_repository.count(search=search)
            return users, total
