"""In-memory user repository for testing."""

from typing import Optional

from qna.domain.model.user import User
from qna.domain.repository.user import UserRepository
from qna.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._users[u] for u in user_ids if u in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def _matching(self, search: Optional[str]) -> list[User]:
        users = list(self._users.values())
        if search:
            needle = search.lower()
            users = [u for u in users if needle in u.username.root.lower()]
        return users

    async def find_all(
        self,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """List users, newest first."""
        users = self._matching(search)
        users.sort(key=lambda u: u.created_at, reverse=True)
        return users[offset : offset + limit]

    async def count(self, search: Optional[str] = None) -> int:
        """Count users matching the search."""
        return len(self._matching(search))

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._users[user.id] = user
        return user
