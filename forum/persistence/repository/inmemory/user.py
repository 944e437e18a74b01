"""In-memory user repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import UserId
from forum.domain.value.types import Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by their identity provider id."""
        for user in self._users.values():
            if user.external_id == external_id:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_all(
        self,
        enrolled_only: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> List[User]:
        users = sorted(self._users.values(), key=lambda u: u.username.root)
        if enrolled_only:
            users = [u for u in users if u.is_enrolled]
        return users[offset : offset + limit]

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user has the same external id or username
        """
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.external_id == user.external_id or other.username == user.username:
                raise IntegrityError("Duplicate user", None, Exception())

        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        return self._users.pop(user_id, None) is not None
