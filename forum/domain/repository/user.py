"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.user import User
from forum.domain.value import UserId
from forum.domain.value.types import Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by their identity provider id.

        Args:
            external_id: The user's id at the identity provider

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users at once.

        Unknown ids are skipped.

        Args:
            user_ids: User IDs to load

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        enrolled_only: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> List[User]:
        """List users, newest first.

        Args:
            enrolled_only: Only return users with ``is_enrolled`` set
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the external id or username is already taken
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user and everything they own.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if a user was deleted, False if none existed
        """
        pass
