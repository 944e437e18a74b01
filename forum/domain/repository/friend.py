"""Friend request and friendship repository interfaces."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional, Tuple

from forum.domain.model.friend import FriendRequest, Friendship
from forum.domain.value import FriendRequestId, FriendRequestStatus, UserId


class FriendRequestRepository(ABC):
    """Repository for FriendRequest entity."""

    @abstractmethod
    async def find_by_id(self, request_id: FriendRequestId) -> Optional[FriendRequest]:
        """Find a friend request by ID.

        Args:
            request_id: The request's unique identifier

        Returns:
            The request if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_between(
        self,
        user_a: UserId,
        user_b: UserId,
        statuses: Collection[FriendRequestStatus],
    ) -> List[FriendRequest]:
        """Find requests between two users in either direction.

        Args:
            user_a: One user of the pair
            user_b: The other user of the pair
            statuses: Only return requests in one of these statuses

        Returns:
            Matching requests, newest first
        """
        pass

    @abstractmethod
    async def find_directed(
        self,
        sender_id: UserId,
        receiver_id: UserId,
        status: FriendRequestStatus,
    ) -> Optional[FriendRequest]:
        """Find the newest request from ``sender_id`` to ``receiver_id``.

        Args:
            sender_id: Sending user
            receiver_id: Receiving user
            status: Required status

        Returns:
            The request if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_sender(
        self, sender_id: UserId, status: FriendRequestStatus
    ) -> List[FriendRequest]:
        """List requests sent by a user in the given status, newest first."""
        pass

    @abstractmethod
    async def find_by_receiver(
        self, receiver_id: UserId, status: FriendRequestStatus
    ) -> List[FriendRequest]:
        """List requests received by a user in the given status, newest first."""
        pass

    @abstractmethod
    async def save(self, request: FriendRequest) -> FriendRequest:
        """Save a friend request (create or update).

        Args:
            request: The request to save

        Returns:
            The saved request

        Raises:
            IntegrityError: If another non-declined request exists for the pair
        """
        pass


class FriendshipRepository(ABC):
    """Repository for directed friendship rows.

    Rows are only ever written and removed as symmetric pairs.
    """

    @abstractmethod
    async def save_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Tuple[Friendship, Friendship]:
        """Create both directed rows of a friendship.

        Args:
            user_a: One user of the pair
            user_b: The other user of the pair

        Returns:
            The (a->b, b->a) rows
        """
        pass

    @abstractmethod
    async def delete_pair(self, user_a: UserId, user_b: UserId) -> int:
        """Delete both directed rows of a friendship.

        Returns:
            Number of rows deleted (0 or 2)
        """
        pass

    @abstractmethod
    async def exists(self, user_id: UserId, friend_id: UserId) -> bool:
        """Whether the directed row user_id->friend_id exists."""
        pass

    @abstractmethod
    async def find_friend_ids(self, user_id: UserId) -> List[UserId]:
        """IDs of all friends of a user."""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UserId) -> int:
        """Number of friends of a user."""
        pass
