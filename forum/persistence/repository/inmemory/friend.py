"""In-memory friend request and friendship repositories for testing."""

from datetime import datetime
from typing import Collection, List, Optional, Tuple
from uuid import uuid4

from sqlalchemy.exc import IntegrityError

from forum.domain.model.friend import FriendRequest, Friendship
from forum.domain.repository.friend import (
    FriendRequestRepository,
    FriendshipRepository,
)
from forum.domain.value import FriendRequestId, FriendRequestStatus, FriendshipId, UserId


class InMemoryFriendRequestRepository(FriendRequestRepository):
    """In-memory implementation of FriendRequestRepository for testing."""

    def __init__(self) -> None:
        self._requests: dict[FriendRequestId, FriendRequest] = {}

    async def find_by_id(self, request_id: FriendRequestId) -> Optional[FriendRequest]:
        return self._requests.get(request_id)

    async def find_between(
        self,
        user_a: UserId,
        user_b: UserId,
        statuses: Collection[FriendRequestStatus],
    ) -> List[FriendRequest]:
        found = [
            r
            for r in self._requests.values()
            if r.involves(user_a, user_b) and r.status in statuses
        ]
        return sorted(found, key=lambda r: r.created_at, reverse=True)

    async def find_directed(
        self,
        sender_id: UserId,
        receiver_id: UserId,
        status: FriendRequestStatus,
    ) -> Optional[FriendRequest]:
        for request in sorted(
            self._requests.values(), key=lambda r: r.created_at, reverse=True
        ):
            if (
                request.sender_id == sender_id
                and request.receiver_id == receiver_id
                and request.status == status
            ):
                return request
        return None

    async def find_by_sender(
        self, sender_id: UserId, status: FriendRequestStatus
    ) -> List[FriendRequest]:
        return [
            r
            for r in self._requests.values()
            if r.sender_id == sender_id and r.status == status
        ]

    async def find_by_receiver(
        self, receiver_id: UserId, status: FriendRequestStatus
    ) -> List[FriendRequest]:
        return [
            r
            for r in self._requests.values()
            if r.receiver_id == receiver_id and r.status == status
        ]

    async def save(self, request: FriendRequest) -> FriendRequest:
        """Save or update a request.

        Raises:
            IntegrityError: If another non-declined request exists for the pair
        """
        if request.status != FriendRequestStatus.DECLINED:
            for other in self._requests.values():
                if (
                    other.id != request.id
                    and other.status != FriendRequestStatus.DECLINED
                    and other.involves(request.sender_id, request.receiver_id)
                ):
                    raise IntegrityError("Duplicate friend request", None, Exception())

        self._requests[request.id] = request
        return request


class InMemoryFriendshipRepository(FriendshipRepository):
    """In-memory implementation of FriendshipRepository for testing."""

    def __init__(self) -> None:
        self._friendships: list[Friendship] = []

    async def save_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Tuple[Friendship, Friendship]:
        if await self.exists(user_a, user_b) or await self.exists(user_b, user_a):
            raise IntegrityError("Duplicate friendship", None, Exception())

        now = datetime.now()
        forward = Friendship(
            id=FriendshipId(uuid4()), user_id=user_a, friend_id=user_b, created_at=now
        )
        backward = Friendship(
            id=FriendshipId(uuid4()), user_id=user_b, friend_id=user_a, created_at=now
        )
        self._friendships.extend([forward, backward])
        return forward, backward

    async def delete_pair(self, user_a: UserId, user_b: UserId) -> int:
        before = len(self._friendships)
        self._friendships = [
            f
            for f in self._friendships
            if {f.user_id, f.friend_id} != {user_a, user_b}
        ]
        return before - len(self._friendships)

    async def exists(self, user_id: UserId, friend_id: UserId) -> bool:
        return any(
            f.user_id == user_id and f.friend_id == friend_id
            for f in self._friendships
        )

    async def find_friend_ids(self, user_id: UserId) -> List[UserId]:
        return [f.friend_id for f in self._friendships if f.user_id == user_id]

    async def count_by_user(self, user_id: UserId) -> int:
        return sum(1 for f in self._friendships if f.user_id == user_id)
