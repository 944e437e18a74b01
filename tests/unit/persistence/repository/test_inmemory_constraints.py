"""Unit tests for constraints enforced by the in-memory repositories.

Services rely on these matching the database: unique likes, one active
friend request per pair, newest-first inboxes.
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.model import FriendRequest, Like, Notification
from forum.domain.value import (
    FriendRequestId,
    FriendRequestStatus,
    LikeId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)
from forum.persistence.repository.inmemory import (
    InMemoryFriendRequestRepository,
    InMemoryFriendshipRepository,
    InMemoryLikeRepository,
    InMemoryNotificationRepository,
)


def _request(sender: UserId, receiver: UserId, status=FriendRequestStatus.PENDING):
    return FriendRequest(
        id=FriendRequestId(uuid4()),
        sender_id=sender,
        receiver_id=receiver,
        status=status,
    )


class TestInMemoryLikeRepository:
    @pytest.mark.asyncio
    async def test_second_like_by_same_user_violates_uniqueness(self):
        """(user_id, post_id) is unique."""
        # Arrange
        repo = InMemoryLikeRepository()
        user_id, post_id = UserId(uuid4()), PostId(uuid4())
        await repo.save(Like(id=LikeId(uuid4()), user_id=user_id, post_id=post_id))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save(Like(id=LikeId(uuid4()), user_id=user_id, post_id=post_id))

        assert await repo.count_by_post(post_id) == 1


class TestInMemoryFriendRequestRepository:
    """One non-declined request per unordered pair."""

    @pytest.mark.asyncio
    async def test_reverse_direction_request_is_rejected(self):
        # Arrange
        repo = InMemoryFriendRequestRepository()
        alice, bob = UserId(uuid4()), UserId(uuid4())
        await repo.save(_request(alice, bob))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save(_request(bob, alice))

    @pytest.mark.asyncio
    async def test_new_request_allowed_after_decline(self):
        # Arrange
        repo = InMemoryFriendRequestRepository()
        alice, bob = UserId(uuid4()), UserId(uuid4())
        first = await repo.save(_request(alice, bob))
        await repo.save(first.model_copy(update={"status": FriendRequestStatus.DECLINED}))

        # Act
        second = await repo.save(_request(bob, alice))

        # Assert
        active = await repo.find_between(
            alice, bob, [FriendRequestStatus.PENDING, FriendRequestStatus.ACCEPTED]
        )
        assert [r.id for r in active] == [second.id]

    @pytest.mark.asyncio
    async def test_updating_the_active_request_is_allowed(self):
        """Saving the same request with a new status is an update, not a duplicate."""
        # Arrange
        repo = InMemoryFriendRequestRepository()
        alice, bob = UserId(uuid4()), UserId(uuid4())
        request = await repo.save(_request(alice, bob))

        # Act
        await repo.save(request.model_copy(update={"status": FriendRequestStatus.ACCEPTED}))

        # Assert
        stored = await repo.find_by_id(request.id)
        assert stored.status == FriendRequestStatus.ACCEPTED


class TestInMemoryFriendshipRepository:
    @pytest.mark.asyncio
    async def test_pair_is_stored_in_both_directions(self):
        # Arrange
        repo = InMemoryFriendshipRepository()
        alice, bob = UserId(uuid4()), UserId(uuid4())

        # Act
        await repo.save_pair(alice, bob)

        # Assert
        assert await repo.exists(alice, bob)
        assert await repo.exists(bob, alice)
        assert await repo.find_friend_ids(alice) == [bob]

    @pytest.mark.asyncio
    async def test_duplicate_pair_is_rejected(self):
        # Arrange
        repo = InMemoryFriendshipRepository()
        alice, bob = UserId(uuid4()), UserId(uuid4())
        await repo.save_pair(alice, bob)

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save_pair(bob, alice)


class TestInMemoryNotificationRepository:
    @pytest.mark.asyncio
    async def test_find_by_user_is_newest_first_and_paged(self):
        # Arrange
        repo = InMemoryNotificationRepository()
        user_id = UserId(uuid4())
        start = datetime(2024, 1, 1)
        for i in range(3):
            await repo.save(
                Notification(
                    id=NotificationId(uuid4()),
                    user_id=user_id,
                    type=NotificationType.SYSTEM,
                    url="/",
                    content=f"message {i}",
                    created_at=start + timedelta(minutes=i),
                )
            )

        # Act
        page = await repo.find_by_user(user_id, limit=2, offset=0)
        rest = await repo.find_by_user(user_id, limit=2, offset=2)

        # Assert
        assert [n.content for n in page] == ["message 2", "message 1"]
        assert [n.content for n in rest] == ["message 0"]
