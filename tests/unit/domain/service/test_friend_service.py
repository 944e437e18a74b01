"""Unit tests for FriendService."""

from uuid import uuid4

import pytest

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.repository import (
    FriendshipRepository,
    NotificationRepository,
    UserRepository,
)
from forum.domain.service import FriendService, PointsService
from forum.domain.value import (
    FriendRequestStatus,
    NotificationType,
    PointType,
    RelationshipState,
    UserId,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _two_users(unit_env):
    user_repo = await unit_env.get(UserRepository)
    alice = await user_repo.save(make_user("alice"))
    bob = await user_repo.save(make_user("bob"))
    return alice, bob


class TestSendRequest:
    """Tests for send_request method."""

    @pytest.mark.asyncio
    async def test_send_request_creates_pending_request_and_notifies_receiver(
        self, unit_env
    ):
        """Sending a request should create it and link the receiver's notification."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice, bob = await _two_users(unit_env)

        # Act
        request = await friend_service.send_request(alice.id, bob.id)

        # Assert
        assert request.status == FriendRequestStatus.PENDING
        assert request.notification_id is not None

        notification = await notification_repo.find_by_id(request.notification_id)
        assert notification.user_id == bob.id
        assert notification.type == NotificationType.FRIEND_REQUEST
        assert notification.url == f"/user/{alice.id}"
        assert notification.content == "alice has sent you a friend request"

    @pytest.mark.asyncio
    async def test_send_request_to_self_raises_conflict(self, unit_env):
        """A user cannot befriend themselves."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        alice, _ = await _two_users(unit_env)

        # Act & Assert
        with pytest.raises(ConflictError):
            await friend_service.send_request(alice.id, alice.id)

    @pytest.mark.asyncio
    async def test_second_request_in_either_direction_raises_conflict(self, unit_env):
        """Only one active request may exist per pair of users."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        alice, bob = await _two_users(unit_env)
        await friend_service.send_request(alice.id, bob.id)

        # Act & Assert
        with pytest.raises(ConflictError):
            await friend_service.send_request(alice.id, bob.id)
        with pytest.raises(ConflictError):
            await friend_service.send_request(bob.id, alice.id)

    @pytest.mark.asyncio
    async def test_send_request_to_unknown_user_raises_not_found(self, unit_env):
        """The receiver must exist."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        alice, _ = await _two_users(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await friend_service.send_request(alice.id, UserId(uuid4()))


class TestRelationship:
    """Tests for query_relationship across the request lifecycle."""

    @pytest.mark.asyncio
    async def test_pending_request_is_sent_for_sender_and_received_for_receiver(
        self, unit_env
    ):
        """A pending request reads differently from each side."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        alice, bob = await _two_users(unit_env)

        # Act
        await friend_service.send_request(alice.id, bob.id)

        # Assert
        assert (
            await friend_service.query_relationship(alice.id, bob.id)
            == RelationshipState.SENT
        )
        assert (
            await friend_service.query_relationship(bob.id, alice.id)
            == RelationshipState.RECEIVED
        )

    @pytest.mark.asyncio
    async def test_accept_creates_symmetric_friendship(self, unit_env):
        """Accepting should make both users friends of each other."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        friendship_repo = await unit_env.get(FriendshipRepository)
        alice, bob = await _two_users(unit_env)
        await friend_service.send_request(alice.id, bob.id)

        # Act
        accepted = await friend_service.accept_request(bob.id, alice.id)

        # Assert
        assert accepted.status == FriendRequestStatus.ACCEPTED
        assert await friendship_repo.exists(alice.id, bob.id)
        assert await friendship_repo.exists(bob.id, alice.id)
        assert (
            await friend_service.query_relationship(alice.id, bob.id)
            == RelationshipState.FRIENDS
        )
        assert (
            await friend_service.query_relationship(bob.id, alice.id)
            == RelationshipState.FRIENDS
        )

    @pytest.mark.asyncio
    async def test_accept_notifies_both_users(self, unit_env):
        """Both sides receive an accepted notification."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice, bob = await _two_users(unit_env)
        await friend_service.send_request(alice.id, bob.id)

        # Act
        await friend_service.accept_request(bob.id, alice.id)

        # Assert
        alice_inbox = await notification_repo.find_by_user(alice.id)
        bob_inbox = await notification_repo.find_by_user(bob.id)
        assert [n.content for n in alice_inbox] == [
            "bob has accepted your friend request"
        ]
        assert "you are now friend with alice" in [n.content for n in bob_inbox]

    @pytest.mark.asyncio
    async def test_accept_without_pending_request_raises_not_found(self, unit_env):
        """There must be something to accept."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        alice, bob = await _two_users(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await friend_service.accept_request(bob.id, alice.id)


class TestCancelRequest:
    """Tests for cancel_request method."""

    @pytest.mark.asyncio
    async def test_cancel_pending_request_removes_its_notification(self, unit_env):
        """Cancelling should decline the request and delete the linked notification."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice, bob = await _two_users(unit_env)
        request = await friend_service.send_request(alice.id, bob.id)

        # Act
        declined = await friend_service.cancel_request(alice.id, bob.id)

        # Assert
        assert declined.status == FriendRequestStatus.DECLINED
        assert declined.notification_id is None
        assert await notification_repo.find_by_id(request.notification_id) is None
        assert (
            await friend_service.query_relationship(alice.id, bob.id)
            == RelationshipState.NONE
        )

    @pytest.mark.asyncio
    async def test_unfriend_removes_both_friendship_rows(self, unit_env):
        """Cancelling an accepted request should end the friendship on both sides."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        friendship_repo = await unit_env.get(FriendshipRepository)
        alice, bob = await _two_users(unit_env)
        await friend_service.send_request(alice.id, bob.id)
        await friend_service.accept_request(bob.id, alice.id)

        # Act
        await friend_service.cancel_request(bob.id, alice.id)

        # Assert
        assert not await friendship_repo.exists(alice.id, bob.id)
        assert not await friendship_repo.exists(bob.id, alice.id)
        assert await friend_service.list_friends(alice.id) == []

    @pytest.mark.asyncio
    async def test_new_request_allowed_after_decline(self, unit_env):
        """A declined request does not block a fresh one."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        alice, bob = await _two_users(unit_env)
        await friend_service.send_request(alice.id, bob.id)
        await friend_service.cancel_request(bob.id, alice.id)

        # Act
        request = await friend_service.send_request(bob.id, alice.id)

        # Assert
        assert request.status == FriendRequestStatus.PENDING
        assert (
            await friend_service.query_relationship(bob.id, alice.id)
            == RelationshipState.SENT
        )

    @pytest.mark.asyncio
    async def test_cancel_without_active_request_raises_not_found(self, unit_env):
        """Nothing to cancel between strangers."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        alice, bob = await _two_users(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await friend_service.cancel_request(alice.id, bob.id)


class TestListings:
    """Tests for friend and request listings."""

    @pytest.mark.asyncio
    async def test_list_friends_reports_point_totals_at_read_time(self, unit_env):
        """Totals follow the ledger, not the moment the friendship started."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        points_service = await unit_env.get(PointsService)
        alice, bob = await _two_users(unit_env)
        await friend_service.send_request(alice.id, bob.id)
        await friend_service.accept_request(bob.id, alice.id)
        before = await friend_service.list_friends(alice.id)

        # Act
        await points_service.award(bob.id, PointType.CREATE_POST)
        after = await friend_service.list_friends(alice.id)

        # Assert
        assert [f.user.id for f in after] == [bob.id]
        assert after[0].total_points == await points_service.get_total(bob.id)
        assert after[0].total_points > before[0].total_points

    @pytest.mark.asyncio
    async def test_request_lists_are_pending_only_and_directional(self, unit_env):
        """Sent and received lists only hold pending requests on their own side."""
        # Arrange
        friend_service = await unit_env.get(FriendService)
        user_repo = await unit_env.get(UserRepository)
        alice, bob = await _two_users(unit_env)
        carol = await user_repo.save(make_user("carol"))
        dan = await user_repo.save(make_user("dan"))
        await friend_service.send_request(alice.id, bob.id)
        await friend_service.send_request(carol.id, alice.id)
        await friend_service.send_request(dan.id, alice.id)
        await friend_service.accept_request(alice.id, dan.id)

        # Act
        alice_sent = await friend_service.list_sent_requests(alice.id)
        alice_received = await friend_service.list_received_requests(alice.id)
        bob_sent = await friend_service.list_sent_requests(bob.id)
        bob_received = await friend_service.list_received_requests(bob.id)

        # Assert
        assert [p.counterpart.id for p in alice_sent] == [bob.id]
        assert [p.counterpart.id for p in alice_received] == [carol.id]
        assert bob_sent == []
        assert [p.counterpart.id for p in bob_received] == [alice.id]
        assert all(
            p.request.status == FriendRequestStatus.PENDING
            for p in alice_sent + alice_received + bob_received
        )
