"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.repository import UserRepository
from forum.domain.service import NotificationService
from forum.domain.value import NotificationId, NotificationType, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotify:
    """Tests for notify method."""

    @pytest.mark.asyncio
    async def test_notify_unknown_recipient_returns_none(self, unit_env):
        """Notifications never fail the triggering operation."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)

        # Act
        result = await notification_service.notify(
            user_id=UserId(uuid4()),
            type=NotificationType.SYSTEM,
            url="/",
            content="Hello",
        )

        # Assert
        assert result is None

    @pytest.mark.asyncio
    async def test_notify_creates_unread_notification(self, unit_env):
        """New notifications start unread and count toward the badge."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        # Act
        notification = await notification_service.notify(
            user_id=user.id,
            type=NotificationType.SYSTEM,
            url="/",
            content="Welcome",
        )

        # Assert
        assert notification.is_read is False
        assert await notification_service.count_unread(user.id) == 1


class TestMarkRead:
    """Tests for mark_read method."""

    @pytest.mark.asyncio
    async def test_owner_can_mark_read(self, unit_env):
        """Marking read should clear the unread count."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))
        notification = await notification_service.notify(
            user.id, NotificationType.SYSTEM, "/", "Welcome"
        )

        # Act
        updated = await notification_service.mark_read(notification.id, user.id)

        # Assert
        assert updated.is_read is True
        assert await notification_service.count_unread(user.id) == 0

    @pytest.mark.asyncio
    async def test_other_user_cannot_mark_read(self, unit_env):
        """Only the owner may mark their notification."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        notification = await notification_service.notify(
            alice.id, NotificationType.SYSTEM, "/", "Welcome"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await notification_service.mark_read(notification.id, bob.id)

    @pytest.mark.asyncio
    async def test_mark_missing_notification_raises_not_found(self, unit_env):
        """Unknown notification ids fail."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await notification_service.mark_read(
                NotificationId(uuid4()), UserId(uuid4())
            )


class TestDeleteMany:
    """Tests for delete_many method."""

    @pytest.mark.asyncio
    async def test_delete_many_only_deletes_own_notifications(self, unit_env):
        """Ids belonging to other users are skipped."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        mine = await notification_service.notify(
            alice.id, NotificationType.SYSTEM, "/", "One"
        )
        theirs = await notification_service.notify(
            bob.id, NotificationType.SYSTEM, "/", "Two"
        )

        # Act
        deleted = await notification_service.delete_many([mine.id, theirs.id], alice.id)

        # Assert
        assert deleted == 1
        assert await notification_service.list_for_user(alice.id, limit=10) == []
        assert len(await notification_service.list_for_user(bob.id, limit=10)) == 1

    @pytest.mark.asyncio
    async def test_delete_many_with_no_ids_returns_zero(self, unit_env):
        """An empty request deletes nothing."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)

        # Act
        deleted = await notification_service.delete_many([], UserId(uuid4()))

        # Assert
        assert deleted == 0
