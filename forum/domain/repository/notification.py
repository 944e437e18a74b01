"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from forum.domain.model.notification import Notification
from forum.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """List a user's notifications, newest first.

        Args:
            user_id: Recipient user ID
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification.

        Returns:
            True if a notification was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_many(
        self, notification_ids: Sequence[NotificationId], user_id: UserId
    ) -> int:
        """Delete several notifications owned by ``user_id``.

        Ids that belong to other users are ignored.

        Args:
            notification_ids: Notifications to delete
            user_id: Owner of the notifications

        Returns:
            Number of notifications deleted
        """
        pass
