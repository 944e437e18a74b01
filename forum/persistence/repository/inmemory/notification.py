"""In-memory notification repository for testing."""

from typing import List, Optional, Sequence

from forum.domain.model.notification import Notification
from forum.domain.repository.notification import NotificationRepository
from forum.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        return self._notifications.get(notification_id)

    async def find_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """A page of a user's notifications, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.user_id == user_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_unread(self, user_id: UserId) -> int:
        return sum(
            1
            for n in self._notifications.values()
            if n.user_id == user_id and not n.is_read
        )

    async def save(self, notification: Notification) -> Notification:
        self._notifications[notification.id] = notification
        return notification

    async def delete(self, notification_id: NotificationId) -> bool:
        return self._notifications.pop(notification_id, None) is not None

    async def delete_many(
        self, notification_ids: Sequence[NotificationId], user_id: UserId
    ) -> int:
        deleted = 0
        for notification_id in notification_ids:
            notification = self._notifications.get(notification_id)
            if notification and notification.user_id == user_id:
                del self._notifications[notification_id]
                deleted += 1
        return deleted
