"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.model import Notification
from forum.domain.service import NotificationService
from forum.domain.value import NotificationType, UserId


class NotificationItem(BaseModel):
    """Notification as returned by the API."""

    id: str
    type: NotificationType
    url: str
    content: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            id=str(notification.id),
            type=notification.type,
            url=notification.url,
            content=notification.content,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # From authenticated user
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """A page of the inbox, newest first, with the unread count."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading the current user's inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        user_id = UserId(UUID(request.user_id))
        notifications = await self.notification_service.list_for_user(
            user_id, limit=request.limit, offset=request.offset
        )
        unread = await self.notification_service.count_unread(user_id)

        return ListNotificationsResponse(
            notifications=[NotificationItem.from_notification(n) for n in notifications],
            unread_count=unread,
        )
