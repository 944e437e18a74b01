"""Create, mark read and delete notification use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import ensure_admin
from forum.domain.error import NotFoundError
from forum.domain.service import NotificationService, UserService
from forum.domain.value import NotificationId, NotificationType, UserId

from .list_notifications import NotificationItem


class CreateNotificationRequest(BaseModel):
    """Create notification request (admin broadcast to one user)."""

    actor_id: str  # From authenticated user
    user_id: str
    type: NotificationType = NotificationType.SYSTEM
    url: str = "/"
    content: str


class CreateNotificationUseCase:
    """Use case for an admin sending a notification to a user."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(self, request: CreateNotificationRequest) -> NotificationItem:
        """Execute create notification flow.

        Raises:
            AdminRequiredError: If the actor is not an admin
            NotFoundError: If the recipient doesn't exist
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, "create_notification")

        notification = await self.notification_service.notify(
            UserId(UUID(request.user_id)),
            request.type,
            request.url,
            request.content,
        )
        if notification is None:
            raise NotFoundError("User", request.user_id)
        return NotificationItem.from_notification(notification)


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str
    user_id: str  # From authenticated user


class MarkNotificationReadUseCase:
    """Use case for marking one of the user's notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationItem:
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return NotificationItem.from_notification(notification)


class DeleteNotificationsRequest(BaseModel):
    """Bulk delete request. Ids not owned by the user are ignored."""

    user_id: str  # From authenticated user
    notification_ids: list[str] = Field(max_length=100)


class DeleteNotificationsResponse(BaseModel):
    """Delete notifications response."""

    deleted: int


class DeleteNotificationsUseCase:
    """Use case for deleting several of the user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationsRequest
    ) -> DeleteNotificationsResponse:
        deleted = await self.notification_service.delete_many(
            [NotificationId(UUID(i)) for i in request.notification_ids],
            UserId(UUID(request.user_id)),
        )
        return DeleteNotificationsResponse(deleted=deleted)
