"""Notification domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model.notification import Notification
from forum.domain.repository import NotificationRepository, UserRepository
from forum.domain.value import NotificationId, NotificationType, PostId, UserId

from .base import Service


def user_url(user_id: UserId) -> str:
    """Frontend path of a user's profile."""
    return f"/user/{user_id}"


def post_url(post_id: PostId) -> str:
    """Frontend path of a post."""
    return f"/post/{post_id}"


class NotificationService(Service):
    """Domain service for user inboxes."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            user_repository: User repository (recipient lookup)
        """
        self.notification_repository = notification_repository
        self.user_repository = user_repository

    async def notify(
        self,
        user_id: UserId,
        type: NotificationType,
        url: str,
        content: str,
    ) -> Notification | None:
        """Create a notification for a user.

        Nothing is created when the recipient does not exist; notifications
        are a side effect and never fail the operation that triggered them.

        Args:
            user_id: Recipient
            type: Notification type
            url: Frontend path the notification links to
            content: Human readable text

        Returns:
            The created notification, or None if the recipient is unknown
        """
        with logfire.span(
            "notification_service.notify", user_id=str(user_id), type=type.value
        ):
            recipient = await self.user_repository.find_by_id(user_id)
            if not recipient:
                logfire.warn(
                    "Notification recipient not found", user_id=str(user_id)
                )
                return None

            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=user_id,
                type=type,
                url=url,
                content=content,
                is_read=False,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                user_id=str(user_id),
                type=type.value,
            )
            return saved

    async def list_for_user(
        self, user_id: UserId, limit: int, offset: int = 0
    ) -> list[Notification]:
        """List a user's notifications, newest first."""
        return await self.notification_repository.find_by_user(
            user_id, limit=limit, offset=offset
        )

    async def count_unread(self, user_id: UserId) -> int:
        return await self.notification_repository.count_unread(user_id)

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark a notification as read.

        Args:
            notification_id: Notification to mark
            user_id: User performing the action (must own it)

        Returns:
            The updated notification

        Raises:
            NotFoundError: If the notification doesn't exist
            NotAuthorizedError: If it belongs to someone else
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if not notification:
                raise NotFoundError("Notification", str(notification_id))
            if notification.user_id != user_id:
                raise NotAuthorizedError(
                    "notification", str(notification_id), str(user_id)
                )
            if notification.is_read:
                return notification

            return await self.notification_repository.save(
                notification.model_copy(update={"is_read": True})
            )

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification regardless of owner.

        Used internally to clean up notifications linked to other records.
        """
        deleted = await self.notification_repository.delete(notification_id)
        if deleted:
            logfire.info(
                "Notification deleted", notification_id=str(notification_id)
            )
        return deleted

    async def delete_many(
        self, notification_ids: Sequence[NotificationId], user_id: UserId
    ) -> int:
        """Delete several of a user's notifications.

        Returns:
            Number of notifications deleted
        """
        with logfire.span(
            "notification_service.delete_many",
            user_id=str(user_id),
            count=len(notification_ids),
        ):
            if not notification_ids:
                return 0
            deleted = await self.notification_repository.delete_many(
                notification_ids, user_id
            )
            logfire.info(
                "Notifications deleted", user_id=str(user_id), deleted=deleted
            )
            return deleted
