"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .manage_notifications import (
    CreateNotificationRequest,
    CreateNotificationUseCase,
    DeleteNotificationsRequest,
    DeleteNotificationsResponse,
    DeleteNotificationsUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)

__all__ = [
    "CreateNotificationRequest",
    "CreateNotificationUseCase",
    "DeleteNotificationsRequest",
    "DeleteNotificationsResponse",
    "DeleteNotificationsUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
    "NotificationItem",
]
