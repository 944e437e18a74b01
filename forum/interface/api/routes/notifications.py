"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.notification import (
    CreateNotificationRequest,
    CreateNotificationUseCase,
    DeleteNotificationsRequest,
    DeleteNotificationsResponse,
    DeleteNotificationsUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationItem,
)
from forum.config import NotificationSettings
from forum.domain.value import NotificationType
from forum.interface.api.auth import authenticate
from forum.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class CreateNotificationAPIRequest(BaseModel):
    """API request for an admin notification."""

    user_id: UUID
    content: str = Field(min_length=1, max_length=1000)
    url: str = Field(default="/", max_length=500)
    type: NotificationType = NotificationType.SYSTEM


class DeleteNotificationsAPIRequest(BaseModel):
    """API request for deleting notifications."""

    notification_ids: list[UUID] = Field(min_length=1, max_length=100)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    notification_settings: FromDishka[NotificationSettings],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's notifications, newest first.

    Args:
        list_notifications_use_case: List notifications use case from DI
        get_current_user_use_case: Get current user use case from DI
        notification_settings: Inbox paging settings from DI
        limit: Page size (defaults and caps come from settings)
        offset: Page offset
        auth_token: JWT token from cookie

    Returns:
        Page of notifications with the unread count
    """
    user = await authenticate(auth_token, get_current_user_use_case)
    page_size = min(
        limit or notification_settings.default_page_size,
        notification_settings.max_page_size,
    )

    try:
        return await list_notifications_use_case.execute(
            ListNotificationsRequest(
                user_id=user.user_id, limit=page_size, offset=offset
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list notifications")


@router.post(
    "", response_model=NotificationItem, status_code=status.HTTP_201_CREATED
)
async def create_notification(
    request: CreateNotificationAPIRequest,
    create_notification_use_case: FromDishka[CreateNotificationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> NotificationItem:
    """Send a notification to a user (admin only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await create_notification_use_case.execute(
            CreateNotificationRequest(
                actor_id=user.user_id,
                user_id=str(request.user_id),
                type=request.type,
                url=request.url,
                content=request.content,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create notification")


@router.post("/{notification_id}/read", response_model=NotificationItem)
async def mark_notification_read(
    notification_id: UUID,
    mark_notification_read_use_case: FromDishka[MarkNotificationReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> NotificationItem:
    """Mark one of the current user's notifications as read."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await mark_notification_read_use_case.execute(
            MarkNotificationReadRequest(
                notification_id=str(notification_id), user_id=user.user_id
            )
        )
    except Exception as e:
        raise to_http_exception(e, "mark notification read")


@router.post("/delete", response_model=DeleteNotificationsResponse)
async def delete_notifications(
    request: DeleteNotificationsAPIRequest,
    delete_notifications_use_case: FromDishka[DeleteNotificationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteNotificationsResponse:
    """Delete several of the current user's notifications.

    Ids that belong to other users are ignored.
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await delete_notifications_use_case.execute(
            DeleteNotificationsRequest(
                user_id=user.user_id,
                notification_ids=[str(i) for i in request.notification_ids],
            )
        )
    except Exception as e:
        raise to_http_exception(e, "delete notifications")
