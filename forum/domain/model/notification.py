"""Notification entity."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """Inbox message addressed to a single user.

    ``url`` is a frontend path the client links to (``/post/<id>``,
    ``/user/<id>``).
    """

    id: NotificationId
    user_id: UserId
    type: NotificationType
    url: str = Field(max_length=500)
    content: str = Field(min_length=1, max_length=1000)
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
