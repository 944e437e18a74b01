"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Notification
from forum.domain.repository import NotificationRepository
from forum.domain.value import NotificationId, UserId
from forum.persistence.mappers import notification_to_dict, row_to_notification
from forum.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """A page of a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_unread(self, user_id: UserId) -> int:
        stmt = select(func.count()).where(
            and_(
                notifications_table.c.user_id == user_id,
                notifications_table.c.is_read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        notification_dict = notification_to_dict(notification)
        existing = await self.find_by_id(notification.id)

        if existing:
            stmt = (
                update(notifications_table)
                .where(notifications_table.c.id == notification.id)
                .values(**notification_dict)
            )
        else:
            stmt = insert(notifications_table).values(**notification_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def delete(self, notification_id: NotificationId) -> bool:
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_many(
        self, notification_ids: Sequence[NotificationId], user_id: UserId
    ) -> int:
        """Delete a user's notifications by id; others' ids are ignored."""
        if not notification_ids:
            return 0

        stmt = delete(notifications_table).where(
            and_(
                notifications_table.c.id.in_(notification_ids),
                notifications_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
