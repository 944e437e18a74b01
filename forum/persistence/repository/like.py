"""PostgreSQL implementation of Like repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import LikeId, PostId, UserId
from forum.persistence.mappers import like_to_dict, row_to_like
from forum.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        """Find a user's like on a specific post."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Like]:
        stmt = (
            select(likes_table)
            .where(likes_table.c.post_id == post_id)
            .order_by(likes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def count_by_post(self, post_id: PostId) -> int:
        stmt = select(func.count()).where(likes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def save(self, like: Like) -> Like:
        """Save a like (create)."""
        stmt = insert(likes_table).values(**like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete(self, like_id: LikeId) -> bool:
        stmt = delete(likes_table).where(likes_table.c.id == like_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
