"""PostgreSQL implementation of the point ledger repository."""

from typing import Dict, List, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import PointEntry
from forum.domain.repository import PointRepository
from forum.domain.value import UserId
from forum.persistence.mappers import point_entry_to_dict, row_to_point_entry
from forum.persistence.tables import point_history_table


class PostgresPointRepository(PointRepository):
    """PostgreSQL implementation of PointRepository.

    The ledger is append-only: there is no update or delete.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, entry: PointEntry) -> PointEntry:
        """Append a ledger entry."""
        stmt = insert(point_history_table).values(**point_entry_to_dict(entry))
        await self.session.execute(stmt)
        await self.session.flush()
        return entry

    async def find_by_user(self, user_id: UserId) -> List[PointEntry]:
        """A user's ledger entries, newest first."""
        stmt = (
            select(point_history_table)
            .where(point_history_table.c.user_id == user_id)
            .order_by(point_history_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_point_entry(row._asdict()) for row in result.fetchall()]

    async def sum_for_user(self, user_id: UserId) -> int:
        """Sum of a user's ledger entries (0 when there are none)."""
        stmt = select(
            func.coalesce(func.sum(point_history_table.c.points), 0)
        ).where(point_history_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def sum_for_users(self, user_ids: Sequence[UserId]) -> Dict[UserId, int]:
        """Totals for several users (batch query)."""
        totals: Dict[UserId, int] = {user_id: 0 for user_id in user_ids}
        if not user_ids:
            return totals

        stmt = (
            select(
                point_history_table.c.user_id,
                func.sum(point_history_table.c.points).label("total"),
            )
            .where(point_history_table.c.user_id.in_(user_ids))
            .group_by(point_history_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            totals[UserId(row.user_id)] = int(row.total)
        return totals
