"""PostgreSQL implementation of Poll repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import PollOption, PollVote
from forum.domain.repository import PollRepository
from forum.domain.value import PollOptionId, PollVoteId, PostId, UserId
from forum.persistence.mappers import (
    poll_option_to_dict,
    poll_vote_to_dict,
    row_to_poll_option,
    row_to_poll_vote,
)
from forum.persistence.tables import poll_options_table, poll_votes_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_options(self, post_id: PostId) -> List[PollOption]:
        stmt = (
            select(poll_options_table)
            .where(poll_options_table.c.post_id == post_id)
            .order_by(poll_options_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_poll_option(row._asdict()) for row in result.fetchall()]

    async def find_option(self, option_id: PollOptionId) -> Optional[PollOption]:
        stmt = select(poll_options_table).where(poll_options_table.c.id == option_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_poll_option(row._asdict()) if row else None

    async def save_options(self, options: List[PollOption]) -> List[PollOption]:
        """Insert options in a single statement."""
        if not options:
            return []

        stmt = insert(poll_options_table).values(
            [poll_option_to_dict(option) for option in options]
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return options

    async def delete_options(self, post_id: PostId) -> int:
        """Delete a post's options; votes go with them via ON DELETE CASCADE."""
        stmt = delete(poll_options_table).where(
            poll_options_table.c.post_id == post_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def find_vote(self, user_id: UserId, post_id: PostId) -> Optional[PollVote]:
        stmt = select(poll_votes_table).where(
            and_(
                poll_votes_table.c.user_id == user_id,
                poll_votes_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_poll_vote(row._asdict()) if row else None

    async def find_votes_by_option(self, option_id: PollOptionId) -> List[PollVote]:
        stmt = (
            select(poll_votes_table)
            .where(poll_votes_table.c.option_id == option_id)
            .order_by(poll_votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_poll_vote(row._asdict()) for row in result.fetchall()]

    async def save_vote(self, vote: PollVote) -> PollVote:
        stmt = insert(poll_votes_table).values(**poll_vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete_vote(self, vote_id: PollVoteId) -> bool:
        stmt = delete(poll_votes_table).where(poll_votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
