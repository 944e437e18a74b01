"""PostgreSQL implementations of friend request and friendship repositories."""

from datetime import datetime
from typing import Collection, List, Optional, Tuple
from uuid import uuid4

from sqlalchemy import and_, delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import FriendRequest, Friendship
from forum.domain.repository import FriendRequestRepository, FriendshipRepository
from forum.domain.value import (
    FriendRequestId,
    FriendRequestStatus,
    FriendshipId,
    UserId,
)
from forum.persistence.mappers import (
    friend_request_to_dict,
    friendship_to_dict,
    row_to_friend_request,
)
from forum.persistence.tables import friend_requests_table, friendships_table


class PostgresFriendRequestRepository(FriendRequestRepository):
    """PostgreSQL implementation of FriendRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, request_id: FriendRequestId) -> Optional[FriendRequest]:
        stmt = select(friend_requests_table).where(
            friend_requests_table.c.id == request_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_friend_request(row._asdict()) if row else None

    async def find_between(
        self,
        user_a: UserId,
        user_b: UserId,
        statuses: Collection[FriendRequestStatus],
    ) -> List[FriendRequest]:
        """Requests in either direction between two users, newest first."""
        t = friend_requests_table
        stmt = (
            select(t)
            .where(
                or_(
                    and_(t.c.sender_id == user_a, t.c.receiver_id == user_b),
                    and_(t.c.sender_id == user_b, t.c.receiver_id == user_a),
                )
            )
            .where(t.c.status.in_([s.value for s in statuses]))
            .order_by(t.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_friend_request(row._asdict()) for row in result.fetchall()]

    async def find_directed(
        self,
        sender_id: UserId,
        receiver_id: UserId,
        status: FriendRequestStatus,
    ) -> Optional[FriendRequest]:
        t = friend_requests_table
        stmt = (
            select(t)
            .where(
                and_(
                    t.c.sender_id == sender_id,
                    t.c.receiver_id == receiver_id,
                    t.c.status == status.value,
                )
            )
            .order_by(t.c.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_friend_request(row._asdict()) if row else None

    async def find_by_sender(
        self, sender_id: UserId, status: FriendRequestStatus
    ) -> List[FriendRequest]:
        t = friend_requests_table
        stmt = (
            select(t)
            .where(and_(t.c.sender_id == sender_id, t.c.status == status.value))
            .order_by(t.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_friend_request(row._asdict()) for row in result.fetchall()]

    async def find_by_receiver(
        self, receiver_id: UserId, status: FriendRequestStatus
    ) -> List[FriendRequest]:
        t = friend_requests_table
        stmt = (
            select(t)
            .where(and_(t.c.receiver_id == receiver_id, t.c.status == status.value))
            .order_by(t.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_friend_request(row._asdict()) for row in result.fetchall()]

    async def save(self, request: FriendRequest) -> FriendRequest:
        """Save a request (create or update).

        Raises:
            IntegrityError: If another non-declined request exists for the pair
        """
        request_dict = friend_request_to_dict(request)
        existing = await self.find_by_id(request.id)

        if existing:
            stmt = (
                update(friend_requests_table)
                .where(friend_requests_table.c.id == request.id)
                .values(**request_dict)
            )
        else:
            stmt = insert(friend_requests_table).values(**request_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return request


class PostgresFriendshipRepository(FriendshipRepository):
    """PostgreSQL implementation of FriendshipRepository.

    A friendship is stored as two directed rows, one per member.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save_pair(
        self, user_a: UserId, user_b: UserId
    ) -> Tuple[Friendship, Friendship]:
        now = datetime.now()
        forward = Friendship(
            id=FriendshipId(uuid4()), user_id=user_a, friend_id=user_b, created_at=now
        )
        backward = Friendship(
            id=FriendshipId(uuid4()), user_id=user_b, friend_id=user_a, created_at=now
        )
        stmt = insert(friendships_table).values(
            [friendship_to_dict(forward), friendship_to_dict(backward)]
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return forward, backward

    async def delete_pair(self, user_a: UserId, user_b: UserId) -> int:
        t = friendships_table
        stmt = delete(t).where(
            or_(
                and_(t.c.user_id == user_a, t.c.friend_id == user_b),
                and_(t.c.user_id == user_b, t.c.friend_id == user_a),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def exists(self, user_id: UserId, friend_id: UserId) -> bool:
        t = friendships_table
        stmt = select(t.c.id).where(
            and_(t.c.user_id == user_id, t.c.friend_id == friend_id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_friend_ids(self, user_id: UserId) -> List[UserId]:
        stmt = select(friendships_table.c.friend_id).where(
            friendships_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return [UserId(friend_id) for friend_id in result.scalars().all()]

    async def count_by_user(self, user_id: UserId) -> int:
        stmt = select(func.count()).where(friendships_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
