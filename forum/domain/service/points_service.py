"""Point ledger domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from forum.domain.error import ValidationError
from forum.domain.model.point import PointEntry
from forum.domain.repository import PointRepository
from forum.domain.value import POINT_RULES, PointEntryId, PointType, UserId

from .base import Service


class PointsService(Service):
    """Domain service for the append-only point ledger.

    Totals are always the sum of a user's entries and are never cached.
    """

    def __init__(self, point_repository: PointRepository) -> None:
        """Initialize points service.

        Args:
            point_repository: Point ledger repository
        """
        self.point_repository = point_repository

    async def award(self, user_id: UserId, point_type: PointType) -> PointEntry:
        """Append the fixed ledger entry for an engagement event.

        Args:
            user_id: User receiving the delta
            point_type: Event type; its delta and description are fixed

        Returns:
            The appended entry

        Raises:
            ValidationError: If the type has no fixed rule (e.g. ADJUSTMENT)
        """
        rule = POINT_RULES.get(point_type)
        if rule is None:
            raise ValidationError(f"No point rule for {point_type.value}")

        return await self._append(user_id, rule.points, point_type, rule.description)

    async def adjust(
        self, user_id: UserId, points: int, description: str
    ) -> PointEntry:
        """Append a manual adjustment made by an admin.

        Args:
            user_id: User receiving the delta
            points: Signed, non-zero delta
            description: Reason shown in the user's history

        Returns:
            The appended entry
        """
        if points == 0:
            raise ValidationError("Point adjustment must be non-zero")
        return await self._append(user_id, points, PointType.ADJUSTMENT, description)

    async def get_total(self, user_id: UserId) -> int:
        """Current total of a user (sum of all entries)."""
        return await self.point_repository.sum_for_user(user_id)

    async def get_totals(self, user_ids: Sequence[UserId]) -> dict[UserId, int]:
        """Current totals of several users."""
        if not user_ids:
            return {}
        return await self.point_repository.sum_for_users(user_ids)

    async def get_history(self, user_id: UserId) -> list[PointEntry]:
        """A user's ledger entries, newest first."""
        return await self.point_repository.find_by_user(user_id)

    async def _append(
        self, user_id: UserId, points: int, point_type: PointType, description: str
    ) -> PointEntry:
        with logfire.span(
            "points_service.append",
            user_id=str(user_id),
            points=points,
            type=point_type.value,
        ):
            entry = PointEntry(
                id=PointEntryId(uuid4()),
                user_id=user_id,
                points=points,
                type=point_type,
                description=description,
                created_at=datetime.now(),
            )
            saved = await self.point_repository.save(entry)
            logfire.info(
                "Points recorded",
                user_id=str(user_id),
                points=points,
                type=point_type.value,
            )
            return saved
