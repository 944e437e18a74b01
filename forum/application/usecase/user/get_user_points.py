"""Get user points use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PointsService, UserService
from forum.domain.value import PointType, UserId


class GetUserPointsRequest(BaseModel):
    """Get user points request."""

    user_id: str


class PointEntryItem(BaseModel):
    """One ledger entry."""

    id: str
    points: int
    type: PointType
    description: str
    created_at: datetime


class GetUserPointsResponse(BaseModel):
    """A user's point total and ledger, newest entry first."""

    user_id: str
    total_points: int
    history: list[PointEntryItem]


class GetUserPointsUseCase:
    """Use case for reading a user's point ledger."""

    def __init__(self, user_service: UserService, points_service: PointsService) -> None:
        """Initialize get user points use case.

        Args:
            user_service: User domain service
            points_service: Points domain service
        """
        self.user_service = user_service
        self.points_service = points_service

    async def execute(self, request: GetUserPointsRequest) -> GetUserPointsResponse:
        """Execute get points flow.

        The total is the sum of the returned history entries.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        history = await self.points_service.get_history(user.id)

        return GetUserPointsResponse(
            user_id=str(user.id),
            total_points=sum(entry.points for entry in history),
            history=[
                PointEntryItem(
                    id=str(entry.id),
                    points=entry.points,
                    type=entry.type,
                    description=entry.description,
                    created_at=entry.created_at,
                )
                for entry in history
            ],
        )
