"""Point total and manual adjustment use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import ensure_admin
from forum.application.usecase.user.get_user_points import PointEntryItem
from forum.domain.service import PointsService, UserService
from forum.domain.value import UserId


class GetPointsRequest(BaseModel):
    """Get points request."""

    user_id: str


class GetPointsResponse(BaseModel):
    """A user's current point total."""

    user_id: str
    total_points: int


class GetPointsUseCase:
    """Use case for reading a user's point total."""

    def __init__(self, user_service: UserService, points_service: PointsService) -> None:
        self.user_service = user_service
        self.points_service = points_service

    async def execute(self, request: GetPointsRequest) -> GetPointsResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        total = await self.points_service.get_total(user.id)
        return GetPointsResponse(user_id=str(user.id), total_points=total)


class AwardPointsRequest(BaseModel):
    """Manual point adjustment request."""

    actor_id: str  # From authenticated user
    user_id: str
    points: int
    description: str = Field(min_length=1, max_length=255)


class AwardPointsResponse(BaseModel):
    """The appended entry and the user's new total."""

    entry: PointEntryItem
    total_points: int


class AwardPointsUseCase:
    """Use case for an admin adjusting a user's points.

    The adjustment is appended to the ledger as an ADJUSTMENT entry; the
    history is never rewritten.
    """

    def __init__(self, user_service: UserService, points_service: PointsService) -> None:
        """Initialize award points use case.

        Args:
            user_service: User domain service
            points_service: Points domain service
        """
        self.user_service = user_service
        self.points_service = points_service

    async def execute(self, request: AwardPointsRequest) -> AwardPointsResponse:
        """Execute adjustment flow.

        Raises:
            AdminRequiredError: If the actor is not an admin
            NotFoundError: If the target user doesn't exist
            ValidationError: If ``points`` is zero
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, "award_points")

        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        entry = await self.points_service.adjust(
            user.id, request.points, request.description
        )
        total = await self.points_service.get_total(user.id)

        return AwardPointsResponse(
            entry=PointEntryItem(
                id=str(entry.id),
                points=entry.points,
                type=entry.type,
                description=entry.description,
                created_at=entry.created_at,
            ),
            total_points=total,
        )
