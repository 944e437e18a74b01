"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import User
from forum.domain.service import UserService
from forum.domain.value import UserId, UserRole


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # UUID string


class UserProfile(BaseModel):
    """Public view of a user."""

    user_id: str
    username: str
    first_name: str | None
    last_name: str | None
    profile_picture: str | None
    role: UserRole
    is_enrolled: bool
    is_banned: bool
    plan_id: str | None
    total_points: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User, total_points: int) -> "UserProfile":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_picture=user.profile_picture,
            role=user.role,
            is_enrolled=user.is_enrolled,
            is_banned=user.is_banned,
            plan_id=str(user.plan_id) if user.plan_id else None,
            total_points=total_points,
            created_at=user.created_at,
        )


class GetUserProfileUseCase:
    """Use case for getting a user's public profile by id."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfile:
        """Execute get user profile flow.

        Args:
            request: Request with the user id

        Returns:
            Profile with the derived point total

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        total_points = await self.user_service.get_total_points(user.id)
        return UserProfile.from_user(user, total_points)
