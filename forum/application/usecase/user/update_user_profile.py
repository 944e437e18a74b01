"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import UserService
from forum.domain.value import UserId
from forum.domain.value.types import Username

from .get_user_profile import UserProfile


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Fields left as None are not changed.
    """

    user_id: str  # From authenticated user
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_picture: str | None = None


class UpdateUserProfileUseCase:
    """Use case for updating the current user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfile:
        """Execute update profile flow.

        Raises:
            NotFoundError: If user not found
            ConflictError: If the new username is taken
            ValueError: If the new username is malformed
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            username=Username(request.username) if request.username else None,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            profile_picture=request.profile_picture,
        )
        total_points = await self.user_service.get_total_points(user.id)
        return UserProfile.from_user(user, total_points)
