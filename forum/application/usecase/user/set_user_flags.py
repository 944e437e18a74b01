"""Set user flags use case (admin enrollment and ban)."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import ensure_admin
from forum.domain.service import UserService
from forum.domain.value import UserId

from .get_user_profile import UserProfile


class SetUserFlagsRequest(BaseModel):
    """Set user flags request. Flags left as None are not changed."""

    actor_id: str  # From authenticated user
    user_id: str
    is_enrolled: bool | None = None
    is_banned: bool | None = None


class SetUserFlagsUseCase:
    """Use case for admins enrolling or banning a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize set user flags use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: SetUserFlagsRequest) -> UserProfile:
        """Execute set flags flow.

        Raises:
            AdminRequiredError: If the actor is not an admin
            NotFoundError: If the target user doesn't exist
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, "set_user_flags")

        user_id = UserId(UUID(request.user_id))
        user = await self.user_service.get_by_id(user_id)
        if request.is_enrolled is not None:
            user = await self.user_service.set_enrollment(user_id, request.is_enrolled)
        if request.is_banned is not None:
            user = await self.user_service.set_ban(user_id, request.is_banned)

        logfire.info(
            "User flags set by admin",
            actor_id=request.actor_id,
            user_id=request.user_id,
            is_enrolled=user.is_enrolled,
            is_banned=user.is_banned,
        )
        total_points = await self.user_service.get_total_points(user_id)
        return UserProfile.from_user(user, total_points)
