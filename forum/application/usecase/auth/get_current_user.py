"""Get current user use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from forum.domain.error import BannedUserError
from forum.domain.service import JWTService, UserService
from forum.domain.value import UserRole


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    external_id: str
    username: str
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_picture: str | None
    role: UserRole
    is_enrolled: bool
    plan_id: str | None
    total_points: int
    created_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Extract the identity provider id from the ``sub`` claim
        3. Load the matching user
        4. Reject banned users

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If no user has the token's external id
            BannedUserError: If the user is banned
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_external_id(payload.sub)

        if user.is_banned:
            logfire.warn("Banned user rejected", user_id=str(user.id))
            raise BannedUserError(str(user.id))

        total_points = await self.user_service.get_total_points(user.id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            external_id=user.external_id,
            username=user.username.root,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_picture=user.profile_picture,
            role=user.role,
            is_enrolled=user.is_enrolled,
            plan_id=str(user.plan_id) if user.plan_id else None,
            total_points=total_points,
            created_at=user.created_at,
        )
