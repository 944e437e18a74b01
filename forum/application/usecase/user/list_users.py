"""Admin user listing use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.base import ensure_admin
from forum.domain.service import UserService
from forum.domain.value import UserId

from .get_user_profile import UserProfile


class ListUsersRequest(BaseModel):
    """List users request."""

    actor_id: str  # From authenticated user
    limit: int = Field(default=100, ge=1, le=500)
    offset: int = Field(default=0, ge=0)


class UserListItem(UserProfile):
    """User with friend count."""

    total_friends: int


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserListItem]


class ListUsersUseCase:
    """Use case for the admin user list."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            AdminRequiredError: If the actor is not an admin
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, "list_users")

        summaries = await self.user_service.list_users(
            limit=request.limit, offset=request.offset
        )
        logfire.info("Listed users", count=len(summaries))

        return ListUsersResponse(
            users=[
                UserListItem(
                    **UserProfile.from_user(s.user, s.total_points).model_dump(),
                    total_friends=s.total_friends,
                )
                for s in summaries
            ]
        )


class ListEnrolledUsersRequest(BaseModel):
    """List enrolled users request."""

    actor_id: str


class EnrolledUserItem(UserProfile):
    """Enrolled user with solved question count."""

    solved_questions: int


class ListEnrolledUsersResponse(BaseModel):
    """List enrolled users response."""

    users: list[EnrolledUserItem]


class ListEnrolledUsersUseCase:
    """Use case for the admin list of enrolled users."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListEnrolledUsersRequest) -> ListEnrolledUsersResponse:
        """Execute list enrolled users flow.

        Raises:
            AdminRequiredError: If the actor is not an admin
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, "list_enrolled_users")

        summaries = await self.user_service.list_enrolled_users()
        return ListEnrolledUsersResponse(
            users=[
                EnrolledUserItem(
                    **UserProfile.from_user(s.user, s.total_points).model_dump(),
                    solved_questions=s.solved_questions,
                )
                for s in summaries
            ]
        )
