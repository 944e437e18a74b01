"""Delete user use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import UserService
from forum.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str  # From authenticated user


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    success: bool


class DeleteUserUseCase:
    """Use case for deleting the current user's account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Delete the account and everything it owns.

        Raises:
            NotFoundError: If user not found
        """
        await self.user_service.delete_user(UserId(UUID(request.user_id)))
        return DeleteUserResponse(success=True)
