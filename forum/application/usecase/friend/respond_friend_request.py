"""Accept and cancel friend request use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import FriendService
from forum.domain.value import UserId

from .send_friend_request import FriendRequestItem


class RespondFriendRequestRequest(BaseModel):
    """Request acting on the friendship between two users."""

    user_id: str  # From authenticated user
    other_id: str


class AcceptFriendRequestUseCase:
    """Use case for accepting a pending friend request.

    The pending request may have been sent in either direction.
    """

    def __init__(self, friend_service: FriendService) -> None:
        """Initialize accept friend request use case.

        Args:
            friend_service: Friend domain service
        """
        self.friend_service = friend_service

    async def execute(self, request: RespondFriendRequestRequest) -> FriendRequestItem:
        """Execute accept flow.

        Raises:
            NotFoundError: If no pending request exists between the users
        """
        accepted = await self.friend_service.accept_request(
            UserId(UUID(request.user_id)), UserId(UUID(request.other_id))
        )
        return FriendRequestItem.from_request(accepted)


class CancelFriendRequestUseCase:
    """Use case for cancelling, declining or unfriending.

    All three end the active request between the users; an existing
    friendship is removed as well.
    """

    def __init__(self, friend_service: FriendService) -> None:
        """Initialize cancel friend request use case.

        Args:
            friend_service: Friend domain service
        """
        self.friend_service = friend_service

    async def execute(self, request: RespondFriendRequestRequest) -> FriendRequestItem:
        """Execute cancel flow.

        Raises:
            NotFoundError: If no pending or accepted request exists
        """
        declined = await self.friend_service.cancel_request(
            UserId(UUID(request.user_id)), UserId(UUID(request.other_id))
        )
        return FriendRequestItem.from_request(declined)
