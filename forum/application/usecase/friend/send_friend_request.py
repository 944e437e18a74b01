"""Send friend request use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import FriendRequest
from forum.domain.service import FriendService
from forum.domain.value import FriendRequestStatus, UserId


class SendFriendRequestRequest(BaseModel):
    """Send friend request request."""

    sender_id: str  # From authenticated user
    receiver_id: str


class FriendRequestItem(BaseModel):
    """Friend request as returned by the API."""

    id: str
    sender_id: str
    receiver_id: str
    status: FriendRequestStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_request(cls, request: FriendRequest) -> "FriendRequestItem":
        return cls(
            id=str(request.id),
            sender_id=str(request.sender_id),
            receiver_id=str(request.receiver_id),
            status=request.status,
            created_at=request.created_at,
            updated_at=request.updated_at,
        )


class SendFriendRequestUseCase:
    """Use case for sending a friend request."""

    def __init__(self, friend_service: FriendService) -> None:
        """Initialize send friend request use case.

        Args:
            friend_service: Friend domain service
        """
        self.friend_service = friend_service

    async def execute(self, request: SendFriendRequestRequest) -> FriendRequestItem:
        """Execute send friend request flow.

        Raises:
            NotFoundError: If either user doesn't exist
            ConflictError: If a request is already active or the users are the same
        """
        friend_request = await self.friend_service.send_request(
            UserId(UUID(request.sender_id)), UserId(UUID(request.receiver_id))
        )
        return FriendRequestItem.from_request(friend_request)
