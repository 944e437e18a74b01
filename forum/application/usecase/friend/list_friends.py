"""List friends and friend requests use cases."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import User
from forum.domain.service import FriendService
from forum.domain.value import FriendRequestStatus, UserId


class FriendUser(BaseModel):
    """Compact user view used in friend lists."""

    user_id: str
    username: str
    first_name: str | None
    last_name: str | None
    profile_picture: str | None

    @classmethod
    def from_user(cls, user: User) -> "FriendUser":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_picture=user.profile_picture,
        )


class ListFriendsRequest(BaseModel):
    """List friends request."""

    user_id: str


class FriendItem(FriendUser):
    """A friend with their current point total."""

    total_points: int


class ListFriendsResponse(BaseModel):
    """List friends response, ordered by username."""

    friends: list[FriendItem]


class ListFriendsUseCase:
    """Use case for listing a user's friends."""

    def __init__(self, friend_service: FriendService) -> None:
        """Initialize list friends use case.

        Args:
            friend_service: Friend domain service
        """
        self.friend_service = friend_service

    async def execute(self, request: ListFriendsRequest) -> ListFriendsResponse:
        summaries = await self.friend_service.list_friends(UserId(UUID(request.user_id)))
        return ListFriendsResponse(
            friends=[
                FriendItem(
                    **FriendUser.from_user(s.user).model_dump(),
                    total_points=s.total_points,
                )
                for s in summaries
            ]
        )


class ListFriendRequestsRequest(BaseModel):
    """List pending friend requests request."""

    user_id: str  # From authenticated user
    direction: Literal["sent", "received"]


class PendingRequestItem(BaseModel):
    """Pending request with the user on the other side."""

    id: str
    status: FriendRequestStatus
    created_at: datetime
    user: FriendUser


class ListFriendRequestsResponse(BaseModel):
    """List pending friend requests response."""

    requests: list[PendingRequestItem]


class ListFriendRequestsUseCase:
    """Use case for listing pending requests the user sent or received."""

    def __init__(self, friend_service: FriendService) -> None:
        self.friend_service = friend_service

    async def execute(
        self, request: ListFriendRequestsRequest
    ) -> ListFriendRequestsResponse:
        user_id = UserId(UUID(request.user_id))
        if request.direction == "sent":
            pending = await self.friend_service.list_sent_requests(user_id)
        else:
            pending = await self.friend_service.list_received_requests(user_id)

        return ListFriendRequestsResponse(
            requests=[
                PendingRequestItem(
                    id=str(p.request.id),
                    status=p.request.status,
                    created_at=p.request.created_at,
                    user=FriendUser.from_user(p.counterpart),
                )
                for p in pending
            ]
        )
