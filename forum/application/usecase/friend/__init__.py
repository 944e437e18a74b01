"""Friend use cases."""

from .get_relationship import (
    GetRelationshipRequest,
    GetRelationshipResponse,
    GetRelationshipUseCase,
)
from .list_friends import (
    FriendItem,
    FriendUser,
    ListFriendRequestsRequest,
    ListFriendRequestsResponse,
    ListFriendRequestsUseCase,
    ListFriendsRequest,
    ListFriendsResponse,
    ListFriendsUseCase,
    PendingRequestItem,
)
from .respond_friend_request import (
    AcceptFriendRequestUseCase,
    CancelFriendRequestUseCase,
    RespondFriendRequestRequest,
)
from .send_friend_request import (
    FriendRequestItem,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)

__all__ = [
    "AcceptFriendRequestUseCase",
    "CancelFriendRequestUseCase",
    "FriendItem",
    "FriendRequestItem",
    "FriendUser",
    "GetRelationshipRequest",
    "GetRelationshipResponse",
    "GetRelationshipUseCase",
    "ListFriendRequestsRequest",
    "ListFriendRequestsResponse",
    "ListFriendRequestsUseCase",
    "ListFriendsRequest",
    "ListFriendsResponse",
    "ListFriendsUseCase",
    "PendingRequestItem",
    "RespondFriendRequestRequest",
    "SendFriendRequestRequest",
    "SendFriendRequestUseCase",
]
