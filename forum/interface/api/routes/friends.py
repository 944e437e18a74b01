"""Friendship routes."""

from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.friend import (
    AcceptFriendRequestUseCase,
    CancelFriendRequestUseCase,
    FriendRequestItem,
    GetRelationshipRequest,
    GetRelationshipResponse,
    GetRelationshipUseCase,
    ListFriendRequestsRequest,
    ListFriendRequestsResponse,
    ListFriendRequestsUseCase,
    ListFriendsRequest,
    ListFriendsResponse,
    ListFriendsUseCase,
    RespondFriendRequestRequest,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)
from forum.interface.api.auth import authenticate
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/friends", tags=["friends"], route_class=DishkaRoute)


class SendFriendRequestAPIRequest(BaseModel):
    """API request for sending a friend request."""

    receiver_id: UUID


@router.post(
    "/requests",
    response_model=FriendRequestItem,
    status_code=status.HTTP_201_CREATED,
)
async def send_friend_request(
    request: SendFriendRequestAPIRequest,
    send_friend_request_use_case: FromDishka[SendFriendRequestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> FriendRequestItem:
    """Send a friend request to another user.

    The receiver gets a FRIEND_REQUEST notification.

    Args:
        request: Receiver of the request
        send_friend_request_use_case: Send friend request use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        The PENDING request

    Raises:
        HTTPException: 409 if a request is already active between the pair
            or the users are already friends, 404 if the receiver doesn't exist
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await send_friend_request_use_case.execute(
            SendFriendRequestRequest(
                sender_id=user.user_id, receiver_id=str(request.receiver_id)
            )
        )
    except Exception as e:
        raise to_http_exception(e, "send friend request")


@router.get("/requests", response_model=ListFriendRequestsResponse)
async def list_friend_requests(
    list_friend_requests_use_case: FromDishka[ListFriendRequestsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    direction: Literal["sent", "received"] = Query(default="received"),
    auth_token: str | None = Cookie(default=None),
) -> ListFriendRequestsResponse:
    """List the current user's pending sent or received requests."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await list_friend_requests_use_case.execute(
            ListFriendRequestsRequest(user_id=user.user_id, direction=direction)
        )
    except Exception as e:
        raise to_http_exception(e, "list friend requests")


@router.get("", response_model=ListFriendsResponse)
async def list_my_friends(
    list_friends_use_case: FromDishka[ListFriendsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ListFriendsResponse:
    """List the current user's friends with their point totals."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await list_friends_use_case.execute(
            ListFriendsRequest(user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "list friends")


@router.get("/user/{user_id}", response_model=ListFriendsResponse)
async def list_user_friends(
    user_id: UUID,
    list_friends_use_case: FromDishka[ListFriendsUseCase],
) -> ListFriendsResponse:
    """List any user's friends."""
    try:
        return await list_friends_use_case.execute(
            ListFriendsRequest(user_id=str(user_id))
        )
    except Exception as e:
        raise to_http_exception(e, "list friends")


@router.get("/{other_id}/relationship", response_model=GetRelationshipResponse)
async def get_relationship(
    other_id: UUID,
    get_relationship_use_case: FromDishka[GetRelationshipUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetRelationshipResponse:
    """Relationship between the current user and another user.

    One of ``friends``, ``sent``, ``received`` or ``none``, checked in
    that order.
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await get_relationship_use_case.execute(
            GetRelationshipRequest(user_id=user.user_id, other_id=str(other_id))
        )
    except Exception as e:
        raise to_http_exception(e, "get relationship")


@router.post("/{other_id}/accept", response_model=FriendRequestItem)
async def accept_friend_request(
    other_id: UUID,
    accept_friend_request_use_case: FromDishka[AcceptFriendRequestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> FriendRequestItem:
    """Accept the pending request ``other_id`` sent to the current user.

    Creates the friendship in both directions and notifies the sender.
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await accept_friend_request_use_case.execute(
            RespondFriendRequestRequest(user_id=user.user_id, other_id=str(other_id))
        )
    except Exception as e:
        raise to_http_exception(e, "accept friend request")


@router.post("/{other_id}/cancel", response_model=FriendRequestItem)
async def cancel_friend_request(
    other_id: UUID,
    cancel_friend_request_use_case: FromDishka[CancelFriendRequestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> FriendRequestItem:
    """Cancel, decline or unfriend.

    Works in either direction: the request between the pair becomes
    DECLINED and any friendship rows are removed.
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await cancel_friend_request_use_case.execute(
            RespondFriendRequestRequest(user_id=user.user_id, other_id=str(other_id))
        )
    except Exception as e:
        raise to_http_exception(e, "cancel friend request")
