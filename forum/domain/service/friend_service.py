"""Friendship graph domain service.

Keeps friend requests, the symmetric friendship rows and the related
notifications consistent. Every method runs inside the request's unit of
work, so a failure in any step rolls back all of them.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import ConflictError, InvalidStateTransitionError, NotFoundError
from forum.domain.model import FriendRequest, User
from forum.domain.repository import (
    FriendRequestRepository,
    FriendshipRepository,
    UserRepository,
)
from forum.domain.value import (
    FriendRequestId,
    FriendRequestStatus,
    NotificationType,
    RelationshipState,
    UserId,
)

from .base import Service
from .notification_service import NotificationService, user_url
from .points_service import PointsService

ACTIVE_STATUSES = (FriendRequestStatus.PENDING, FriendRequestStatus.ACCEPTED)


@dataclass
class FriendSummary:
    """A friend together with their current point total."""

    user: User
    total_points: int


@dataclass
class PendingRequest:
    """A pending request together with the user on the other side."""

    request: FriendRequest
    counterpart: User


class FriendService(Service):
    """Domain service for friend requests and friendships."""

    def __init__(
        self,
        friend_request_repository: FriendRequestRepository,
        friendship_repository: FriendshipRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
        points_service: PointsService,
    ) -> None:
        """Initialize friend service.

        Args:
            friend_request_repository: Friend request repository
            friendship_repository: Friendship repository
            user_repository: User repository
            notification_service: Notification domain service
            points_service: Points domain service (friend totals)
        """
        self.friend_request_repository = friend_request_repository
        self.friendship_repository = friendship_repository
        self.user_repository = user_repository
        self.notification_service = notification_service
        self.points_service = points_service

    async def send_request(
        self, sender_id: UserId, receiver_id: UserId
    ) -> FriendRequest:
        """Send a friend request and notify the receiver.

        Args:
            sender_id: User sending the request
            receiver_id: User receiving the request

        Returns:
            The pending request, linked to the receiver's notification

        Raises:
            ConflictError: If the users are the same, already friends, or a
                request between them is already pending
            NotFoundError: If either user doesn't exist
        """
        with logfire.span(
            "friend_service.send_request",
            sender_id=str(sender_id),
            receiver_id=str(receiver_id),
        ):
            if sender_id == receiver_id:
                raise ConflictError("Cannot send a friend request to yourself")

            sender = await self._get_user(sender_id)
            await self._get_user(receiver_id)

            active = await self.friend_request_repository.find_between(
                sender_id, receiver_id, ACTIVE_STATUSES
            )
            if active:
                logfire.warn(
                    "Friend request already active",
                    sender_id=str(sender_id),
                    receiver_id=str(receiver_id),
                    status=active[0].status.value,
                )
                raise ConflictError("A friend request between these users already exists")

            request = FriendRequest(
                id=FriendRequestId(uuid4()),
                sender_id=sender_id,
                receiver_id=receiver_id,
                status=FriendRequestStatus.PENDING,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            try:
                saved = await self.friend_request_repository.save(request)
            except IntegrityError:
                logfire.warn(
                    "Concurrent friend request",
                    sender_id=str(sender_id),
                    receiver_id=str(receiver_id),
                )
                raise ConflictError("A friend request between these users already exists")

            notification = await self.notification_service.notify(
                user_id=receiver_id,
                type=NotificationType.FRIEND_REQUEST,
                url=user_url(sender_id),
                content=f"{sender.username} has sent you a friend request",
            )
            if notification:
                saved = await self.friend_request_repository.save(
                    saved.model_copy(update={"notification_id": notification.id})
                )

            logfire.info(
                "Friend request sent",
                request_id=str(saved.id),
                sender_id=str(sender_id),
                receiver_id=str(receiver_id),
            )
            return saved

    async def query_relationship(
        self, user_id: UserId, other_id: UserId
    ) -> RelationshipState:
        """Relationship between two users as seen from ``user_id``.

        An accepted request wins over any pending one; pending requests are
        resolved by direction.
        """
        with logfire.span(
            "friend_service.query_relationship",
            user_id=str(user_id),
            other_id=str(other_id),
        ):
            accepted = await self.friend_request_repository.find_between(
                user_id, other_id, (FriendRequestStatus.ACCEPTED,)
            )
            if accepted:
                return RelationshipState.FRIENDS

            sent = await self.friend_request_repository.find_directed(
                user_id, other_id, FriendRequestStatus.PENDING
            )
            if sent:
                return RelationshipState.SENT

            received = await self.friend_request_repository.find_directed(
                other_id, user_id, FriendRequestStatus.PENDING
            )
            if received:
                return RelationshipState.RECEIVED

            return RelationshipState.NONE

    async def accept_request(self, user_id: UserId, other_id: UserId) -> FriendRequest:
        """Accept the pending request between two users.

        Creates both friendship rows and notifies both sides.

        Args:
            user_id: User accepting
            other_id: The other user of the pair

        Returns:
            The accepted request

        Raises:
            NotFoundError: If no pending request exists between the users
        """
        with logfire.span(
            "friend_service.accept_request",
            user_id=str(user_id),
            other_id=str(other_id),
        ):
            pending = await self.friend_request_repository.find_between(
                user_id, other_id, (FriendRequestStatus.PENDING,)
            )
            if not pending:
                logfire.warn(
                    "No pending friend request to accept",
                    user_id=str(user_id),
                    other_id=str(other_id),
                )
                raise NotFoundError("FriendRequest", f"{user_id}<->{other_id}")

            accepted = await self._transition(pending[0], FriendRequestStatus.ACCEPTED)

            await self.friendship_repository.save_pair(
                accepted.sender_id, accepted.receiver_id
            )

            sender = await self._get_user(accepted.sender_id)
            receiver = await self._get_user(accepted.receiver_id)

            await self.notification_service.notify(
                user_id=sender.id,
                type=NotificationType.FRIEND_REQUEST_ACCEPTED,
                url=user_url(receiver.id),
                content=f"{receiver.username} has accepted your friend request",
            )
            await self.notification_service.notify(
                user_id=receiver.id,
                type=NotificationType.FRIEND_REQUEST_ACCEPTED,
                url=user_url(sender.id),
                content=f"you are now friend with {sender.username}",
            )

            logfire.info(
                "Friend request accepted",
                request_id=str(accepted.id),
                sender_id=str(sender.id),
                receiver_id=str(receiver.id),
            )
            return accepted

    async def cancel_request(self, user_id: UserId, other_id: UserId) -> FriendRequest:
        """Cancel, decline or unfriend.

        The active request between the users becomes DECLINED, its linked
        notification is deleted and, if the users were friends, both
        friendship rows are removed.

        Args:
            user_id: User performing the action
            other_id: The other user of the pair

        Returns:
            The declined request

        Raises:
            NotFoundError: If no active request exists between the users
        """
        with logfire.span(
            "friend_service.cancel_request",
            user_id=str(user_id),
            other_id=str(other_id),
        ):
            active = await self.friend_request_repository.find_between(
                user_id, other_id, ACTIVE_STATUSES
            )
            if not active:
                logfire.warn(
                    "No active friend request to cancel",
                    user_id=str(user_id),
                    other_id=str(other_id),
                )
                raise NotFoundError("FriendRequest", f"{user_id}<->{other_id}")

            request = active[0]
            notification_id = request.notification_id
            declined = await self._transition(
                request.model_copy(update={"notification_id": None}),
                FriendRequestStatus.DECLINED,
            )

            if notification_id:
                await self.notification_service.delete(notification_id)

            if await self.friendship_repository.exists(user_id, other_id):
                removed = await self.friendship_repository.delete_pair(
                    user_id, other_id
                )
                logfire.info(
                    "Friendship removed",
                    user_id=str(user_id),
                    other_id=str(other_id),
                    rows=removed,
                )

            logfire.info(
                "Friend request declined",
                request_id=str(declined.id),
                previous_status=request.status.value,
            )
            return declined

    async def list_friends(self, user_id: UserId) -> list[FriendSummary]:
        """A user's friends with their point totals computed now."""
        with logfire.span("friend_service.list_friends", user_id=str(user_id)):
            friend_ids = await self.friendship_repository.find_friend_ids(user_id)
            if not friend_ids:
                return []

            friends = await self.user_repository.find_by_ids(friend_ids)
            totals = await self.points_service.get_totals([f.id for f in friends])
            return [
                FriendSummary(user=friend, total_points=totals.get(friend.id, 0))
                for friend in sorted(friends, key=lambda u: str(u.username).lower())
            ]

    async def list_sent_requests(self, user_id: UserId) -> list[PendingRequest]:
        """Pending requests sent by a user."""
        requests = await self.friend_request_repository.find_by_sender(
            user_id, FriendRequestStatus.PENDING
        )
        return await self._with_counterparts(requests, lambda r: r.receiver_id)

    async def list_received_requests(self, user_id: UserId) -> list[PendingRequest]:
        """Pending requests received by a user."""
        requests = await self.friend_request_repository.find_by_receiver(
            user_id, FriendRequestStatus.PENDING
        )
        return await self._with_counterparts(requests, lambda r: r.sender_id)

    async def _with_counterparts(self, requests, counterpart_of) -> list[PendingRequest]:
        if not requests:
            return []
        users = await self.user_repository.find_by_ids(
            [counterpart_of(r) for r in requests]
        )
        by_id = {u.id: u for u in users}
        return [
            PendingRequest(request=r, counterpart=by_id[counterpart_of(r)])
            for r in requests
            if counterpart_of(r) in by_id
        ]

    async def _transition(
        self, request: FriendRequest, target: FriendRequestStatus
    ) -> FriendRequest:
        if not request.status.can_transition_to(target):
            raise InvalidStateTransitionError(
                "friend request", request.status.value, target.value
            )
        return await self.friend_request_repository.save(
            request.model_copy(update={"status": target, "updated_at": datetime.now()})
        )

    async def _get_user(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user
