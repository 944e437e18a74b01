"""Friend request and friendship entities.

A friendship between A and B is materialised as two directed rows, A->B
and B->A, created and deleted together. The ACCEPTED friend request is kept
as the authoritative record of the friendship.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    FriendRequestId,
    FriendRequestStatus,
    FriendshipId,
    NotificationId,
    UserId,
)


class FriendRequest(DomainModel):
    """Directed friend request.

    At most one non-declined request exists per unordered pair of users.
    """

    id: FriendRequestId
    sender_id: UserId
    receiver_id: UserId
    status: FriendRequestStatus = FriendRequestStatus.PENDING
    notification_id: Optional[NotificationId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_distinct_users(self) -> "FriendRequest":
        """Users cannot befriend themselves."""
        if self.sender_id == self.receiver_id:
            raise ValueError("Sender and receiver must be different users")
        return self

    def involves(self, user_a: UserId, user_b: UserId) -> bool:
        """Whether this request is between the two users, in either direction."""
        return {self.sender_id, self.receiver_id} == {user_a, user_b}


class Friendship(DomainModel):
    """One directed edge of a friendship pair."""

    id: FriendshipId
    user_id: UserId
    friend_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
