"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
Status enums that carry a lifecycle expose ``can_transition_to`` so that
services validate every status change in one place.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class PostType(str, Enum):
    """Kind of post."""

    TEXT = "text"
    POLL = "poll"
    IMAGE = "image"


class ContentStatus(str, Enum):
    """Moderation status for posts and comments.

    Set only by privileged callers through the moderation overlay.
    """

    ACTIVE = "active"
    UNDER_REVIEW = "under_review"
    FLAGGED = "flagged"
    HIDDEN = "hidden"
    DELETED = "deleted"

    @property
    def is_visible(self) -> bool:
        """Whether content in this status shows up in public listings."""
        return self not in (ContentStatus.HIDDEN, ContentStatus.DELETED)


class FriendRequestStatus(str, Enum):
    """Lifecycle of a friend request.

    PENDING -> ACCEPTED | DECLINED
    ACCEPTED -> DECLINED (unfriend)
    DECLINED is terminal; a fresh PENDING request may be created afterwards.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"

    def can_transition_to(self, target: "FriendRequestStatus") -> bool:
        """Check whether moving to ``target`` is allowed."""
        return target in _FRIEND_REQUEST_TRANSITIONS[self]


_FRIEND_REQUEST_TRANSITIONS: dict[FriendRequestStatus, frozenset[FriendRequestStatus]] = {
    FriendRequestStatus.PENDING: frozenset(
        {FriendRequestStatus.ACCEPTED, FriendRequestStatus.DECLINED}
    ),
    FriendRequestStatus.ACCEPTED: frozenset({FriendRequestStatus.DECLINED}),
    FriendRequestStatus.DECLINED: frozenset(),
}


class RelationshipState(str, Enum):
    """Relationship between two users as seen from the first user."""

    FRIENDS = "friends"
    SENT = "sent"
    RECEIVED = "received"
    NONE = "none"


class QuestionStatus(str, Enum):
    """Question status.

    Primary lifecycle: OPEN -> UPDATED (on edit) -> ANSWERED.
    The remaining values are moderation statuses set by admins.
    """

    OPEN = "open"
    UPDATED = "updated"
    ANSWERED = "answered"
    DELETED = "deleted"
    BANNED = "banned"
    SUSPENDED = "suspended"
    FLAGGED = "flagged"
    UNDER_REVIEW = "under_review"

    @property
    def is_warning(self) -> bool:
        """Warning statuses are hidden from public question listings."""
        return self in WARNING_QUESTION_STATUSES

    def after_edit(self) -> "QuestionStatus":
        """Status a question moves to when its author edits it."""
        if self in (QuestionStatus.OPEN, QuestionStatus.UPDATED):
            return QuestionStatus.UPDATED
        # Answered and moderated questions keep their status
        return self

    def can_transition_to(self, target: "QuestionStatus") -> bool:
        """Check whether the solve workflow may move to ``target``."""
        if target == QuestionStatus.ANSWERED:
            return self in (QuestionStatus.OPEN, QuestionStatus.UPDATED)
        return True


WARNING_QUESTION_STATUSES = frozenset(
    {
        QuestionStatus.DELETED,
        QuestionStatus.BANNED,
        QuestionStatus.SUSPENDED,
        QuestionStatus.FLAGGED,
        QuestionStatus.UNDER_REVIEW,
    }
)


class ThreadStatus(str, Enum):
    """Thread (answer) status. SOLUTION is terminal."""

    OPEN = "open"
    SOLUTION = "solution"

    def can_transition_to(self, target: "ThreadStatus") -> bool:
        """Check whether moving to ``target`` is allowed."""
        return self == ThreadStatus.OPEN and target == ThreadStatus.SOLUTION


class BugReportStatus(str, Enum):
    """Bug report triage status."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"
    REJECTED = "rejected"


class NotificationType(str, Enum):
    """Notification type tag."""

    FRIEND_REQUEST = "friend_request"
    FRIEND_REQUEST_ACCEPTED = "friend_request_accepted"
    COMMENT = "comment"
    LIKE_POST = "like_post"
    SYSTEM = "system"


class ModerationTarget(str, Enum):
    """Entities whose status the moderation overlay can change."""

    POST = "post"
    COMMENT = "comment"
    QUESTION = "question"
    BUG_REPORT = "bug_report"


class Username(RootValueObject[str]):
    """Public username.

    1-50 characters: letters, digits, dots, underscores and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9._-]{1,50}$", v):
            raise ValueError(
                "Username must be 1-50 characters of letters, digits, '.', '_' or '-'"
            )
        return v
