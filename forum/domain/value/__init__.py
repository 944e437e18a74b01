"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    BenefitId,
    BugReportId,
    CommentId,
    FriendRequestId,
    FriendshipId,
    ImageId,
    LikeId,
    NotificationId,
    PlanId,
    PointEntryId,
    PollOptionId,
    PollVoteId,
    PostId,
    QuestionId,
    ThreadId,
    UserId,
)
from forum.domain.value.points import POINT_RULES, PointRule, PointType
from forum.domain.value.types import (
    BugReportStatus,
    ContentStatus,
    FriendRequestStatus,
    ModerationTarget,
    NotificationType,
    PostType,
    QuestionStatus,
    RelationshipState,
    ThreadStatus,
    UserRole,
    Username,
    WARNING_QUESTION_STATUSES,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "PollOptionId",
    "PollVoteId",
    "ImageId",
    "NotificationId",
    "PointEntryId",
    "FriendRequestId",
    "FriendshipId",
    "QuestionId",
    "ThreadId",
    "BugReportId",
    "PlanId",
    "BenefitId",
    # Points
    "POINT_RULES",
    "PointRule",
    "PointType",
    # Types
    "BugReportStatus",
    "ContentStatus",
    "FriendRequestStatus",
    "ModerationTarget",
    "NotificationType",
    "PostType",
    "QuestionStatus",
    "RelationshipState",
    "ThreadStatus",
    "UserRole",
    "Username",
    "WARNING_QUESTION_STATUSES",
]
