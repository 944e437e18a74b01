"""Strongly typed identifiers for forum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
PollOptionId = NewType("PollOptionId", UUID)
PollVoteId = NewType("PollVoteId", UUID)
ImageId = NewType("ImageId", UUID)
NotificationId = NewType("NotificationId", UUID)
PointEntryId = NewType("PointEntryId", UUID)
FriendRequestId = NewType("FriendRequestId", UUID)
FriendshipId = NewType("FriendshipId", UUID)
QuestionId = NewType("QuestionId", UUID)
ThreadId = NewType("ThreadId", UUID)
BugReportId = NewType("BugReportId", UUID)
PlanId = NewType("PlanId", UUID)
BenefitId = NewType("BenefitId", UUID)
