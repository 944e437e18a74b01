"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.bug import BugReportRepository
from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.friend import FriendRequestRepository, FriendshipRepository
from forum.domain.repository.image import ImageRepository
from forum.domain.repository.like import LikeRepository
from forum.domain.repository.notification import NotificationRepository
from forum.domain.repository.plan import PlanRepository
from forum.domain.repository.point import PointRepository
from forum.domain.repository.poll import PollRepository
from forum.domain.repository.post import PostRepository
from forum.domain.repository.question import QuestionRepository, ThreadRepository
from forum.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PointRepository",
    "NotificationRepository",
    "FriendRequestRepository",
    "FriendshipRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
    "PollRepository",
    "ImageRepository",
    "QuestionRepository",
    "ThreadRepository",
    "BugReportRepository",
    "PlanRepository",
]
