"""Domain services."""

from .base import Service
from .bug_service import BugService
from .comment_service import CommentService
from .friend_service import FriendService, FriendSummary, PendingRequest
from .jwt_service import JWTService
from .like_service import LikeService
from .moderation_service import ModerationService
from .notification_service import NotificationService
from .plan_service import BenefitInput, PlanService
from .points_service import PointsService
from .poll_service import PollService, PollTally
from .post_service import PostService
from .question_service import QuestionService
from .user_service import EnrolledUserSummary, UserService, UserSummary

__all__ = [
    "BenefitInput",
    "BugService",
    "CommentService",
    "EnrolledUserSummary",
    "FriendService",
    "FriendSummary",
    "JWTService",
    "LikeService",
    "ModerationService",
    "NotificationService",
    "PendingRequest",
    "PlanService",
    "PointsService",
    "PollService",
    "PollTally",
    "PostService",
    "QuestionService",
    "Service",
    "UserService",
    "UserSummary",
]
