"""In-memory repository implementations for testing."""

from .bug import InMemoryBugReportRepository
from .comment import InMemoryCommentRepository
from .friend import InMemoryFriendRequestRepository, InMemoryFriendshipRepository
from .image import InMemoryImageRepository
from .like import InMemoryLikeRepository
from .notification import InMemoryNotificationRepository
from .plan import InMemoryPlanRepository
from .point import InMemoryPointRepository
from .poll import InMemoryPollRepository
from .post import InMemoryPostRepository
from .question import InMemoryQuestionRepository, InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryBugReportRepository",
    "InMemoryCommentRepository",
    "InMemoryFriendRequestRepository",
    "InMemoryFriendshipRepository",
    "InMemoryImageRepository",
    "InMemoryLikeRepository",
    "InMemoryNotificationRepository",
    "InMemoryPlanRepository",
    "InMemoryPointRepository",
    "InMemoryPollRepository",
    "InMemoryPostRepository",
    "InMemoryQuestionRepository",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
