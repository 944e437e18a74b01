"""PostgreSQL repository implementations."""

from forum.persistence.repository.bug import PostgresBugReportRepository
from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.friend import (
    PostgresFriendRequestRepository,
    PostgresFriendshipRepository,
)
from forum.persistence.repository.image import PostgresImageRepository
from forum.persistence.repository.like import PostgresLikeRepository
from forum.persistence.repository.notification import PostgresNotificationRepository
from forum.persistence.repository.plan import PostgresPlanRepository
from forum.persistence.repository.point import PostgresPointRepository
from forum.persistence.repository.poll import PostgresPollRepository
from forum.persistence.repository.post import PostgresPostRepository
from forum.persistence.repository.question import (
    PostgresQuestionRepository,
    PostgresThreadRepository,
)
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPointRepository",
    "PostgresNotificationRepository",
    "PostgresFriendRequestRepository",
    "PostgresFriendshipRepository",
    "PostgresPostRepository",
    "PostgresPollRepository",
    "PostgresLikeRepository",
    "PostgresCommentRepository",
    "PostgresImageRepository",
    "PostgresQuestionRepository",
    "PostgresThreadRepository",
    "PostgresBugReportRepository",
    "PostgresPlanRepository",
]
