"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    BugReportRepository,
    CommentRepository,
    FriendRequestRepository,
    FriendshipRepository,
    ImageRepository,
    LikeRepository,
    NotificationRepository,
    PlanRepository,
    PointRepository,
    PollRepository,
    PostRepository,
    QuestionRepository,
    ThreadRepository,
    UserRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryBugReportRepository,
    InMemoryCommentRepository,
    InMemoryFriendRequestRepository,
    InMemoryFriendshipRepository,
    InMemoryImageRepository,
    InMemoryLikeRepository,
    InMemoryNotificationRepository,
    InMemoryPlanRepository,
    InMemoryPointRepository,
    InMemoryPollRepository,
    InMemoryPostRepository,
    InMemoryQuestionRepository,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across HTTP requests within one
    container. Each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide
    def get_friend_request_repository(self) -> FriendRequestRepository:
        return InMemoryFriendRequestRepository()

    @provide
    def get_friendship_repository(self) -> FriendshipRepository:
        return InMemoryFriendshipRepository()

    @provide
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide
    def get_poll_repository(self) -> PollRepository:
        return InMemoryPollRepository()

    @provide
    def get_like_repository(self) -> LikeRepository:
        return InMemoryLikeRepository()

    @provide
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide
    def get_image_repository(self) -> ImageRepository:
        return InMemoryImageRepository()

    @provide
    def get_inmemory_thread_repository(self) -> InMemoryThreadRepository:
        return InMemoryThreadRepository()

    @provide
    def get_thread_repository(
        self, threads: InMemoryThreadRepository
    ) -> ThreadRepository:
        return threads

    @provide
    def get_question_repository(
        self, threads: InMemoryThreadRepository
    ) -> QuestionRepository:
        """Provide in-memory question repository sharing the thread store."""
        return InMemoryQuestionRepository(threads)

    @provide
    def get_notification_repository(self) -> NotificationRepository:
        return InMemoryNotificationRepository()

    @provide
    def get_point_repository(self) -> PointRepository:
        return InMemoryPointRepository()

    @provide
    def get_plan_repository(self) -> PlanRepository:
        return InMemoryPlanRepository()

    @provide
    def get_bug_report_repository(self) -> BugReportRepository:
        return InMemoryBugReportRepository()
