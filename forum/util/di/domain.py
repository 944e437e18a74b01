"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings
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
from forum.domain.service import (
    BugService,
    CommentService,
    FriendService,
    JWTService,
    LikeService,
    ModerationService,
    NotificationService,
    PlanService,
    PointsService,
    PollService,
    PostService,
    QuestionService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_points_service(self, point_repository: PointRepository) -> PointsService:
        """Provide point ledger domain service."""
        return PointsService(point_repository=point_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            user_repository=user_repository,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        friendship_repository: FriendshipRepository,
        question_repository: QuestionRepository,
        thread_repository: ThreadRepository,
        points_service: PointsService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            friendship_repository=friendship_repository,
            question_repository=question_repository,
            thread_repository=thread_repository,
            points_service=points_service,
        )

    @provide
    def get_friend_service(
        self,
        friend_request_repository: FriendRequestRepository,
        friendship_repository: FriendshipRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
        points_service: PointsService,
    ) -> FriendService:
        """Provide friendship graph domain service."""
        return FriendService(
            friend_request_repository=friend_request_repository,
            friendship_repository=friendship_repository,
            user_repository=user_repository,
            notification_service=notification_service,
            points_service=points_service,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        poll_repository: PollRepository,
        image_repository: ImageRepository,
        points_service: PointsService,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            poll_repository=poll_repository,
            image_repository=image_repository,
            points_service=points_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        points_service: PointsService,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            user_repository=user_repository,
            points_service=points_service,
            notification_service=notification_service,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        points_service: PointsService,
        notification_service: NotificationService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_repository=post_repository,
            user_repository=user_repository,
            points_service=points_service,
            notification_service=notification_service,
        )

    @provide
    def get_poll_service(
        self,
        poll_repository: PollRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> PollService:
        """Provide poll domain service."""
        return PollService(
            poll_repository=poll_repository,
            post_repository=post_repository,
            user_repository=user_repository,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        thread_repository: ThreadRepository,
    ) -> QuestionService:
        """Provide question/thread domain service."""
        return QuestionService(
            question_repository=question_repository,
            thread_repository=thread_repository,
        )

    @provide
    def get_moderation_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        question_repository: QuestionRepository,
        thread_repository: ThreadRepository,
        bug_report_repository: BugReportRepository,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            question_repository=question_repository,
            thread_repository=thread_repository,
            bug_report_repository=bug_report_repository,
        )

    @provide
    def get_bug_service(
        self, bug_report_repository: BugReportRepository
    ) -> BugService:
        """Provide bug report domain service."""
        return BugService(bug_report_repository=bug_report_repository)

    @provide
    def get_plan_service(
        self, plan_repository: PlanRepository, user_repository: UserRepository
    ) -> PlanService:
        """Provide plan domain service."""
        return PlanService(
            plan_repository=plan_repository, user_repository=user_repository
        )
