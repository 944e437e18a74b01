"""Application layer DI providers."""

from dishka import Scope, provide

from forum.adapter.storage import ObjectStorageClient
from forum.application.usecase.auth import GetCurrentUserUseCase, SyncUserUseCase
from forum.application.usecase.bug import (
    GetBugReportUseCase,
    ListBugReportsUseCase,
    ReportBugUseCase,
)
from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from forum.application.usecase.friend import (
    AcceptFriendRequestUseCase,
    CancelFriendRequestUseCase,
    GetRelationshipUseCase,
    ListFriendRequestsUseCase,
    ListFriendsUseCase,
    SendFriendRequestUseCase,
)
from forum.application.usecase.like import (
    DislikePostUseCase,
    GetPostLikesUseCase,
    LikePostUseCase,
)
from forum.application.usecase.moderation import ModerateContentUseCase
from forum.application.usecase.notification import (
    CreateNotificationUseCase,
    DeleteNotificationsUseCase,
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
)
from forum.application.usecase.plan import (
    BuyPlanUseCase,
    CreatePlanUseCase,
    DeletePlanUseCase,
    GetPlanUseCase,
    ListPlansUseCase,
    UpdatePlanUseCase,
)
from forum.application.usecase.point import AwardPointsUseCase, GetPointsUseCase
from forum.application.usecase.poll import GetPollUseCase, VotePollUseCase
from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    SetPostImageUseCase,
    UpdatePostUseCase,
)
from forum.application.usecase.question import (
    AskQuestionUseCase,
    DeleteQuestionUseCase,
    DeleteThreadUseCase,
    GetQuestionUseCase,
    GetThreadUseCase,
    ListQuestionsUseCase,
    MarkAsSolvedUseCase,
    PostThreadUseCase,
    UpdateQuestionUseCase,
    UpdateThreadUseCase,
)
from forum.application.usecase.user import (
    DeleteUserUseCase,
    GetUserPointsUseCase,
    GetUserProfileUseCase,
    ListEnrolledUsersUseCase,
    ListUsersUseCase,
    SetUserFlagsUseCase,
    UpdateUserProfileUseCase,
)
from forum.config import AuthSettings
from forum.domain.service import JWTService, PostService, UserService
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases whose constructors take only domain services are wired from
    their type hints.
    """

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide
    def get_sync_user_use_case(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> SyncUserUseCase:
        """Provide identity-provider user sync use case."""
        return SyncUserUseCase(user_service=user_service, auth_settings=auth_settings)

    # User use cases
    get_user_profile = provide(GetUserProfileUseCase)
    update_user_profile = provide(UpdateUserProfileUseCase)
    get_user_points = provide(GetUserPointsUseCase)
    delete_user = provide(DeleteUserUseCase)
    list_users = provide(ListUsersUseCase)
    list_enrolled_users = provide(ListEnrolledUsersUseCase)
    set_user_flags = provide(SetUserFlagsUseCase)

    # Friend use cases
    send_friend_request = provide(SendFriendRequestUseCase)
    get_relationship = provide(GetRelationshipUseCase)
    accept_friend_request = provide(AcceptFriendRequestUseCase)
    cancel_friend_request = provide(CancelFriendRequestUseCase)
    list_friends = provide(ListFriendsUseCase)
    list_friend_requests = provide(ListFriendRequestsUseCase)

    # Post use cases
    create_post = provide(CreatePostUseCase)
    get_post = provide(GetPostUseCase)
    list_posts = provide(ListPostsUseCase)
    update_post = provide(UpdatePostUseCase)
    delete_post = provide(DeletePostUseCase)

    @provide
    def get_set_post_image_use_case(
        self, post_service: PostService, storage_client: ObjectStorageClient
    ) -> SetPostImageUseCase:
        """Provide post image upload use case."""
        return SetPostImageUseCase(
            post_service=post_service, storage_client=storage_client
        )

    # Like and poll use cases
    like_post = provide(LikePostUseCase)
    dislike_post = provide(DislikePostUseCase)
    get_post_likes = provide(GetPostLikesUseCase)
    vote_poll = provide(VotePollUseCase)
    get_poll = provide(GetPollUseCase)

    # Comment use cases
    create_comment = provide(CreateCommentUseCase)
    get_comments = provide(GetCommentsUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)

    # Question and thread use cases
    ask_question = provide(AskQuestionUseCase)
    list_questions = provide(ListQuestionsUseCase)
    get_question = provide(GetQuestionUseCase)
    update_question = provide(UpdateQuestionUseCase)
    delete_question = provide(DeleteQuestionUseCase)
    post_thread = provide(PostThreadUseCase)
    get_thread = provide(GetThreadUseCase)
    update_thread = provide(UpdateThreadUseCase)
    delete_thread = provide(DeleteThreadUseCase)
    mark_as_solved = provide(MarkAsSolvedUseCase)

    # Notification and point use cases
    list_notifications = provide(ListNotificationsUseCase)
    create_notification = provide(CreateNotificationUseCase)
    mark_notification_read = provide(MarkNotificationReadUseCase)
    delete_notifications = provide(DeleteNotificationsUseCase)
    get_points = provide(GetPointsUseCase)
    award_points = provide(AwardPointsUseCase)

    # Bug report, plan and moderation use cases
    report_bug = provide(ReportBugUseCase)
    list_bug_reports = provide(ListBugReportsUseCase)
    get_bug_report = provide(GetBugReportUseCase)
    list_plans = provide(ListPlansUseCase)
    get_plan = provide(GetPlanUseCase)
    create_plan = provide(CreatePlanUseCase)
    update_plan = provide(UpdatePlanUseCase)
    delete_plan = provide(DeletePlanUseCase)
    buy_plan = provide(BuyPlanUseCase)
    moderate_content = provide(ModerateContentUseCase)
