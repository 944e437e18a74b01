"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from forum.domain.model import (
    Benefit,
    BugReport,
    Comment,
    FriendRequest,
    Friendship,
    Image,
    Like,
    Notification,
    Plan,
    PointEntry,
    PollOption,
    PollVote,
    Post,
    Question,
    Thread,
    User,
)
from forum.domain.value import (
    BenefitId,
    BugReportId,
    BugReportStatus,
    CommentId,
    ContentStatus,
    FriendRequestId,
    FriendRequestStatus,
    FriendshipId,
    ImageId,
    LikeId,
    NotificationId,
    NotificationType,
    PlanId,
    PointEntryId,
    PointType,
    PollOptionId,
    PollVoteId,
    PostId,
    PostType,
    QuestionId,
    QuestionStatus,
    ThreadId,
    ThreadStatus,
    UserId,
    UserRole,
)
from forum.domain.value.types import Username


def _as_uuid(value: Any) -> UUID:
    """Coerce a UUID column value (driver may hand back str)."""
    return UUID(value) if isinstance(value, str) else value


def _as_optional_uuid(value: Any) -> Optional[UUID]:
    return _as_uuid(value) if value is not None else None


def _enum_values(data: Dict[str, Any]) -> Dict[str, Any]:
    """Replace enum members with their raw values for insertion."""
    return {k: getattr(v, "value", v) for k, v in data.items()}


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        external_id=row["external_id"],
        username=Username(row["username"]),
        email=row.get("email"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        profile_picture=row.get("profile_picture"),
        role=UserRole(row["role"]),
        is_enrolled=row["is_enrolled"],
        is_banned=row["is_banned"],
        plan_id=(
            PlanId(_as_uuid(row["plan_id"])) if row.get("plan_id") is not None else None
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return _enum_values(user.model_dump())


def row_to_point_entry(row: Dict[str, Any]) -> PointEntry:
    return PointEntry(
        id=PointEntryId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        points=row["points"],
        type=PointType(row["type"]),
        description=row["description"],
        created_at=row["created_at"],
    )


def point_entry_to_dict(entry: PointEntry) -> Dict[str, Any]:
    return _enum_values(entry.model_dump())


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        url=row["url"],
        content=row["content"],
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    return _enum_values(notification.model_dump())


def row_to_friend_request(row: Dict[str, Any]) -> FriendRequest:
    """Convert database row to FriendRequest domain model."""
    notification_id = _as_optional_uuid(row.get("notification_id"))
    return FriendRequest(
        id=FriendRequestId(_as_uuid(row["id"])),
        sender_id=UserId(_as_uuid(row["sender_id"])),
        receiver_id=UserId(_as_uuid(row["receiver_id"])),
        status=FriendRequestStatus(row["status"]),
        notification_id=(
            NotificationId(notification_id) if notification_id is not None else None
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def friend_request_to_dict(request: FriendRequest) -> Dict[str, Any]:
    return _enum_values(request.model_dump())


def row_to_friendship(row: Dict[str, Any]) -> Friendship:
    return Friendship(
        id=FriendshipId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        friend_id=UserId(_as_uuid(row["friend_id"])),
        created_at=row["created_at"],
    )


def friendship_to_dict(friendship: Friendship) -> Dict[str, Any]:
    return friendship.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        content=row["content"],
        type=PostType(row["type"]),
        status=ContentStatus(row["status"]),
        moderation_comment=row.get("moderation_comment"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return _enum_values(post.model_dump())


def row_to_poll_option(row: Dict[str, Any]) -> PollOption:
    return PollOption(
        id=PollOptionId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        text=row["text"],
        created_at=row["created_at"],
    )


def poll_option_to_dict(option: PollOption) -> Dict[str, Any]:
    return option.model_dump()


def row_to_poll_vote(row: Dict[str, Any]) -> PollVote:
    return PollVote(
        id=PollVoteId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        option_id=PollOptionId(_as_uuid(row["option_id"])),
        created_at=row["created_at"],
    )


def poll_vote_to_dict(vote: PollVote) -> Dict[str, Any]:
    return vote.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    return Like(
        id=LikeId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    return like.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        content=row["content"],
        status=ContentStatus(row["status"]),
        reason=row.get("reason"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return _enum_values(comment.model_dump())


def row_to_image(row: Dict[str, Any]) -> Image:
    return Image(
        id=ImageId(_as_uuid(row["id"])),
        url=row["url"],
        storage_key=row["storage_key"],
        created_at=row["created_at"],
    )


def image_to_dict(image: Image) -> Dict[str, Any]:
    return image.model_dump()


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_as_uuid(row["id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        status=QuestionStatus(row["status"]),
        moderation_comment=row.get("moderation_comment"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    return _enum_values(question.model_dump())


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model."""
    return Thread(
        id=ThreadId(_as_uuid(row["id"])),
        question_id=QuestionId(_as_uuid(row["question_id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        content=row["content"],
        status=ThreadStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    return _enum_values(thread.model_dump())


def row_to_bug_report(row: Dict[str, Any]) -> BugReport:
    """Convert database row to BugReport domain model."""
    return BugReport(
        id=BugReportId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        title=row["title"],
        description=row["description"],
        status=BugReportStatus(row["status"]),
        comment=row.get("comment"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def bug_report_to_dict(report: BugReport) -> Dict[str, Any]:
    return _enum_values(report.model_dump())


def row_to_benefit(row: Dict[str, Any]) -> Benefit:
    return Benefit(
        id=BenefitId(_as_uuid(row["id"])),
        plan_id=PlanId(_as_uuid(row["plan_id"])),
        description=row["description"],
    )


def benefit_to_dict(benefit: Benefit) -> Dict[str, Any]:
    return benefit.model_dump()


def row_to_plan(
    row: Dict[str, Any], benefit_rows: Iterable[Dict[str, Any]] = ()
) -> Plan:
    """Convert a plan row and its benefit rows to a Plan domain model.

    Args:
        row: Plan row as dict
        benefit_rows: Rows from the benefits table belonging to this plan

    Returns:
        Plan domain model with benefits attached
    """
    return Plan(
        id=PlanId(_as_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        price_cents=row["price_cents"],
        benefits=[row_to_benefit(b) for b in benefit_rows],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def plan_to_dict(plan: Plan) -> Dict[str, Any]:
    """Convert Plan domain model to a plans-table dict (benefits excluded)."""
    return plan.model_dump(exclude={"benefits"})
