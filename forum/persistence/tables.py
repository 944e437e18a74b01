"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from forum.domain.value import (
    BugReportStatus,
    ContentStatus,
    FriendRequestStatus,
    NotificationType,
    PointType,
    PostType,
    QuestionStatus,
    ThreadStatus,
    UserRole,
)


def _pg_enum(enum_cls, name: str) -> postgresql.ENUM:
    """Postgres enum type mirroring a domain str enum (created by migrations)."""
    return postgresql.ENUM(*[m.value for m in enum_cls], name=name, create_type=False)


def _timestamp(name: str) -> Column:
    return Column(name, TIMESTAMP(timezone=True), nullable=False, server_default="NOW()")


# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PLANS
# ============================================================================
plans_table = Table(
    "plans",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(100), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("price_cents", Integer, nullable=False, server_default="0"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    CheckConstraint("price_cents >= 0", name="price_non_negative"),
)

benefits_table = Table(
    "benefits",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("plan_id", UUID, ForeignKey("plans.id", ondelete="CASCADE"), nullable=False),
    Column("description", String(500), nullable=False),
)

Index("idx_benefits_plan_id", benefits_table.c.plan_id)

# ============================================================================
# USERS
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("external_id", String(255), nullable=False, unique=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("first_name", String(100), nullable=True),
    Column("last_name", String(100), nullable=True),
    Column("profile_picture", Text, nullable=True),
    Column(
        "role",
        _pg_enum(UserRole, "user_role"),
        nullable=False,
        server_default=UserRole.USER.value,
    ),
    Column("is_enrolled", Boolean, nullable=False, server_default="false"),
    Column("is_banned", Boolean, nullable=False, server_default="false"),
    Column("plan_id", UUID, ForeignKey("plans.id", ondelete="SET NULL"), nullable=True),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_users_is_enrolled", users_table.c.is_enrolled)

# ============================================================================
# POINT HISTORY (append-only ledger)
# ============================================================================
point_history_table = Table(
    "point_history",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("points", Integer, nullable=False),
    Column("type", _pg_enum(PointType, "point_type"), nullable=False),
    Column("description", String(255), nullable=False),
    _timestamp("created_at"),
)

Index("idx_point_history_user_id", point_history_table.c.user_id)

# ============================================================================
# NOTIFICATIONS
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("type", _pg_enum(NotificationType, "notification_type"), nullable=False),
    Column("url", String(500), nullable=False),
    Column("content", Text, nullable=False),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    _timestamp("created_at"),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)

# ============================================================================
# FRIEND REQUESTS
# ============================================================================
friend_requests_table = Table(
    "friend_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "sender_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "receiver_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "status",
        _pg_enum(FriendRequestStatus, "friend_request_status"),
        nullable=False,
        server_default=FriendRequestStatus.PENDING.value,
    ),
    Column(
        "notification_id",
        UUID,
        ForeignKey("notifications.id", ondelete="SET NULL"),
        nullable=True,
    ),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    CheckConstraint("sender_id <> receiver_id", name="no_self_friend_request"),
)

Index("idx_friend_requests_sender", friend_requests_table.c.sender_id)
Index("idx_friend_requests_receiver", friend_requests_table.c.receiver_id)
# At most one non-declined request per unordered pair
Index(
    "uq_friend_requests_active_pair",
    func.least(friend_requests_table.c.sender_id, friend_requests_table.c.receiver_id),
    func.greatest(
        friend_requests_table.c.sender_id, friend_requests_table.c.receiver_id
    ),
    unique=True,
    postgresql_where=text("status <> 'declined'"),
)

# ============================================================================
# FRIENDSHIPS (two directed rows per pair)
# ============================================================================
friendships_table = Table(
    "friendships",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "friend_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    _timestamp("created_at"),
    UniqueConstraint("user_id", "friend_id", name="uq_friendship"),
)

Index("idx_friendships_friend_id", friendships_table.c.friend_id)

# ============================================================================
# POSTS
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False, server_default=""),
    Column(
        "type",
        _pg_enum(PostType, "post_type"),
        nullable=False,
        server_default=PostType.TEXT.value,
    ),
    Column(
        "status",
        _pg_enum(ContentStatus, "content_status"),
        nullable=False,
        server_default=ContentStatus.ACTIVE.value,
    ),
    Column("moderation_comment", Text, nullable=True),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

poll_options_table = Table(
    "poll_options",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("text", String(500), nullable=False),
    _timestamp("created_at"),
)

Index("idx_poll_options_post_id", poll_options_table.c.post_id)

poll_votes_table = Table(
    "poll_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "option_id",
        UUID,
        ForeignKey("poll_options.id", ondelete="CASCADE"),
        nullable=False,
    ),
    _timestamp("created_at"),
    UniqueConstraint("user_id", "post_id", name="uq_poll_vote_user_post"),
)

Index("idx_poll_votes_option_id", poll_votes_table.c.option_id)

likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    _timestamp("created_at"),
    UniqueConstraint("user_id", "post_id", name="uq_like_user_post"),
)

Index("idx_likes_post_id", likes_table.c.post_id)

comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "status",
        _pg_enum(ContentStatus, "content_status"),
        nullable=False,
        server_default=ContentStatus.ACTIVE.value,
    ),
    Column("reason", Text, nullable=True),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_author_id", comments_table.c.author_id)

images_table = Table(
    "images",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("url", Text, nullable=False),
    Column("storage_key", String(500), nullable=False),
    _timestamp("created_at"),
)

post_images_table = Table(
    "post_images",
    metadata,
    Column(
        "post_id",
        UUID,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "image_id", UUID, ForeignKey("images.id", ondelete="CASCADE"), nullable=False
    ),
    _timestamp("created_at"),
)

# ============================================================================
# QUESTIONS / THREADS
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "status",
        _pg_enum(QuestionStatus, "question_status"),
        nullable=False,
        server_default=QuestionStatus.OPEN.value,
    ),
    Column("moderation_comment", Text, nullable=True),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())

threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "status",
        _pg_enum(ThreadStatus, "thread_status"),
        nullable=False,
        server_default=ThreadStatus.OPEN.value,
    ),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_threads_question_id", threads_table.c.question_id)

# ============================================================================
# BUG REPORTS
# ============================================================================
bug_reports_table = Table(
    "bug_reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "status",
        _pg_enum(BugReportStatus, "bug_report_status"),
        nullable=False,
        server_default=BugReportStatus.OPEN.value,
    ),
    Column("comment", Text, nullable=True),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_bug_reports_user_id", bug_reports_table.c.user_id)
