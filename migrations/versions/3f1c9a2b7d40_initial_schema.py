"""initial_schema

Create the forum schema:
- Plans and their benefits
- Users (synced from the identity provider)
- Point history (append-only ledger)
- Notifications
- Friend requests and friendships
- Posts, poll options and votes, likes, comments, post images
- Questions and their threads
- Bug reports

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-09-28 10:12:44.318209

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUM_TYPES = {
    "user_role": ("user", "admin"),
    "point_type": (
        "create_post",
        "comment",
        "receive_comment",
        "upvote",
        "receive_upvote",
        "remove_upvote",
        "remove_received_upvote",
        "adjustment",
    ),
    "notification_type": (
        "friend_request",
        "friend_request_accepted",
        "comment",
        "like_post",
        "system",
    ),
    "friend_request_status": ("pending", "accepted", "declined"),
    "post_type": ("text", "poll", "image"),
    "content_status": ("active", "under_review", "flagged", "hidden", "deleted"),
    "question_status": (
        "open",
        "updated",
        "answered",
        "deleted",
        "banned",
        "suspended",
        "flagged",
        "under_review",
    ),
    "thread_status": ("open", "solution"),
    "bug_report_status": ("open", "in_progress", "resolved", "closed", "rejected"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def _id() -> sa.Column:
    return sa.Column(
        "id", sa.UUID(), server_default=sa.text("gen_random_uuid()"), nullable=False
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # PLANS / BENEFITS
    # ========================================================================
    op.create_table(
        "plans",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price_cents", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.CheckConstraint("price_cents >= 0", name="price_non_negative"),
    )

    op.create_table(
        "benefits",
        _id(),
        sa.Column("plan_id", sa.UUID(), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["plan_id"], ["plans.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_benefits_plan_id", "benefits", ["plan_id"])

    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("profile_picture", sa.Text(), nullable=True),
        sa.Column(
            "role", _enum("user_role"), nullable=False, server_default="user"
        ),
        sa.Column("is_enrolled", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_banned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("plan_id", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_id"),
        sa.UniqueConstraint("username"),
        sa.ForeignKeyConstraint(["plan_id"], ["plans.id"], ondelete="SET NULL"),
    )
    op.create_index("idx_users_is_enrolled", "users", ["is_enrolled"])

    # ========================================================================
    # POINT HISTORY (append-only)
    # ========================================================================
    op.create_table(
        "point_history",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("type", _enum("point_type"), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_point_history_user_id", "point_history", ["user_id"])

    # ========================================================================
    # NOTIFICATIONS
    # ========================================================================
    op.create_table(
        "notifications",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("type", _enum("notification_type"), nullable=False),
        sa.Column("url", sa.String(500), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.execute(
        "CREATE INDEX idx_notifications_user_created "
        "ON notifications (user_id, created_at DESC)"
    )

    # ========================================================================
    # FRIEND REQUESTS / FRIENDSHIPS
    # ========================================================================
    op.create_table(
        "friend_requests",
        _id(),
        sa.Column("sender_id", sa.UUID(), nullable=False),
        sa.Column("receiver_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            _enum("friend_request_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("notification_id", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["sender_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["receiver_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["notification_id"], ["notifications.id"], ondelete="SET NULL"
        ),
        sa.CheckConstraint("sender_id <> receiver_id", name="no_self_friend_request"),
    )
    op.create_index("idx_friend_requests_sender", "friend_requests", ["sender_id"])
    op.create_index("idx_friend_requests_receiver", "friend_requests", ["receiver_id"])
    # At most one non-declined request per unordered pair
    op.execute("""
        CREATE UNIQUE INDEX uq_friend_requests_active_pair
        ON friend_requests (LEAST(sender_id, receiver_id), GREATEST(sender_id, receiver_id))
        WHERE status <> 'declined'
    """)

    op.create_table(
        "friendships",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("friend_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["friend_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "friend_id", name="uq_friendship"),
    )
    op.create_index("idx_friendships_friend_id", "friendships", ["friend_id"])

    # ========================================================================
    # POSTS and everything hanging off them
    # ========================================================================
    op.create_table(
        "posts",
        _id(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("type", _enum("post_type"), nullable=False, server_default="text"),
        sa.Column(
            "status", _enum("content_status"), nullable=False, server_default="active"
        ),
        sa.Column("moderation_comment", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.execute("CREATE INDEX idx_posts_created_at ON posts (created_at DESC)")
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    op.create_table(
        "poll_options",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.String(500), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_poll_options_post_id", "poll_options", ["post_id"])

    op.create_table(
        "poll_votes",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("option_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["option_id"], ["poll_options.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint("user_id", "post_id", name="uq_poll_vote_user_post"),
    )
    op.create_index("idx_poll_votes_option_id", "poll_votes", ["option_id"])

    op.create_table(
        "likes",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "post_id", name="uq_like_user_post"),
    )
    op.create_index("idx_likes_post_id", "likes", ["post_id"])

    op.create_table(
        "comments",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "status", _enum("content_status"), nullable=False, server_default="active"
        ),
        sa.Column("reason", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    op.create_table(
        "images",
        _id(),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("storage_key", sa.String(500), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "post_images",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("image_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("post_id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["image_id"], ["images.id"], ondelete="CASCADE"),
    )

    # ========================================================================
    # QUESTIONS / THREADS
    # ========================================================================
    op.create_table(
        "questions",
        _id(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "status", _enum("question_status"), nullable=False, server_default="open"
        ),
        sa.Column("moderation_comment", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])
    op.execute("CREATE INDEX idx_questions_created_at ON questions (created_at DESC)")

    op.create_table(
        "threads",
        _id(),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "status", _enum("thread_status"), nullable=False, server_default="open"
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_threads_question_id", "threads", ["question_id"])

    # ========================================================================
    # BUG REPORTS
    # ========================================================================
    op.create_table(
        "bug_reports",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "status",
            _enum("bug_report_status"),
            nullable=False,
            server_default="open",
        ),
        sa.Column("comment", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_bug_reports_user_id", "bug_reports", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "bug_reports",
        "threads",
        "questions",
        "post_images",
        "images",
        "comments",
        "likes",
        "poll_votes",
        "poll_options",
        "posts",
        "friendships",
        "friend_requests",
        "notifications",
        "point_history",
        "users",
        "benefits",
        "plans",
    ):
        op.drop_table(table)

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
