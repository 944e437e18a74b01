"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, ContentStatus, PostId, UserId


class Comment(DomainModel):
    """Comment on a post.

    ``status`` and ``reason`` are set through moderation only.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    status: ContentStatus = ContentStatus.ACTIVE
    reason: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
