"""Post aggregate root.

Posts come in three types: plain text, polls (with options) and image posts.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import ContentStatus, PostId, PostType, UserId


class Post(DomainModel):
    """Post aggregate root.

    Poll options, likes, comments and the optional image are children of
    the post and are removed with it. ``status`` and ``moderation_comment``
    belong to the moderation overlay and are never set by the author.
    """

    id: PostId
    author_id: UserId
    content: str = Field(default="", max_length=10000)
    type: PostType = PostType.TEXT
    status: ContentStatus = ContentStatus.ACTIVE
    moderation_comment: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
