"""Like entity.

The existence of a Like row for (user, post) means the user likes the post.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import LikeId, PostId, UserId


class Like(DomainModel):
    """Like entity. Unique per (user_id, post_id)."""

    id: LikeId
    user_id: UserId
    post_id: PostId
    created_at: datetime = Field(default_factory=datetime.now)
