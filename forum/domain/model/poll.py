"""Poll option and poll vote entities."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PollOptionId, PollVoteId, PostId, UserId


class PollOption(DomainModel):
    """A selectable option of a poll post."""

    id: PollOptionId
    post_id: PostId
    text: str = Field(min_length=1, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)


class PollVote(DomainModel):
    """A user's vote on a poll.

    At most one vote exists per (user, post). Changing the vote deletes the
    old row and creates a new one.
    """

    id: PollVoteId
    user_id: UserId
    post_id: PostId
    option_id: PollOptionId
    created_at: datetime = Field(default_factory=datetime.now)
