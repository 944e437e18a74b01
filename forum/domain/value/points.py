"""Point ledger rules.

The values are part of the public contract: clients display them and the
reputation leaderboard depends on them.
"""

from enum import Enum
from typing import NamedTuple


class PointType(str, Enum):
    """Type tag of a point ledger entry."""

    CREATE_POST = "create_post"
    COMMENT = "comment"
    RECEIVE_COMMENT = "receive_comment"
    UPVOTE = "upvote"
    RECEIVE_UPVOTE = "receive_upvote"
    REMOVE_UPVOTE = "remove_upvote"
    REMOVE_RECEIVED_UPVOTE = "remove_received_upvote"
    ADJUSTMENT = "adjustment"


class PointRule(NamedTuple):
    """Signed delta and description for one ledger event."""

    points: int
    description: str


POINT_RULES: dict[PointType, PointRule] = {
    PointType.CREATE_POST: PointRule(10, "Created a new post"),
    PointType.COMMENT: PointRule(5, "Added a comment"),
    PointType.RECEIVE_COMMENT: PointRule(3, "Received a comment on your post"),
    PointType.UPVOTE: PointRule(2, "Liked a post"),
    PointType.RECEIVE_UPVOTE: PointRule(1, "Received a like on your post"),
    # Reversals mirror the grants above exactly
    PointType.REMOVE_UPVOTE: PointRule(-2, "Removed a like"),
    PointType.REMOVE_RECEIVED_UPVOTE: PointRule(-1, "A like on your post was removed"),
}
