"""Domain model entities for the forum."""

from forum.domain.model.bug import BugReport
from forum.domain.model.comment import Comment
from forum.domain.model.friend import FriendRequest, Friendship
from forum.domain.model.image import Image, PostImage
from forum.domain.model.like import Like
from forum.domain.model.notification import Notification
from forum.domain.model.plan import Benefit, Plan
from forum.domain.model.point import PointEntry
from forum.domain.model.poll import PollOption, PollVote
from forum.domain.model.post import Post
from forum.domain.model.question import Question, Thread
from forum.domain.model.user import User

__all__ = [
    "User",
    "PointEntry",
    "Notification",
    "FriendRequest",
    "Friendship",
    "Post",
    "PollOption",
    "PollVote",
    "Like",
    "Comment",
    "Image",
    "PostImage",
    "Question",
    "Thread",
    "BugReport",
    "Plan",
    "Benefit",
]
