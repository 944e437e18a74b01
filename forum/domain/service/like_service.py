"""Like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import Like, Post
from forum.domain.repository import LikeRepository, PostRepository, UserRepository
from forum.domain.value import (
    ContentStatus,
    LikeId,
    NotificationType,
    PointType,
    PostId,
    UserId,
)

from .base import Service
from .notification_service import NotificationService, post_url
from .points_service import PointsService


class LikeService(Service):
    """Domain service for liking and unliking posts.

    A like credits the liker and the post author; an unlike appends the
    exact reversal of both entries, so totals return to their previous
    values.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        points_service: PointsService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository
            user_repository: User repository
            points_service: Points domain service
            notification_service: Notification domain service
        """
        self.like_repository = like_repository
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.points_service = points_service
        self.notification_service = notification_service

    async def like_post(self, user_id: UserId, post_id: PostId) -> Like:
        """Like a post.

        Args:
            user_id: User liking the post
            post_id: Post being liked

        Returns:
            The created like

        Raises:
            NotFoundError: If the post doesn't exist
            ConflictError: If the user already likes the post
        """
        with logfire.span(
            "like_service.like_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self._get_post(post_id)

            existing = await self.like_repository.find_by_user_and_post(
                user_id, post_id
            )
            if existing:
                logfire.warn(
                    "Duplicate like attempt", user_id=str(user_id), post_id=str(post_id)
                )
                raise ConflictError("Already liked this post")

            like = Like(
                id=LikeId(uuid4()),
                user_id=user_id,
                post_id=post_id,
                created_at=datetime.now(),
            )
            try:
                saved = await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt", user_id=str(user_id), post_id=str(post_id)
                )
                raise ConflictError("Already liked this post")

            await self.points_service.award(post.author_id, PointType.RECEIVE_UPVOTE)
            await self.points_service.award(user_id, PointType.UPVOTE)

            liker = await self.user_repository.find_by_id(user_id)
            if liker:
                await self.notification_service.notify(
                    user_id=post.author_id,
                    type=NotificationType.LIKE_POST,
                    url=post_url(post_id),
                    content=f"{liker.username} liked your post",
                )

            logfire.info("Post liked", post_id=str(post_id), user_id=str(user_id))
            return saved

    async def dislike_post(self, user_id: UserId, post_id: PostId) -> None:
        """Remove a like from a post.

        The notification sent for the like is kept.

        Raises:
            NotFoundError: If the post doesn't exist or isn't liked by the user
        """
        with logfire.span(
            "like_service.dislike_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self._get_post(post_id)

            like = await self.like_repository.find_by_user_and_post(user_id, post_id)
            if not like:
                logfire.info(
                    "No like to remove", post_id=str(post_id), user_id=str(user_id)
                )
                raise NotFoundError("Like", f"{user_id}:{post_id}")

            await self.like_repository.delete(like.id)

            await self.points_service.award(
                post.author_id, PointType.REMOVE_RECEIVED_UPVOTE
            )
            await self.points_service.award(user_id, PointType.REMOVE_UPVOTE)

            logfire.info("Like removed", post_id=str(post_id), user_id=str(user_id))

    async def list_likes(self, post_id: PostId) -> list[Like]:
        """Likes on a post, oldest first."""
        await self._get_post(post_id)
        return await self.like_repository.find_by_post(post_id)

    async def has_liked(self, user_id: UserId, post_id: PostId) -> bool:
        like = await self.like_repository.find_by_user_and_post(user_id, post_id)
        return like is not None

    async def _get_post(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if not post or post.status == ContentStatus.DELETED:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        return post
