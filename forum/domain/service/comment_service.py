"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model import Comment, Post, User
from forum.domain.repository import CommentRepository, PostRepository, UserRepository
from forum.domain.value import (
    CommentId,
    ContentStatus,
    NotificationType,
    PointType,
    PostId,
    UserId,
)

from .base import Service
from .notification_service import NotificationService, post_url
from .points_service import PointsService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        points_service: PointsService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            user_repository: User repository
            points_service: Points domain service
            notification_service: Notification domain service
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.points_service = points_service
        self.notification_service = notification_service

    async def add_comment(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Comment on a post.

        Credits the post author (RECEIVE_COMMENT) and the commenter (COMMENT)
        and notifies the post author.

        Args:
            post_id: Post being commented on
            author_id: Commenting user
            content: Comment text

        Returns:
            The created comment

        Raises:
            NotFoundError: If the post or the commenter doesn't exist
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            post = await self._get_post(post_id)
            commenter = await self.user_repository.find_by_id(author_id)
            if not commenter:
                raise NotFoundError("User", str(author_id))

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                status=ContentStatus.ACTIVE,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)

            await self.points_service.award(post.author_id, PointType.RECEIVE_COMMENT)
            await self.points_service.award(author_id, PointType.COMMENT)

            await self.notification_service.notify(
                user_id=post.author_id,
                type=NotificationType.COMMENT,
                url=post_url(post_id),
                content=f"{commenter.username} commented on your post",
            )

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author_id=str(author_id),
            )
            return saved

    async def list_comments(
        self, post_id: PostId, include_hidden: bool = False
    ) -> list[Comment]:
        """Comments on a post, oldest first."""
        with logfire.span("comment_service.list_comments", post_id=str(post_id)):
            await self._get_post(post_id)
            comments = await self.comment_repository.find_by_post(
                post_id, include_hidden=include_hidden
            )
            logfire.info(
                "Comments retrieved for post", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist or was deleted
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment or comment.status == ContentStatus.DELETED:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def edit_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Change a comment's text.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
            text_length=len(content),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            updated = await self.comment_repository.save(
                comment.model_copy(
                    update={"content": content, "updated_at": datetime.now()}
                )
            )
            logfire.info("Comment text updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId, user: User) -> None:
        """Delete a comment (author or admin).

        Points granted for the comment stay in the ledger.
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user.id),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author_id != user.id and not user.is_admin:
                raise NotAuthorizedError("comment", str(comment_id), str(user.id))
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def _get_post(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if not post or post.status == ContentStatus.DELETED:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        return post
