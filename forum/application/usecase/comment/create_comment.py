"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import Comment
from forum.domain.service import CommentService
from forum.domain.value import ContentStatus, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user


class CommentItem(BaseModel):
    """Comment as returned by the API."""

    comment_id: str
    post_id: str
    author_id: str
    content: str
    status: ContentStatus
    reason: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            status=comment.status,
            reason=comment.reason,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Verify post exists and save the comment
        2. Award COMMENT points to the commenter and RECEIVE_COMMENT to the author
        3. Notify the post author

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the post doesn't exist
        """
        comment = await self.comment_service.add_comment(
            PostId(UUID(request.post_id)),
            UserId(UUID(request.author_id)),
            request.content,
        )
        return CommentItem.from_comment(comment)
