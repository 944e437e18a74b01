"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import PostId

from .create_comment import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    include_hidden: bool = False  # Honoured for admins only (checked by caller)


class GetCommentsResponse(BaseModel):
    """Get comments response, oldest first."""

    comments: list[CommentItem]


class GetCommentsUseCase:
    """Use case for listing the comments of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        comments = await self.comment_service.list_comments(
            PostId(UUID(request.post_id)), include_hidden=request.include_hidden
        )
        return GetCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in comments]
        )
