"""Update and delete comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService, UserService
from forum.domain.value import CommentId, UserId

from .create_comment import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    content: str
    user_id: str  # User ID from authenticated user


class UpdateCommentUseCase:
    """Use case for editing a comment (author only)."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        comment = await self.comment_service.edit_comment(
            CommentId(UUID(request.comment_id)),
            UserId(UUID(request.user_id)),
            request.content,
        )
        return CommentItem.from_comment(comment)


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool


class DeleteCommentUseCase:
    """Use case for deleting a comment (author or admin)."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is neither author nor admin
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), user
        )
        return DeleteCommentResponse(success=True)
