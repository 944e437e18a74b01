"""Like and dislike post use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import LikeService
from forum.domain.value import PostId, UserId


class LikePostRequest(BaseModel):
    """Like or dislike request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikePostResponse(BaseModel):
    """Like post response."""

    like_id: str
    post_id: str
    created_at: datetime


class DislikePostResponse(BaseModel):
    """Dislike post response."""

    success: bool


class LikePostUseCase:
    """Use case for liking a post."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like post use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like flow.

        The liker gains UPVOTE points, the author RECEIVE_UPVOTE points and
        a notification.

        Raises:
            NotFoundError: If the post doesn't exist
            ConflictError: If the user already liked the post
        """
        like = await self.like_service.like_post(
            UserId(UUID(request.user_id)), PostId(UUID(request.post_id))
        )
        return LikePostResponse(
            like_id=str(like.id), post_id=str(like.post_id), created_at=like.created_at
        )


class DislikePostUseCase:
    """Use case for removing a like, reversing the points it granted."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize dislike post use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikePostRequest) -> DislikePostResponse:
        """Execute dislike flow.

        Raises:
            NotFoundError: If the post doesn't exist or was not liked
        """
        await self.like_service.dislike_post(
            UserId(UUID(request.user_id)), PostId(UUID(request.post_id))
        )
        return DislikePostResponse(success=True)
