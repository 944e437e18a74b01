"""Get post likes use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import LikeService
from forum.domain.value import PostId


class GetPostLikesRequest(BaseModel):
    """Get post likes request."""

    post_id: str


class LikeItem(BaseModel):
    """A single like."""

    like_id: str
    user_id: str
    created_at: datetime


class GetPostLikesResponse(BaseModel):
    """Get post likes response."""

    post_id: str
    like_count: int
    likes: list[LikeItem]


class GetPostLikesUseCase:
    """Use case for listing who liked a post."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: GetPostLikesRequest) -> GetPostLikesResponse:
        likes = await self.like_service.list_likes(PostId(UUID(request.post_id)))
        return GetPostLikesResponse(
            post_id=request.post_id,
            like_count=len(likes),
            likes=[
                LikeItem(
                    like_id=str(like.id),
                    user_id=str(like.user_id),
                    created_at=like.created_at,
                )
                for like in likes
            ],
        )
