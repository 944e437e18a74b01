"""List posts use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.domain.service import LikeService, PostService
from forum.domain.value import UserId

from .get_post import PostItem, build_post_item


class ListPostsRequest(BaseModel):
    """List posts request."""

    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    author_id: Optional[str] = None  # Only posts by this user
    viewer_id: Optional[str] = None  # Authenticated user, if any
    include_hidden: bool = False  # Honoured for admins only (checked by caller)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int  # Number of posts in this page


class ListPostsUseCase:
    """Use case for the post feed, newest first."""

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        with logfire.span(
            "list_posts.execute",
            limit=request.limit,
            offset=request.offset,
            author_id=request.author_id,
        ):
            if request.author_id:
                posts = await self.post_service.list_posts_by_author(
                    UserId(UUID(request.author_id)),
                    limit=request.limit,
                    offset=request.offset,
                )
            else:
                posts = await self.post_service.list_posts(
                    limit=request.limit,
                    offset=request.offset,
                    include_hidden=request.include_hidden,
                )

            viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
            items = [
                await build_post_item(
                    post, self.post_service, self.like_service, viewer_id=viewer_id
                )
                for post in posts
            ]

        return ListPostsResponse(posts=items, total=len(items))
