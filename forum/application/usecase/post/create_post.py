"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.domain.service import LikeService, PollService, PostService
from forum.domain.value import PostType, UserId

from .get_post import PostItem, build_post_item


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    content: str = ""
    type: PostType = PostType.TEXT
    poll_options: list[str] = Field(default_factory=list)


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        poll_service: PollService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service (for the response view)
            poll_service: Poll domain service (for the response view)
        """
        self.post_service = post_service
        self.like_service = like_service
        self.poll_service = poll_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Steps:
        1. Create the post (poll options are created for POLL posts)
        2. Award CREATE_POST points to the author (via PostService)
        3. Return the post view

        Raises:
            ValidationError: If a TEXT post has no content
        """
        author_id = UserId(UUID(request.author_id))

        with logfire.span(
            "create_post.execute", author_id=request.author_id, type=request.type.value
        ):
            post = await self.post_service.create_post(
                author_id,
                request.content,
                type=request.type,
                poll_options=request.poll_options,
            )

        return await build_post_item(
            post, self.post_service, self.like_service, self.poll_service, author_id
        )
