"""Get post use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import Post
from forum.domain.service import LikeService, PollService, PostService
from forum.domain.value import ContentStatus, PostId, PostType, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    viewer_id: Optional[str] = None  # Authenticated user, if any


class PollOptionItem(BaseModel):
    """Poll option with its vote count."""

    id: str
    text: str
    vote_count: int


class PostItem(BaseModel):
    """Post as returned by the API."""

    id: str
    author_id: str
    content: str
    type: PostType
    status: ContentStatus
    moderation_comment: str | None
    like_count: int
    liked_by_viewer: bool = False
    image_url: str | None = None
    poll_options: list[PollOptionItem] | None = None
    created_at: datetime
    updated_at: datetime


async def build_post_item(
    post: Post,
    post_service: PostService,
    like_service: LikeService,
    poll_service: PollService | None = None,
    viewer_id: UserId | None = None,
) -> PostItem:
    """Assemble the API view of a post.

    Args:
        post: Post entity
        post_service: Post domain service (image lookup)
        like_service: Like domain service (like count and viewer's like)
        poll_service: Poll domain service; when given, poll tallies are included
        viewer_id: Current user, to fill ``liked_by_viewer``

    Returns:
        Post view
    """
    likes = await like_service.list_likes(post.id)
    image = await post_service.get_image(post.id)

    poll_options = None
    if poll_service is not None and post.type == PostType.POLL:
        poll_options = [
            PollOptionItem(id=str(t.option.id), text=t.option.text, vote_count=t.vote_count)
            for t in await poll_service.get_poll(post.id)
        ]

    return PostItem(
        id=str(post.id),
        author_id=str(post.author_id),
        content=post.content,
        type=post.type,
        status=post.status,
        moderation_comment=post.moderation_comment,
        like_count=len(likes),
        liked_by_viewer=viewer_id is not None
        and any(like.user_id == viewer_id for like in likes),
        image_url=image.url if image else None,
        poll_options=poll_options,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


class GetPostUseCase:
    """Use case for getting a single post."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        poll_service: PollService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
            poll_service: Poll domain service
        """
        self.post_service = post_service
        self.like_service = like_service
        self.poll_service = poll_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
        """
        post = await self.post_service.get_post(PostId(UUID(request.post_id)))
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        return await build_post_item(
            post, self.post_service, self.like_service, self.poll_service, viewer_id
        )
