"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import LikeService, PollService, PostService
from forum.domain.value import PostId, UserId

from .get_post import PostItem, build_post_item


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str
    user_id: str  # From authenticated user
    content: str
    poll_options: list[str] | None = None  # Full new option list for polls


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        poll_service: PollService,
    ) -> None:
        self.post_service = post_service
        self.like_service = like_service
        self.poll_service = poll_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        When the poll option set changes, all options (and their votes)
        are replaced.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        user_id = UserId(UUID(request.user_id))
        post = await self.post_service.update_post(
            PostId(UUID(request.post_id)),
            user_id,
            request.content,
            poll_options=request.poll_options,
        )
        return await build_post_item(
            post, self.post_service, self.like_service, self.poll_service, user_id
        )
