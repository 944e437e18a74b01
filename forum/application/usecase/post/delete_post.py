"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PostService, UserService
from forum.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # From authenticated user


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool


class DeletePostUseCase:
    """Use case for deleting a post (author or admin)."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is neither author nor admin
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.post_service.delete_post(PostId(UUID(request.post_id)), user)
        return DeletePostResponse(success=True)
