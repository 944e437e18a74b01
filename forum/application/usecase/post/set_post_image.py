"""Set post image use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.adapter.error import StorageError
from forum.adapter.storage import ObjectStorageClient
from forum.domain.error import NotAuthorizedError
from forum.domain.service import PostService
from forum.domain.value import PostId, UserId


class SetPostImageRequest(BaseModel):
    """Set post image request."""

    post_id: str
    user_id: str  # From authenticated user
    data: bytes
    filename: str | None = None
    content_type: str | None = None


class SetPostImageResponse(BaseModel):
    """Set post image response."""

    post_id: str
    image_id: str
    url: str
    replaced: bool


class SetPostImageUseCase:
    """Use case for uploading or replacing the image of a post."""

    def __init__(
        self, post_service: PostService, storage_client: ObjectStorageClient
    ) -> None:
        """Initialize set post image use case.

        Args:
            post_service: Post domain service
            storage_client: Object storage client for the image bytes
        """
        self.post_service = post_service
        self.storage_client = storage_client

    async def execute(self, request: SetPostImageRequest) -> SetPostImageResponse:
        """Execute set image flow.

        Steps:
        1. Check the post exists and the user is its author
        2. Upload the bytes to object storage
        3. Replace the post's Image and PostImage rows
        4. Delete the previous object from storage

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
            StorageError: If the upload fails
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("set_post_image.execute", post_id=request.post_id):
            post = await self.post_service.get_post(post_id)
            if post.author_id != user_id:
                raise NotAuthorizedError("post", request.post_id, request.user_id)

            stored = await self.storage_client.upload(
                request.data, request.filename, request.content_type
            )
            try:
                image, previous = await self.post_service.replace_image(
                    post_id, user_id, stored.url, stored.key
                )
            except Exception:
                await self.storage_client.delete(stored.key)
                raise

            if previous is not None:
                try:
                    await self.storage_client.delete(previous.storage_key)
                except StorageError as e:
                    # Rows already point at the new image; the old object is orphaned
                    logfire.warn(
                        "Failed to delete replaced image object",
                        key=previous.storage_key,
                        error=str(e),
                    )

        return SetPostImageResponse(
            post_id=request.post_id,
            image_id=str(image.id),
            url=image.url,
            replaced=previous is not None,
        )
