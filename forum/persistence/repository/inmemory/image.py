"""In-memory image repository for testing."""

from typing import Optional

from forum.domain.model.image import Image
from forum.domain.repository.image import ImageRepository
from forum.domain.value import PostId


class InMemoryImageRepository(ImageRepository):
    """In-memory implementation of ImageRepository for testing."""

    def __init__(self) -> None:
        self._by_post: dict[PostId, Image] = {}

    async def find_by_post(self, post_id: PostId) -> Optional[Image]:
        return self._by_post.get(post_id)

    async def save_for_post(self, image: Image, post_id: PostId) -> Image:
        self._by_post[post_id] = image
        return image

    async def delete_for_post(self, post_id: PostId) -> Optional[Image]:
        return self._by_post.pop(post_id, None)
