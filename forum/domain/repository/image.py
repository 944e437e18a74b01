"""Image repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.image import Image
from forum.domain.value import PostId


class ImageRepository(ABC):
    """Repository for images attached to posts (0 or 1 per post)."""

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> Optional[Image]:
        """Find the image attached to a post.

        Args:
            post_id: The post's ID

        Returns:
            The image if the post has one, None otherwise
        """
        pass

    @abstractmethod
    async def save_for_post(self, image: Image, post_id: PostId) -> Image:
        """Store an image row and link it to a post.

        Args:
            image: Image to store
            post_id: Post to attach it to

        Returns:
            The saved image

        Raises:
            IntegrityError: If the post already has an image
        """
        pass

    @abstractmethod
    async def delete_for_post(self, post_id: PostId) -> Optional[Image]:
        """Delete a post's image link and image row.

        Args:
            post_id: The post's ID

        Returns:
            The deleted image, or None if the post had none
        """
        pass
