"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.like import Like
from forum.domain.value import LikeId, PostId, UserId


class LikeRepository(ABC):
    """Repository for Like entity."""

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        """Find a user's like on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Like]:
        """List likes on a post, oldest first."""
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes the post (duplicate)
        """
        pass

    @abstractmethod
    async def delete(self, like_id: LikeId) -> bool:
        """Delete a like.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass
