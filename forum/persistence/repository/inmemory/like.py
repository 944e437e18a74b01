"""In-memory like repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from forum.domain.model.like import Like
from forum.domain.repository.like import LikeRepository
from forum.domain.value import LikeId, PostId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        for like in self._likes:
            if like.user_id == user_id and like.post_id == post_id:
                return like
        return None

    async def find_by_post(self, post_id: PostId) -> List[Like]:
        return [like for like in self._likes if like.post_id == post_id]

    async def count_by_post(self, post_id: PostId) -> int:
        return sum(1 for like in self._likes if like.post_id == post_id)

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already liked the post
        """
        if await self.find_by_user_and_post(like.user_id, like.post_id):
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete(self, like_id: LikeId) -> bool:
        for i, like in enumerate(self._likes):
            if like.id == like_id:
                self._likes.pop(i)
                return True
        return False
