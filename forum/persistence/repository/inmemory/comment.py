"""In-memory comment repository for testing."""

from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, ContentStatus, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self, post_id: PostId, include_hidden: bool = False
    ) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id
            and (
                c.status.is_visible
                or (include_hidden and c.status == ContentStatus.HIDDEN)
            )
        ]
        return sorted(comments, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        return self._comments.pop(comment_id, None) is not None
