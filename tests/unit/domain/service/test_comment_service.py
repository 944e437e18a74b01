"""Unit tests for CommentService."""

import pytest

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.repository import NotificationRepository, UserRepository
from forum.domain.service import CommentService, PostService
from forum.domain.value import NotificationType, UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _post_with_comment(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_service = await unit_env.get(PostService)
    comment_service = await unit_env.get(CommentService)
    post_author = await user_repo.save(make_user("poster"))
    commenter = await user_repo.save(make_user("commenter"))
    post = await post_service.create_post(post_author.id, "Hello forum")
    comment = await comment_service.add_comment(post.id, commenter.id, "Hi!")
    return post_author, commenter, post, comment


class TestAddComment:
    """Tests for add_comment method."""

    @pytest.mark.asyncio
    async def test_post_author_receives_exactly_one_comment_notification(
        self, unit_env
    ):
        """A comment notifies the post author once, linking to the post."""
        # Arrange
        notification_repo = await unit_env.get(NotificationRepository)

        # Act
        post_author, commenter, post, _ = await _post_with_comment(unit_env)

        # Assert
        inbox = await notification_repo.find_by_user(post_author.id)
        assert len(inbox) == 1
        assert inbox[0].type == NotificationType.COMMENT
        assert inbox[0].url == f"/post/{post.id}"
        assert inbox[0].content == "commenter commented on your post"
        assert await notification_repo.find_by_user(commenter.id) == []


class TestEditComment:
    """Tests for edit_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        _, commenter, _, comment = await _post_with_comment(unit_env)

        # Act
        updated = await comment_service.edit_comment(
            comment.id, commenter.id, "Hi again!"
        )

        # Assert
        assert updated.content == "Hi again!"

    @pytest.mark.asyncio
    async def test_non_author_edit_raises_not_authorized(self, unit_env):
        """Even the post author cannot rewrite someone else's comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_author, _, _, comment = await _post_with_comment(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.edit_comment(comment.id, post_author.id, "Edited")

        stored = await comment_service.get_comment(comment.id)
        assert stored.content == "Hi!"

    @pytest.mark.asyncio
    async def test_admin_edit_raises_not_authorized(self, unit_env):
        """Editing is author-only; admins moderate instead."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        comment_service = await unit_env.get(CommentService)
        admin = await user_repo.save(make_user("moderator", role=UserRole.ADMIN))
        _, _, _, comment = await _post_with_comment(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.edit_comment(comment.id, admin.id, "Edited")


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_non_author_delete_raises_not_authorized(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_author, _, _, comment = await _post_with_comment(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, post_author)

        assert (await comment_service.get_comment(comment.id)).id == comment.id

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        """Admins may delete any comment."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        comment_service = await unit_env.get(CommentService)
        admin = await user_repo.save(make_user("moderator", role=UserRole.ADMIN))
        _, _, post, comment = await _post_with_comment(unit_env)

        # Act
        await comment_service.delete_comment(comment.id, admin)

        # Assert
        with pytest.raises(NotFoundError):
            await comment_service.get_comment(comment.id)
        assert await comment_service.list_comments(post.id) == []
