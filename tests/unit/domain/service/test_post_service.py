"""Unit tests for PostService."""

import pytest

from forum.domain.error import NotAuthorizedError
from forum.domain.repository import UserRepository
from forum.domain.service import PostService
from forum.domain.value import UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_author_can_update_content(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_service = await unit_env.get(PostService)
        author = await user_repo.save(make_user("author"))
        post = await post_service.create_post(author.id, "First draft")

        # Act
        updated = await post_service.update_post(post.id, author.id, "Final")

        # Assert
        assert updated.content == "Final"
        assert (await post_service.get_post(post.id)).content == "Final"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [UserRole.USER, UserRole.ADMIN])
    async def test_non_author_update_raises_not_authorized(self, unit_env, role):
        """Only the author may change a post, admins included."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_service = await unit_env.get(PostService)
        author = await user_repo.save(make_user("author"))
        other = await user_repo.save(make_user("other", role=role))
        post = await post_service.create_post(author.id, "Original")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, other.id, "Defaced")

        assert (await post_service.get_post(post.id)).content == "Original"
