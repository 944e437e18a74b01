"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.repository import NotificationRepository, UserRepository
from forum.domain.service import LikeService, PointsService, PostService
from forum.domain.value import NotificationType, PostId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _author_liker_and_post(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_service = await unit_env.get(PostService)
    author = await user_repo.save(make_user("author"))
    liker = await user_repo.save(make_user("liker"))
    post = await post_service.create_post(author.id, "Hello forum")
    return author, liker, post


class TestLikePost:
    """Tests for like_post method."""

    @pytest.mark.asyncio
    async def test_like_credits_liker_and_author(self, unit_env):
        """Liking should give the liker +2 and the author +1."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        points_service = await unit_env.get(PointsService)
        author, liker, post = await _author_liker_and_post(unit_env)
        author_before = await points_service.get_total(author.id)

        # Act
        await like_service.like_post(liker.id, post.id)

        # Assert
        assert await points_service.get_total(liker.id) == 2
        assert await points_service.get_total(author.id) == author_before + 1

    @pytest.mark.asyncio
    async def test_like_notifies_author(self, unit_env):
        """The author should get a like notification pointing at the post."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        notification_repo = await unit_env.get(NotificationRepository)
        author, liker, post = await _author_liker_and_post(unit_env)

        # Act
        await like_service.like_post(liker.id, post.id)

        # Assert
        inbox = await notification_repo.find_by_user(author.id)
        assert len(inbox) == 1
        assert inbox[0].type == NotificationType.LIKE_POST
        assert inbox[0].url == f"/post/{post.id}"
        assert inbox[0].content == "liker liked your post"

    @pytest.mark.asyncio
    async def test_second_like_raises_conflict_without_side_effects(self, unit_env):
        """A duplicate like must not add ledger entries."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        points_service = await unit_env.get(PointsService)
        _, liker, post = await _author_liker_and_post(unit_env)
        await like_service.like_post(liker.id, post.id)
        history_before = await points_service.get_history(liker.id)

        # Act & Assert
        with pytest.raises(ConflictError):
            await like_service.like_post(liker.id, post.id)

        assert await points_service.get_history(liker.id) == history_before
        assert len(await like_service.list_likes(post.id)) == 1

    @pytest.mark.asyncio
    async def test_like_missing_post_raises_not_found(self, unit_env):
        """Liking a post that doesn't exist fails."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        _, liker, _ = await _author_liker_and_post(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await like_service.like_post(liker.id, PostId(uuid4()))


class TestDislikePost:
    """Tests for dislike_post method."""

    @pytest.mark.asyncio
    async def test_like_then_dislike_restores_totals(self, unit_env):
        """Unliking should append reversals that bring both totals back."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        points_service = await unit_env.get(PointsService)
        author, liker, post = await _author_liker_and_post(unit_env)
        author_before = await points_service.get_total(author.id)
        liker_before = await points_service.get_total(liker.id)

        # Act
        await like_service.like_post(liker.id, post.id)
        await like_service.dislike_post(liker.id, post.id)

        # Assert
        assert await points_service.get_total(author.id) == author_before
        assert await points_service.get_total(liker.id) == liker_before
        assert not await like_service.has_liked(liker.id, post.id)
        # Ledger keeps both the grants and the reversals
        assert len(await points_service.get_history(liker.id)) == 2

    @pytest.mark.asyncio
    async def test_dislike_without_like_raises_not_found(self, unit_env):
        """Removing a like that doesn't exist fails and changes nothing."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        points_service = await unit_env.get(PointsService)
        _, liker, post = await _author_liker_and_post(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await like_service.dislike_post(liker.id, post.id)

        assert await points_service.get_history(liker.id) == []
