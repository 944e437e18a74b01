"""Unit tests for PointsService."""

import pytest

from forum.domain.error import ValidationError
from forum.domain.repository import UserRepository
from forum.domain.service import CommentService, PointsService, PostService
from forum.domain.value import POINT_RULES, PointType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAward:
    """Tests for award method."""

    @pytest.mark.asyncio
    async def test_award_appends_fixed_rule(self, unit_env):
        """Each event type has a fixed delta and description."""
        # Arrange
        points_service = await unit_env.get(PointsService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        # Act
        entry = await points_service.award(user.id, PointType.COMMENT)

        # Assert
        assert entry.points == 5
        assert entry.description == "Added a comment"
        assert entry.type == PointType.COMMENT

    @pytest.mark.asyncio
    async def test_award_adjustment_without_rule_raises_validation_error(
        self, unit_env
    ):
        """Adjustments carry their own delta and go through adjust()."""
        # Arrange
        points_service = await unit_env.get(PointsService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        # Act & Assert
        with pytest.raises(ValidationError):
            await points_service.award(user.id, PointType.ADJUSTMENT)

    def test_reversal_rules_mirror_like_grants(self):
        """Removing a like must undo exactly what the like granted."""
        assert (
            POINT_RULES[PointType.REMOVE_UPVOTE].points
            == -POINT_RULES[PointType.UPVOTE].points
        )
        assert (
            POINT_RULES[PointType.REMOVE_RECEIVED_UPVOTE].points
            == -POINT_RULES[PointType.RECEIVE_UPVOTE].points
        )


class TestLedgerTotals:
    """Totals are always the sum of the ledger."""

    @pytest.mark.asyncio
    async def test_total_equals_sum_of_history(self, unit_env):
        """Posting and commenting should add up in the ledger."""
        # Arrange
        points_service = await unit_env.get(PointsService)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("author"))
        commenter = await user_repo.save(make_user("commenter"))

        # Act
        post = await post_service.create_post(author.id, "First post")
        await comment_service.add_comment(post.id, commenter.id, "Nice one")
        await points_service.adjust(author.id, -4, "Spam cleanup")

        # Assert
        author_history = await points_service.get_history(author.id)
        assert await points_service.get_total(author.id) == sum(
            e.points for e in author_history
        )
        assert await points_service.get_total(author.id) == 10 + 3 - 4
        assert await points_service.get_total(commenter.id) == 5

    @pytest.mark.asyncio
    async def test_adjust_zero_raises_validation_error(self, unit_env):
        """A zero adjustment is meaningless."""
        # Arrange
        points_service = await unit_env.get(PointsService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        # Act & Assert
        with pytest.raises(ValidationError):
            await points_service.adjust(user.id, 0, "Nothing")

    @pytest.mark.asyncio
    async def test_get_totals_defaults_unknown_users_to_zero(self, unit_env):
        """Users without entries have a total of zero."""
        # Arrange
        points_service = await unit_env.get(PointsService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        await points_service.award(alice.id, PointType.UPVOTE)

        # Act
        totals = await points_service.get_totals([alice.id, bob.id])

        # Assert
        assert totals.get(alice.id, 0) == 2
        assert totals.get(bob.id, 0) == 0
