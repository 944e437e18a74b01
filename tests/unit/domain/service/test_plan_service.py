"""Unit tests for PlanService and benefit reconciliation."""

from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError
from forum.domain.model import Benefit
from forum.domain.repository import UserRepository
from forum.domain.service import BenefitInput, PlanService
from forum.domain.service.plan_service import reconcile_benefits
from forum.domain.value import BenefitId, PlanId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _benefit(plan_id: PlanId, description: str) -> Benefit:
    return Benefit(id=BenefitId(uuid4()), plan_id=plan_id, description=description)


class TestReconcileBenefits:
    """Tests for reconcile_benefits."""

    def test_matches_by_id_and_updates_changed_description(self):
        """A request with an id updates that benefit in place."""
        plan_id = PlanId(uuid4())
        ads = _benefit(plan_id, "No ads")

        changes = reconcile_benefits(
            plan_id, [ads], [BenefitInput(id=ads.id, description="No ads, ever")]
        )

        assert changes.added == []
        assert changes.removed == []
        assert [(b.id, b.description) for b in changes.updated] == [
            (ads.id, "No ads, ever")
        ]

    def test_matches_text_only_requests_by_description(self):
        """Plain descriptions keep the existing benefit with the same text."""
        plan_id = PlanId(uuid4())
        ads = _benefit(plan_id, "No ads")
        badge = _benefit(plan_id, "Badge")

        changes = reconcile_benefits(
            plan_id,
            [ads, badge],
            [BenefitInput(description="No ads"), BenefitInput(description="Themes")],
        )

        assert changes.updated == []
        assert [b.description for b in changes.added] == ["Themes"]
        assert changes.removed == [badge.id]

    def test_each_existing_benefit_matches_once(self):
        """Duplicate descriptions in the request create a new benefit."""
        plan_id = PlanId(uuid4())
        ads = _benefit(plan_id, "No ads")

        changes = reconcile_benefits(
            plan_id,
            [ads],
            [BenefitInput(description="No ads"), BenefitInput(description="No ads")],
        )

        assert len(changes.added) == 1
        assert changes.removed == []

    def test_unknown_id_is_added(self):
        """An id that doesn't belong to the plan is treated as new."""
        plan_id = PlanId(uuid4())

        changes = reconcile_benefits(
            plan_id, [], [BenefitInput(id=BenefitId(uuid4()), description="Extra")]
        )

        assert [b.description for b in changes.added] == ["Extra"]
        assert changes.added[0].plan_id == plan_id


class TestUpdatePlan:
    """Tests for update_plan method."""

    @pytest.mark.asyncio
    async def test_update_plan_reconciles_benefits(self, unit_env):
        """The stored benefits should equal the requested list afterwards."""
        # Arrange
        plan_service = await unit_env.get(PlanService)
        plan = await plan_service.create_plan(
            "Pro", 500, benefits=["No ads", "Badge", "Themes"]
        )
        by_text = {b.description: b for b in plan.benefits}

        # Act
        updated = await plan_service.update_plan(
            plan.id,
            price_cents=700,
            benefits=[
                BenefitInput(id=by_text["No ads"].id, description="No ads at all"),
                BenefitInput(description="Themes"),
                BenefitInput(description="Priority support"),
            ],
        )

        # Assert
        assert updated.price_cents == 700
        assert updated.name == "Pro"
        assert sorted(b.description for b in updated.benefits) == [
            "No ads at all",
            "Priority support",
            "Themes",
        ]
        kept_ids = {b.id for b in updated.benefits}
        assert by_text["No ads"].id in kept_ids
        assert by_text["Themes"].id in kept_ids
        assert by_text["Badge"].id not in kept_ids

    @pytest.mark.asyncio
    async def test_update_plan_without_benefits_keeps_them(self, unit_env):
        """Leaving benefits out doesn't touch them."""
        # Arrange
        plan_service = await unit_env.get(PlanService)
        plan = await plan_service.create_plan("Basic", 0, benefits=["Forum access"])

        # Act
        updated = await plan_service.update_plan(plan.id, description="Free tier")

        # Assert
        assert updated.description == "Free tier"
        assert [b.description for b in updated.benefits] == ["Forum access"]

    @pytest.mark.asyncio
    async def test_update_missing_plan_raises_not_found(self, unit_env):
        """Unknown plans cannot be updated."""
        # Arrange
        plan_service = await unit_env.get(PlanService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await plan_service.update_plan(PlanId(uuid4()), name="Ghost")


class TestBuyPlan:
    """Tests for buy_plan method."""

    @pytest.mark.asyncio
    async def test_buy_plan_sets_user_plan(self, unit_env):
        """Buying records the plan on the user."""
        # Arrange
        plan_service = await unit_env.get(PlanService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("buyer"))
        plan = await plan_service.create_plan("Pro", 500)

        # Act
        updated = await plan_service.buy_plan(user.id, plan.id)

        # Assert
        assert updated.plan_id == plan.id
        assert (await user_repo.find_by_id(user.id)).plan_id == plan.id
