"""In-memory plan repository for testing."""

from typing import List, Optional, Sequence

from forum.domain.model.plan import Benefit, Plan
from forum.domain.repository.plan import PlanRepository
from forum.domain.value import BenefitId, PlanId


class InMemoryPlanRepository(PlanRepository):
    """In-memory implementation of PlanRepository for testing.

    Plans and benefits are kept apart, as in the database; ``find_*``
    assembles them.
    """

    def __init__(self) -> None:
        self._plans: dict[PlanId, Plan] = {}
        self._benefits: dict[BenefitId, Benefit] = {}

    def _with_benefits(self, plan: Plan) -> Plan:
        benefits = [b for b in self._benefits.values() if b.plan_id == plan.id]
        return plan.model_copy(update={"benefits": benefits})

    async def find_by_id(self, plan_id: PlanId) -> Optional[Plan]:
        plan = self._plans.get(plan_id)
        return self._with_benefits(plan) if plan else None

    async def find_all(self) -> List[Plan]:
        plans = sorted(self._plans.values(), key=lambda p: (p.price_cents, p.name))
        return [self._with_benefits(p) for p in plans]

    async def save(self, plan: Plan) -> Plan:
        self._plans[plan.id] = plan.model_copy(update={"benefits": []})
        return plan

    async def delete(self, plan_id: PlanId) -> bool:
        if self._plans.pop(plan_id, None) is None:
            return False
        self._benefits = {
            k: b for k, b in self._benefits.items() if b.plan_id != plan_id
        }
        return True

    async def add_benefits(self, benefits: Sequence[Benefit]) -> None:
        for benefit in benefits:
            self._benefits[benefit.id] = benefit

    async def update_benefit(self, benefit: Benefit) -> None:
        if benefit.id in self._benefits:
            self._benefits[benefit.id] = benefit

    async def delete_benefits(self, benefit_ids: Sequence[BenefitId]) -> int:
        deleted = 0
        for benefit_id in benefit_ids:
            if self._benefits.pop(benefit_id, None) is not None:
                deleted += 1
        return deleted
