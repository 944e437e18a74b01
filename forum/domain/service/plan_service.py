"""Subscription plan domain service."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Benefit, Plan, User
from forum.domain.repository import PlanRepository, UserRepository
from forum.domain.value import BenefitId, PlanId, UserId

from .base import Service


@dataclass
class BenefitInput:
    """Requested benefit. ``id`` is None for new (or legacy, text-only) entries."""

    description: str
    id: BenefitId | None = None


@dataclass
class BenefitChanges:
    """Outcome of reconciling a plan's benefits with a requested list."""

    added: list[Benefit] = field(default_factory=list)
    updated: list[Benefit] = field(default_factory=list)
    removed: list[BenefitId] = field(default_factory=list)


def reconcile_benefits(
    plan_id: PlanId,
    existing: Sequence[Benefit],
    requested: Sequence[BenefitInput],
) -> BenefitChanges:
    """Work out which benefits to add, update and remove.

    A requested benefit with an id matches the existing benefit with that
    id. One without an id matches an unclaimed existing benefit with the
    same description. Each existing benefit is matched at most once;
    unmatched requests are added and unmatched existing benefits removed.
    """
    by_id = {b.id: b for b in existing}
    claimed: set[BenefitId] = set()
    changes = BenefitChanges()

    for item in requested:
        target = None
        if item.id is not None:
            target = by_id.get(item.id)
        else:
            target = next(
                (
                    b
                    for b in existing
                    if b.description == item.description and b.id not in claimed
                ),
                None,
            )

        if target is not None and target.id not in claimed:
            claimed.add(target.id)
            if target.description != item.description:
                changes.updated.append(
                    target.model_copy(update={"description": item.description})
                )
        else:
            changes.added.append(
                Benefit(
                    id=BenefitId(uuid4()),
                    plan_id=plan_id,
                    description=item.description,
                )
            )

    changes.removed = [b.id for b in existing if b.id not in claimed]
    return changes


class PlanService(Service):
    """Domain service for plans, their benefits and plan purchases."""

    def __init__(
        self, plan_repository: PlanRepository, user_repository: UserRepository
    ) -> None:
        """Initialize plan service.

        Args:
            plan_repository: Plan repository
            user_repository: User repository (plan purchases)
        """
        self.plan_repository = plan_repository
        self.user_repository = user_repository

    async def list_plans(self) -> list[Plan]:
        return await self.plan_repository.find_all()

    async def get_plan(self, plan_id: PlanId) -> Plan:
        """Get a plan with its benefits.

        Raises:
            NotFoundError: If the plan doesn't exist
        """
        plan = await self.plan_repository.find_by_id(plan_id)
        if not plan:
            raise NotFoundError("Plan", str(plan_id))
        return plan

    async def create_plan(
        self,
        name: str,
        price_cents: int,
        description: str | None = None,
        benefits: Sequence[str] = (),
    ) -> Plan:
        """Create a plan with its benefit lines."""
        with logfire.span("plan_service.create_plan", name=name):
            plan_id = PlanId(uuid4())
            plan = Plan(
                id=plan_id,
                name=name,
                description=description,
                price_cents=price_cents,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            await self.plan_repository.save(plan)
            await self.plan_repository.add_benefits(
                [
                    Benefit(id=BenefitId(uuid4()), plan_id=plan_id, description=text)
                    for text in benefits
                ]
            )
            logfire.info("Plan created", plan_id=str(plan_id), benefits=len(benefits))
            return await self.get_plan(plan_id)

    async def update_plan(
        self,
        plan_id: PlanId,
        name: str | None = None,
        price_cents: int | None = None,
        description: str | None = None,
        benefits: Sequence[BenefitInput] | None = None,
    ) -> Plan:
        """Update a plan and reconcile its benefits.

        Args:
            plan_id: Plan to update
            name: New name, if changing
            price_cents: New price, if changing
            description: New description, if changing
            benefits: Full desired benefit list; None leaves benefits alone

        Returns:
            The updated plan with its benefits

        Raises:
            NotFoundError: If the plan doesn't exist
        """
        with logfire.span("plan_service.update_plan", plan_id=str(plan_id)):
            plan = await self.get_plan(plan_id)

            changes: dict = {"updated_at": datetime.now()}
            if name is not None:
                changes["name"] = name
            if price_cents is not None:
                changes["price_cents"] = price_cents
            if description is not None:
                changes["description"] = description
            await self.plan_repository.save(plan.model_copy(update=changes))

            if benefits is not None:
                diff = reconcile_benefits(plan_id, plan.benefits, benefits)
                if diff.removed:
                    await self.plan_repository.delete_benefits(diff.removed)
                for benefit in diff.updated:
                    await self.plan_repository.update_benefit(benefit)
                if diff.added:
                    await self.plan_repository.add_benefits(diff.added)
                logfire.info(
                    "Plan benefits reconciled",
                    plan_id=str(plan_id),
                    added=len(diff.added),
                    updated=len(diff.updated),
                    removed=len(diff.removed),
                )

            return await self.get_plan(plan_id)

    async def delete_plan(self, plan_id: PlanId) -> None:
        with logfire.span("plan_service.delete_plan", plan_id=str(plan_id)):
            deleted = await self.plan_repository.delete(plan_id)
            if not deleted:
                raise NotFoundError("Plan", str(plan_id))
            logfire.info("Plan deleted", plan_id=str(plan_id))

    async def buy_plan(self, user_id: UserId, plan_id: PlanId) -> User:
        """Subscribe a user to a plan.

        Raises:
            NotFoundError: If the user or plan doesn't exist
        """
        with logfire.span(
            "plan_service.buy_plan", user_id=str(user_id), plan_id=str(plan_id)
        ):
            await self.get_plan(plan_id)
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", str(user_id))
            updated = await self.user_repository.save(
                user.model_copy(update={"plan_id": plan_id, "updated_at": datetime.now()})
            )
            logfire.info("Plan purchased", user_id=str(user_id), plan_id=str(plan_id))
            return updated
