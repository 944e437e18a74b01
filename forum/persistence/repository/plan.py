"""PostgreSQL implementation of Plan repository."""

from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Benefit, Plan
from forum.domain.repository import PlanRepository
from forum.domain.value import BenefitId, PlanId
from forum.persistence.mappers import benefit_to_dict, plan_to_dict, row_to_plan
from forum.persistence.tables import benefits_table, plans_table


class PostgresPlanRepository(PlanRepository):
    """PostgreSQL implementation of PlanRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_benefits_for_plans(
        self, plan_ids: list[UUID]
    ) -> dict[UUID, list[Dict[str, Any]]]:
        """Fetch benefit rows for multiple plans in a single query.

        Args:
            plan_ids: List of plan IDs

        Returns:
            Dict mapping plan_id -> list of benefit rows
        """
        if not plan_ids:
            return {}

        stmt = (
            select(benefits_table)
            .where(benefits_table.c.plan_id.in_(plan_ids))
            .order_by(benefits_table.c.description)
        )
        result = await self.session.execute(stmt)

        benefit_map: dict[UUID, list[Dict[str, Any]]] = defaultdict(list)
        for row in result.fetchall():
            benefit_map[row.plan_id].append(row._asdict())
        return benefit_map

    async def find_by_id(self, plan_id: PlanId) -> Optional[Plan]:
        stmt = select(plans_table).where(plans_table.c.id == plan_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        benefits = await self._fetch_benefits_for_plans([plan_id])
        return row_to_plan(row._asdict(), benefits.get(plan_id, []))

    async def find_all(self) -> List[Plan]:
        """All plans, cheapest first, with their benefits."""
        stmt = select(plans_table).order_by(plans_table.c.price_cents, plans_table.c.name)
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]

        benefits = await self._fetch_benefits_for_plans([row["id"] for row in rows])
        return [row_to_plan(row, benefits.get(row["id"], [])) for row in rows]

    async def save(self, plan: Plan) -> Plan:
        """Save the plan row (create or update); benefits are managed separately."""
        plan_dict = plan_to_dict(plan)
        existing = await self.session.execute(
            select(plans_table.c.id).where(plans_table.c.id == plan.id)
        )

        if existing.first():
            stmt = (
                update(plans_table)
                .where(plans_table.c.id == plan.id)
                .values(**plan_dict)
            )
        else:
            stmt = insert(plans_table).values(**plan_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return plan

    async def delete(self, plan_id: PlanId) -> bool:
        stmt = delete(plans_table).where(plans_table.c.id == plan_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_benefits(self, benefits: Sequence[Benefit]) -> None:
        if not benefits:
            return

        stmt = insert(benefits_table).values([benefit_to_dict(b) for b in benefits])
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_benefit(self, benefit: Benefit) -> None:
        stmt = (
            update(benefits_table)
            .where(benefits_table.c.id == benefit.id)
            .values(description=benefit.description)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_benefits(self, benefit_ids: Sequence[BenefitId]) -> int:
        if not benefit_ids:
            return 0

        stmt = delete(benefits_table).where(benefits_table.c.id.in_(benefit_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
