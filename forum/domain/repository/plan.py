"""Plan repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from forum.domain.model.plan import Benefit, Plan
from forum.domain.value import BenefitId, PlanId


class PlanRepository(ABC):
    """Repository for Plan aggregate and its benefits.

    Plans are always returned with their benefits loaded.
    """

    @abstractmethod
    async def find_by_id(self, plan_id: PlanId) -> Optional[Plan]:
        """Find a plan by ID.

        Args:
            plan_id: The plan's unique identifier

        Returns:
            The plan (with benefits) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Plan]:
        """List all plans ordered by price."""
        pass

    @abstractmethod
    async def save(self, plan: Plan) -> Plan:
        """Save a plan row (create or update).

        Benefits are not touched; use the benefit operations below.

        Args:
            plan: The plan to save

        Returns:
            The saved plan
        """
        pass

    @abstractmethod
    async def delete(self, plan_id: PlanId) -> bool:
        """Delete a plan and its benefits.

        Returns:
            True if a plan was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def add_benefits(self, benefits: Sequence[Benefit]) -> None:
        """Create benefit rows."""
        pass

    @abstractmethod
    async def update_benefit(self, benefit: Benefit) -> None:
        """Update a benefit's description."""
        pass

    @abstractmethod
    async def delete_benefits(self, benefit_ids: Sequence[BenefitId]) -> int:
        """Delete benefit rows.

        Returns:
            Number of benefits deleted
        """
        pass
