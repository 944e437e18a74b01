"""Subscription plan and its benefits."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import BenefitId, PlanId


class Benefit(DomainModel):
    """A single benefit line of a plan."""

    id: BenefitId
    plan_id: PlanId
    description: str = Field(min_length=1, max_length=500)


class Plan(DomainModel):
    """Subscription plan aggregate root. Owns its benefits."""

    id: PlanId
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=2000)
    price_cents: int = Field(default=0, ge=0)
    benefits: list[Benefit] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
