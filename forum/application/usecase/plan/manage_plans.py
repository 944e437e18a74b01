"""Plan use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import ensure_admin
from forum.domain.model import Plan
from forum.domain.service import BenefitInput, PlanService, UserService
from forum.domain.value import BenefitId, PlanId, UserId


class BenefitItem(BaseModel):
    """Benefit line. ``id`` is omitted for new benefits."""

    id: Optional[str] = None
    description: str


class PlanItem(BaseModel):
    """Plan as returned by the API."""

    id: str
    name: str
    description: Optional[str]
    price_cents: int
    benefits: list[BenefitItem]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_plan(cls, plan: Plan) -> "PlanItem":
        return cls(
            id=str(plan.id),
            name=plan.name,
            description=plan.description,
            price_cents=plan.price_cents,
            benefits=[
                BenefitItem(id=str(b.id), description=b.description)
                for b in plan.benefits
            ],
            created_at=plan.created_at,
            updated_at=plan.updated_at,
        )


class ListPlansResponse(BaseModel):
    """List plans response."""

    plans: list[PlanItem]


class ListPlansUseCase:
    """Use case for listing plans with their benefits."""

    def __init__(self, plan_service: PlanService) -> None:
        self.plan_service = plan_service

    async def execute(self) -> ListPlansResponse:
        plans = await self.plan_service.list_plans()
        return ListPlansResponse(plans=[PlanItem.from_plan(p) for p in plans])


class GetPlanRequest(BaseModel):
    """Get plan request."""

    plan_id: str


class GetPlanUseCase:
    """Use case for reading one plan."""

    def __init__(self, plan_service: PlanService) -> None:
        self.plan_service = plan_service

    async def execute(self, request: GetPlanRequest) -> PlanItem:
        plan = await self.plan_service.get_plan(PlanId(UUID(request.plan_id)))
        return PlanItem.from_plan(plan)


class CreatePlanRequest(BaseModel):
    """Create plan request."""

    actor_id: str  # From authenticated user
    name: str
    description: Optional[str] = None
    price_cents: int = Field(default=0, ge=0)
    benefits: list[str] = Field(default_factory=list)


class CreatePlanUseCase:
    """Use case for an admin creating a plan."""

    def __init__(self, plan_service: PlanService, user_service: UserService) -> None:
        self.plan_service = plan_service
        self.user_service = user_service

    async def execute(self, request: CreatePlanRequest) -> PlanItem:
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, "create_plan")

        plan = await self.plan_service.create_plan(
            name=request.name,
            price_cents=request.price_cents,
            description=request.description,
            benefits=request.benefits,
        )
        return PlanItem.from_plan(plan)


class UpdatePlanRequest(BaseModel):
    """Update plan request.

    ``benefits`` is the full desired list. Entries may be objects with an
    optional id, or plain strings as sent by older clients. Leave it as
    None to keep the current benefits.
    """

    actor_id: str  # From authenticated user
    plan_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    price_cents: Optional[int] = Field(default=None, ge=0)
    benefits: Optional[list[BenefitItem | str]] = None


class UpdatePlanUseCase:
    """Use case for an admin updating a plan and reconciling its benefits."""

    def __init__(self, plan_service: PlanService, user_service: UserService) -> None:
        """Initialize update plan use case.

        Args:
            plan_service: Plan domain service
            user_service: User domain service
        """
        self.plan_service = plan_service
        self.user_service = user_service

    async def execute(self, request: UpdatePlanRequest) -> PlanItem:
        """Execute update plan flow.

        Raises:
            AdminRequiredError: If the actor is not an admin
            NotFoundError: If the plan doesn't exist
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, "update_plan")

        benefits = None
        if request.benefits is not None:
            benefits = [_to_benefit_input(item) for item in request.benefits]

        plan = await self.plan_service.update_plan(
            PlanId(UUID(request.plan_id)),
            name=request.name,
            price_cents=request.price_cents,
            description=request.description,
            benefits=benefits,
        )
        return PlanItem.from_plan(plan)


def _to_benefit_input(item: BenefitItem | str) -> BenefitInput:
    if isinstance(item, str):
        return BenefitInput(description=item)
    return BenefitInput(
        description=item.description,
        id=BenefitId(UUID(item.id)) if item.id else None,
    )


class DeletePlanRequest(BaseModel):
    """Delete plan request."""

    actor_id: str  # From authenticated user
    plan_id: str


class DeletePlanResponse(BaseModel):
    """Delete plan response."""

    success: bool


class DeletePlanUseCase:
    """Use case for an admin deleting a plan."""

    def __init__(self, plan_service: PlanService, user_service: UserService) -> None:
        self.plan_service = plan_service
        self.user_service = user_service

    async def execute(self, request: DeletePlanRequest) -> DeletePlanResponse:
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, "delete_plan")
        await self.plan_service.delete_plan(PlanId(UUID(request.plan_id)))
        return DeletePlanResponse(success=True)


class BuyPlanRequest(BaseModel):
    """Buy plan request."""

    user_id: str  # From authenticated user
    plan_id: str


class BuyPlanResponse(BaseModel):
    """Buy plan response."""

    user_id: str
    plan_id: str


class BuyPlanUseCase:
    """Use case for subscribing the current user to a plan."""

    def __init__(self, plan_service: PlanService) -> None:
        self.plan_service = plan_service

    async def execute(self, request: BuyPlanRequest) -> BuyPlanResponse:
        user = await self.plan_service.buy_plan(
            UserId(UUID(request.user_id)), PlanId(UUID(request.plan_id))
        )
        return BuyPlanResponse(user_id=str(user.id), plan_id=str(user.plan_id))
