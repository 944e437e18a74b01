"""Plan routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.plan import (
    BenefitItem,
    BuyPlanRequest,
    BuyPlanResponse,
    BuyPlanUseCase,
    CreatePlanRequest,
    CreatePlanUseCase,
    DeletePlanRequest,
    DeletePlanResponse,
    DeletePlanUseCase,
    GetPlanRequest,
    GetPlanUseCase,
    ListPlansResponse,
    ListPlansUseCase,
    PlanItem,
    UpdatePlanRequest,
    UpdatePlanUseCase,
)
from forum.interface.api.auth import authenticate
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/plans", tags=["plans"], route_class=DishkaRoute)


class CreatePlanAPIRequest(BaseModel):
    """API request for creating a plan."""

    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)
    price_cents: int = Field(default=0, ge=0)
    benefits: list[str] = Field(default_factory=list)


class UpdatePlanAPIRequest(BaseModel):
    """API request for updating a plan.

    ``benefits`` entries may be ``{"id": ..., "description": ...}`` objects
    or plain strings.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)
    price_cents: int | None = Field(default=None, ge=0)
    benefits: list[BenefitItem | str] | None = None


@router.get("", response_model=ListPlansResponse)
async def list_plans(list_plans_use_case: FromDishka[ListPlansUseCase]) -> ListPlansResponse:
    """List plans with their benefits."""
    try:
        return await list_plans_use_case.execute()
    except Exception as e:
        raise to_http_exception(e, "list plans")


@router.get("/{plan_id}", response_model=PlanItem)
async def get_plan(
    plan_id: UUID, get_plan_use_case: FromDishka[GetPlanUseCase]
) -> PlanItem:
    """Get a plan."""
    try:
        return await get_plan_use_case.execute(GetPlanRequest(plan_id=str(plan_id)))
    except Exception as e:
        raise to_http_exception(e, "get plan")


@router.post("", response_model=PlanItem, status_code=status.HTTP_201_CREATED)
async def create_plan(
    request: CreatePlanAPIRequest,
    create_plan_use_case: FromDishka[CreatePlanUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PlanItem:
    """Create a plan (admin only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await create_plan_use_case.execute(
            CreatePlanRequest(actor_id=user.user_id, **request.model_dump())
        )
    except Exception as e:
        raise to_http_exception(e, "create plan")


@router.patch("/{plan_id}", response_model=PlanItem)
async def update_plan(
    plan_id: UUID,
    request: UpdatePlanAPIRequest,
    update_plan_use_case: FromDishka[UpdatePlanUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PlanItem:
    """Update a plan and reconcile its benefits (admin only).

    Args:
        plan_id: Plan UUID
        request: Fields to change and the full desired benefit list
        update_plan_use_case: Update plan use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Updated plan with its benefits
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await update_plan_use_case.execute(
            UpdatePlanRequest(
                actor_id=user.user_id,
                plan_id=str(plan_id),
                name=request.name,
                description=request.description,
                price_cents=request.price_cents,
                benefits=request.benefits,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update plan")


@router.delete("/{plan_id}", response_model=DeletePlanResponse)
async def delete_plan(
    plan_id: UUID,
    delete_plan_use_case: FromDishka[DeletePlanUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeletePlanResponse:
    """Delete a plan (admin only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await delete_plan_use_case.execute(
            DeletePlanRequest(actor_id=user.user_id, plan_id=str(plan_id))
        )
    except Exception as e:
        raise to_http_exception(e, "delete plan")


@router.post("/{plan_id}/buy", response_model=BuyPlanResponse)
async def buy_plan(
    plan_id: UUID,
    buy_plan_use_case: FromDishka[BuyPlanUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> BuyPlanResponse:
    """Subscribe the current user to a plan."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await buy_plan_use_case.execute(
            BuyPlanRequest(user_id=user.user_id, plan_id=str(plan_id))
        )
    except Exception as e:
        raise to_http_exception(e, "buy plan")
