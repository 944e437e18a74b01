"""Plan use cases."""

from .manage_plans import (
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

__all__ = [
    "BenefitItem",
    "BuyPlanRequest",
    "BuyPlanResponse",
    "BuyPlanUseCase",
    "CreatePlanRequest",
    "CreatePlanUseCase",
    "DeletePlanRequest",
    "DeletePlanResponse",
    "DeletePlanUseCase",
    "GetPlanRequest",
    "GetPlanUseCase",
    "ListPlansResponse",
    "ListPlansUseCase",
    "PlanItem",
    "UpdatePlanRequest",
    "UpdatePlanUseCase",
]
