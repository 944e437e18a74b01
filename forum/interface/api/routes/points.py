"""Point routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.point import (
    AwardPointsRequest,
    AwardPointsResponse,
    AwardPointsUseCase,
    GetPointsRequest,
    GetPointsResponse,
    GetPointsUseCase,
)
from forum.interface.api.auth import authenticate
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/points", tags=["points"], route_class=DishkaRoute)


class AwardPointsAPIRequest(BaseModel):
    """API request for a manual point adjustment."""

    user_id: UUID
    points: int
    description: str = Field(min_length=1, max_length=255)


@router.get("/me", response_model=GetPointsResponse)
async def get_my_points(
    get_points_use_case: FromDishka[GetPointsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetPointsResponse:
    """Get the current user's point total."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await get_points_use_case.execute(GetPointsRequest(user_id=user.user_id))
    except Exception as e:
        raise to_http_exception(e, "get points")


@router.post(
    "/award", response_model=AwardPointsResponse, status_code=status.HTTP_201_CREATED
)
async def award_points(
    request: AwardPointsAPIRequest,
    award_points_use_case: FromDishka[AwardPointsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AwardPointsResponse:
    """Append a manual adjustment to a user's ledger (admin only).

    ``points`` may be negative but not zero.
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await award_points_use_case.execute(
            AwardPointsRequest(
                actor_id=user.user_id,
                user_id=str(request.user_id),
                points=request.points,
                description=request.description,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "award points")
