"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetUserPointsRequest,
    GetUserPointsResponse,
    GetUserPointsUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListEnrolledUsersRequest,
    ListEnrolledUsersResponse,
    ListEnrolledUsersUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    SetUserFlagsRequest,
    SetUserFlagsUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
    UserProfile,
)
from forum.interface.api.auth import authenticate
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current user's profile."""

    username: str | None = Field(default=None, min_length=1, max_length=50)
    email: str | None = None
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    profile_picture: str | None = None


class SetUserFlagsAPIRequest(BaseModel):
    """API request for changing a user's enrollment or ban flag."""

    is_enrolled: bool | None = None
    is_banned: bool | None = None


@router.get("/me", response_model=UserProfile)
async def get_my_profile(
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserProfile:
    """Get the current user's profile."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get profile")


@router.patch("/me", response_model=UserProfile)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserProfile:
    """Update the current user's profile.

    Args:
        request: Fields to change; omitted fields are kept
        update_user_profile_use_case: Update profile use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Updated profile

    Raises:
        HTTPException: 401 if not authenticated, 409 if the username is taken
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                user_id=user.user_id,
                **request.model_dump(exclude_unset=True),
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update profile")


@router.delete("/me", response_model=DeleteUserResponse)
async def delete_my_account(
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteUserResponse:
    """Delete the current user and everything they own."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await delete_user_use_case.execute(
            DeleteUserRequest(user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete account")


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListUsersResponse:
    """List users with friend and point totals (admin only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await list_users_use_case.execute(
            ListUsersRequest(actor_id=user.user_id, limit=limit, offset=offset)
        )
    except Exception as e:
        raise to_http_exception(e, "list users")


@router.get("/enrolled", response_model=ListEnrolledUsersResponse)
async def list_enrolled_users(
    list_enrolled_users_use_case: FromDishka[ListEnrolledUsersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ListEnrolledUsersResponse:
    """List enrolled users with their solved question counts (admin only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await list_enrolled_users_use_case.execute(
            ListEnrolledUsersRequest(actor_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "list enrolled users")


@router.get("/{user_id}", response_model=UserProfile)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfile:
    """Get a user's public profile.

    Args:
        user_id: User UUID
        get_user_profile_use_case: Get profile use case from DI

    Returns:
        Profile with the derived point total

    Raises:
        HTTPException: 404 if the user doesn't exist
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=str(user_id))
        )
    except Exception as e:
        raise to_http_exception(e, "get user profile")


@router.get("/{user_id}/points", response_model=GetUserPointsResponse)
async def get_user_points(
    user_id: UUID,
    get_user_points_use_case: FromDishka[GetUserPointsUseCase],
) -> GetUserPointsResponse:
    """Get a user's point total and ledger history."""
    try:
        return await get_user_points_use_case.execute(
            GetUserPointsRequest(user_id=str(user_id))
        )
    except Exception as e:
        raise to_http_exception(e, "get user points")


@router.patch("/{user_id}/flags", response_model=UserProfile)
async def set_user_flags(
    user_id: UUID,
    request: SetUserFlagsAPIRequest,
    set_user_flags_use_case: FromDishka[SetUserFlagsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserProfile:
    """Enroll/unenroll or ban/unban a user (admin only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await set_user_flags_use_case.execute(
            SetUserFlagsRequest(
                actor_id=user.user_id,
                user_id=str(user_id),
                is_enrolled=request.is_enrolled,
                is_banned=request.is_banned,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "set user flags")
