"""Like routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.like import (
    DislikePostResponse,
    DislikePostUseCase,
    GetPostLikesRequest,
    GetPostLikesResponse,
    GetPostLikesUseCase,
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
)
from forum.interface.api.auth import authenticate
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["likes"], route_class=DishkaRoute)


@router.post(
    "/{post_id}/like",
    response_model=LikePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_post(
    post_id: UUID,
    like_post_use_case: FromDishka[LikePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> LikePostResponse:
    """Like a post.

    The liker and the post author both earn points and the author is
    notified.

    Args:
        post_id: Post UUID
        like_post_use_case: Like post use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        The created like

    Raises:
        HTTPException: 409 if the user already likes the post
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await like_post_use_case.execute(
            LikePostRequest(post_id=str(post_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "like post")


@router.delete("/{post_id}/like", response_model=DislikePostResponse)
async def dislike_post(
    post_id: UUID,
    dislike_post_use_case: FromDishka[DislikePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DislikePostResponse:
    """Remove the current user's like, reversing the points it granted."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await dislike_post_use_case.execute(
            LikePostRequest(post_id=str(post_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "remove like")


@router.get("/{post_id}/likes", response_model=GetPostLikesResponse)
async def get_post_likes(
    post_id: UUID,
    get_post_likes_use_case: FromDishka[GetPostLikesUseCase],
) -> GetPostLikesResponse:
    """List the likes of a post."""
    try:
        return await get_post_likes_use_case.execute(
            GetPostLikesRequest(post_id=str(post_id))
        )
    except Exception as e:
        raise to_http_exception(e, "get post likes")
