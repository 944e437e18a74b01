"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from forum.interface.api.auth import authenticate, authenticate_optional
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.post(
    "/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a post.

    Requires authentication. The commenter and the post author earn points
    and the author is notified.

    Args:
        post_id: Post UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        HTTPException: If not authenticated or the post doesn't exist
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id),
                content=request.content,
                author_id=user.user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create comment")


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    include_hidden: bool = Query(default=False),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """List a post's comments, oldest first.

    Hidden comments are listed only for admins asking for them.
    """
    user = await authenticate_optional(auth_token, get_current_user_use_case)

    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                post_id=str(post_id),
                include_hidden=include_hidden and user is not None and user.is_admin,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "get comments")


@router.patch("/{post_id}/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    post_id: UUID,
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit a comment (author only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment_id),
                content=request.content,
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update comment")


@router.delete("/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment (author or admin)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete comment")
