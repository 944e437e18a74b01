"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, Query, UploadFile, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
    SetPostImageRequest,
    SetPostImageResponse,
    SetPostImageUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from forum.domain.value import PostType
from forum.interface.api.auth import authenticate, authenticate_optional
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str = Field(default="", max_length=10000)
    type: PostType = PostType.TEXT
    poll_options: list[str] = Field(default_factory=list, max_length=20)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post.

    ``poll_options`` is the full new option list for a poll; leave it out
    to keep the current options.
    """

    content: str = Field(max_length=10000)
    poll_options: list[str] | None = Field(default=None, max_length=20)


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PostItem:
    """Create a new post.

    Requires authentication. A POLL post with options gets one option row
    per entry. The author earns the post creation points.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created post

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user.user_id,
                content=request.content,
                type=request.type,
                poll_options=request.poll_options,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create post")


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    author_id: UUID | None = Query(default=None),
    include_hidden: bool = Query(default=False),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts, newest first.

    Deleted posts are never listed. Hidden posts are listed only for admins
    asking for them with ``include_hidden``.
    """
    user = await authenticate_optional(auth_token, get_current_user_use_case)

    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                limit=limit,
                offset=offset,
                author_id=str(author_id) if author_id else None,
                viewer_id=user.user_id if user else None,
                include_hidden=include_hidden and user is not None and user.is_admin,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list posts")


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PostItem:
    """Get a post by ID.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Post with like count, image and poll tallies

    Raises:
        HTTPException: If post not found
    """
    user = await authenticate_optional(auth_token, get_current_user_use_case)

    try:
        return await get_post_use_case.execute(
            GetPostRequest(
                post_id=str(post_id), viewer_id=user.user_id if user else None
            )
        )
    except Exception as e:
        raise to_http_exception(e, "get post")


@router.patch("/{post_id}", response_model=PostItem)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PostItem:
    """Update a post's content and, for polls, its options.

    Only the post author can edit.
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                user_id=user.user_id,
                content=request.content,
                poll_options=request.poll_options,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update post")


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post (author or admin)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete post")


@router.put("/{post_id}/image", response_model=SetPostImageResponse)
async def set_post_image(
    post_id: UUID,
    set_post_image_use_case: FromDishka[SetPostImageUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    file: UploadFile = File(...),
    auth_token: str | None = Cookie(default=None),
) -> SetPostImageResponse:
    """Upload or replace a post's image (author only).

    Args:
        post_id: Post UUID
        set_post_image_use_case: Set post image use case from DI
        get_current_user_use_case: Get current user use case from DI
        file: Uploaded image (multipart form field ``file``)
        auth_token: JWT token from cookie

    Returns:
        The stored image and whether a previous one was replaced

    Raises:
        HTTPException: 403 for non-authors, 502 if object storage fails
    """
    user = await authenticate(auth_token, get_current_user_use_case)
    data = await file.read()

    try:
        return await set_post_image_use_case.execute(
            SetPostImageRequest(
                post_id=str(post_id),
                user_id=user.user_id,
                data=data,
                filename=file.filename,
                content_type=file.content_type,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "upload post image")
