"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import (
    GetPostRequest,
    GetPostUseCase,
    PollOptionItem,
    PostItem,
    build_post_item,
)
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .set_post_image import (
    SetPostImageRequest,
    SetPostImageResponse,
    SetPostImageUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PollOptionItem",
    "PostItem",
    "SetPostImageRequest",
    "SetPostImageResponse",
    "SetPostImageUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
    "build_post_item",
]
