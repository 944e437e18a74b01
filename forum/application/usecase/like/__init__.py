"""Like use cases."""

from .get_post_likes import (
    GetPostLikesRequest,
    GetPostLikesResponse,
    GetPostLikesUseCase,
    LikeItem,
)
from .like_post import (
    DislikePostResponse,
    DislikePostUseCase,
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
)

__all__ = [
    "DislikePostResponse",
    "DislikePostUseCase",
    "GetPostLikesRequest",
    "GetPostLikesResponse",
    "GetPostLikesUseCase",
    "LikeItem",
    "LikePostRequest",
    "LikePostResponse",
    "LikePostUseCase",
]
