"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .sync_user import (
    SyncUserPayload,
    SyncUserRequest,
    SyncUserResponse,
    SyncUserUseCase,
)

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "SyncUserPayload",
    "SyncUserRequest",
    "SyncUserResponse",
    "SyncUserUseCase",
]
