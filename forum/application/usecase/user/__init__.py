"""User use cases."""

from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user_points import (
    GetUserPointsRequest,
    GetUserPointsResponse,
    GetUserPointsUseCase,
    PointEntryItem,
)
from .get_user_profile import GetUserProfileRequest, GetUserProfileUseCase, UserProfile
from .list_users import (
    EnrolledUserItem,
    ListEnrolledUsersRequest,
    ListEnrolledUsersResponse,
    ListEnrolledUsersUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UserListItem,
)
from .set_user_flags import SetUserFlagsRequest, SetUserFlagsUseCase
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "EnrolledUserItem",
    "GetUserPointsRequest",
    "GetUserPointsResponse",
    "GetUserPointsUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "ListEnrolledUsersRequest",
    "ListEnrolledUsersResponse",
    "ListEnrolledUsersUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "PointEntryItem",
    "SetUserFlagsRequest",
    "SetUserFlagsUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
    "UserListItem",
    "UserProfile",
]
