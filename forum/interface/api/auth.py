"""Request authentication helpers shared by the routes."""

from fastapi import HTTPException, status

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from forum.domain.error import NotFoundError
from forum.interface.error import to_http_exception
from forum.util.jwt import JWTError


async def authenticate(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse:
    """Resolve the ``auth_token`` cookie to the current user.

    Args:
        auth_token: JWT token from cookie
        get_current_user_use_case: Get current user use case from DI

    Returns:
        The authenticated user

    Raises:
        HTTPException: 401 without a valid token, 404 when the token's user
            is unknown, 403 when the user is banned
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except Exception as e:
        raise to_http_exception(e, "authenticate")


async def authenticate_optional(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse | None:
    """Like :func:`authenticate` but anonymous requests get None.

    An invalid or stale token is treated as anonymous. A banned user is
    still rejected.
    """
    if not auth_token:
        return None

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, NotFoundError):
        return None
    except Exception as e:
        raise to_http_exception(e, "authenticate")


def require_admin(user: GetCurrentUserResponse) -> None:
    """Reject non-admin users with 403."""
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
