"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Request, Response
from pydantic import BaseModel

from forum.application.usecase.auth import GetCurrentUserUseCase, SyncUserUseCase
from forum.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from forum.application.usecase.auth.sync_user import SyncUserRequest, SyncUserResponse
from forum.domain.error import NotFoundError
from forum.interface.error import to_http_exception
from forum.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.post("/webhook", response_model=SyncUserResponse)
async def sync_user_webhook(
    request: Request,
    sync_user_use_case: FromDishka[SyncUserUseCase],
    x_webhook_signature: str | None = Header(default=None),
) -> SyncUserResponse:
    """Receive a user sync event from the identity provider.

    The body is verified against the ``X-Webhook-Signature`` header (hex
    HMAC-SHA256 of the raw body) before it is parsed.

    Args:
        request: Raw request, read for its body
        sync_user_use_case: Sync user use case from DI
        x_webhook_signature: Signature header

    Returns:
        The synced user and whether it was created

    Raises:
        HTTPException: 401 on a bad signature, 400 on a malformed payload,
            409 when the username belongs to another account
    """
    body = await request.body()

    try:
        result = await sync_user_use_case.execute(
            SyncUserRequest(body=body, signature=x_webhook_signature)
        )
    except Exception as e:
        raise to_http_exception(e, "sync user")

    logfire.info(
        "User synced from identity provider",
        user_id=result.user_id,
        created=result.created,
    )
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing authentication cookie.

    Args:
        response: FastAPI response object

    Returns:
        Logout success message
    """
    response.delete_cookie(key="auth_token", path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it will return
    authenticated=false instead of raising an error. Banned users get 403.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Authentication status with user information if authenticated
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)

    except JWTError:
        # Invalid or expired token - this is expected behavior, not an error
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # Token is valid but the identity provider has not synced the user yet
        return AuthStatusResponse(authenticated=False)
    except Exception as e:
        raise to_http_exception(e, "get current user")
